"""
Base Model Components

Records are stored with camelCase attribute names (``employeeId``,
``deptName``) while the Python models use snake_case. ``RecordModel``
carries that mapping for every record type and ``DynamoDBMixin`` converts
between model instances and DynamoDB items.

Stored attributes the model does not declare are kept as extra fields, so
a read-modify-write cycle never drops payload written by someone else.
"""

import logging
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class RecordModel(BaseModel):
    """Base for stored records: camelCase aliases, extras preserved."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='allow',
        validate_assignment=True,
        use_enum_values=True
    )


class DynamoDBMixin(BaseModel):
    """
    Mixin providing DynamoDB serialization and deserialization.

    - to_dynamodb_item: model -> item keyed by stored attribute names
    - from_dynamodb_item: item -> model, wrapping failures in ValidationError
    """

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert model to a DynamoDB-compatible item.

        None values are dropped since DynamoDB has no use for empty
        attributes, and enums are stored as their string value.

        Returns:
            Dictionary ready for PutItem

        Example:
            gateway.put_item(employee.to_dynamodb_item())
        """
        dumped_item = self.model_dump(by_alias=True, exclude_none=True)

        def convert_for_dynamodb(obj):
            if isinstance(obj, dict):
                return {k: convert_for_dynamodb(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert_for_dynamodb(list_item) for list_item in obj]
            elif isinstance(obj, Enum):
                return obj.value
            else:
                # Decimal and str pass through; boto3 handles Number types
                return obj

        return convert_for_dynamodb(dumped_item)

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from a DynamoDB item.

        Args:
            item: Item as returned by boto3's table resource

        Returns:
            Model instance

        Raises:
            ValidationError: If the item does not satisfy the model
        """
        try:
            return cls.model_validate(item)
        except PydanticValidationError as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            from ..exceptions import ValidationError
            errors = {".".join(str(p) for p in err['loc']): err['msg'] for err in e.errors()}
            raise ValidationError(
                f"Failed to convert DynamoDB item to {cls.__name__}",
                errors=errors,
                original_error=e
            ) from e
