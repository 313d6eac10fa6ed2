"""
Department Write API
"""

import logging

from ...config import DirectoryConfig
from ...core import TableGateway, create_table_gateway
from ...models import Department

logger = logging.getLogger(__name__)


class DepartmentWriteApi:
    """Write-only API for department records."""

    def __init__(self, gateway: TableGateway):
        self.gateway = gateway

    @classmethod
    def from_config(cls, config: DirectoryConfig, dynamodb=None) -> 'DepartmentWriteApi':
        gateway = create_table_gateway(
            config,
            Department.Meta.table_name,
            partition_key=Department.Meta.partition_key,
            dynamodb=dynamodb
        )
        return cls(gateway)

    def save_department(self, department: Department) -> None:
        """
        Store a department record.

        DynamoDB Operation: PutItem without condition (upsert).

        Args:
            department: Department to store
        """
        self.gateway.put_item(department.to_dynamodb_item())
        logger.info(f"Saved department: {department.dept_id}")
