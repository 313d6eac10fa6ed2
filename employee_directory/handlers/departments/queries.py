"""
Department Read API

Unlike employees, a missing department is reported as None rather than an
exception; the create activity uses this for its exists-check.
"""

import logging
from typing import Optional

from ...config import DirectoryConfig
from ...core import TableGateway, create_table_gateway
from ...models import Department

logger = logging.getLogger(__name__)


class DepartmentReadApi:
    """Read-only API for department records."""

    def __init__(self, gateway: TableGateway):
        self.gateway = gateway

    @classmethod
    def from_config(cls, config: DirectoryConfig, dynamodb=None) -> 'DepartmentReadApi':
        gateway = create_table_gateway(
            config,
            Department.Meta.table_name,
            partition_key=Department.Meta.partition_key,
            dynamodb=dynamodb
        )
        return cls(gateway)

    def get_department(self, dept_id: str) -> Optional[Department]:
        """
        Get a department by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            dept_id: Department identifier

        Returns:
            Department if found, None otherwise
        """
        item = self.gateway.get_item(Department.Meta.build_key(dept_id))
        if item is None:
            return None

        return Department.from_dynamodb_item(item)
