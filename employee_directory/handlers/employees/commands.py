"""
Employee Write API
"""

import logging

from ...config import DirectoryConfig
from ...core import TableGateway, create_table_gateway
from ...models import Employee

logger = logging.getLogger(__name__)


class EmployeeWriteApi:
    """Write-only API for employee records."""

    def __init__(self, gateway: TableGateway):
        self.gateway = gateway

    @classmethod
    def from_config(cls, config: DirectoryConfig, dynamodb=None) -> 'EmployeeWriteApi':
        gateway = create_table_gateway(
            config,
            Employee.Meta.table_name,
            partition_key=Employee.Meta.partition_key,
            dynamodb=dynamodb
        )
        return cls(gateway)

    def create_employee(self, employee: Employee) -> None:
        """
        Store an employee record.

        DynamoDB Operation: PutItem without condition. An existing record
        with the same id is overwritten; callers that need uniqueness check
        for it first.

        Args:
            employee: Fully formed employee record
        """
        self.gateway.put_item(employee.to_dynamodb_item())
        logger.info(f"Saved employee: {employee.employee_id}")
