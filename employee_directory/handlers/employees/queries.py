"""
Employee Read API

Read operations for employee records:
- get_employee: GetItem by employeeId, raising EmployeeNotFoundError on a miss
- list_active_employees: one page of EmployeeStatusIndex for status Active

Listing uses eventually consistent reads, so a record written a moment ago
may be missing from the page that follows it.
"""

import logging
from typing import List, Optional

from ...config import DirectoryConfig
from ...core import TableGateway, create_table_gateway
from ...exceptions import EmployeeNotFoundError
from ...models import Employee, EmployeeStatus

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
STATUS_INDEX = "EmployeeStatusIndex"


class EmployeeReadApi:
    """
    Read-only API for employee records.

    Takes an initialized gateway for the employees table; use
    ``from_config`` to build one from configuration.
    """

    def __init__(self, gateway: TableGateway, page_size: int = PAGE_SIZE):
        if page_size < 1:
            raise ValueError(f"Page size must be at least 1, got {page_size}")
        self.gateway = gateway
        self.page_size = page_size
        self.status_index = Employee.Meta.get_gsi_by_name(STATUS_INDEX)

    @classmethod
    def from_config(cls, config: DirectoryConfig, dynamodb=None) -> 'EmployeeReadApi':
        gateway = create_table_gateway(
            config,
            Employee.Meta.table_name,
            partition_key=Employee.Meta.partition_key,
            dynamodb=dynamodb
        )
        return cls(gateway, page_size=config.page_size)

    def get_employee(self, employee_id: str) -> Employee:
        """
        Get an employee by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            employee_id: Employee identifier

        Returns:
            The stored Employee

        Raises:
            EmployeeNotFoundError: No employee has this id
        """
        item = self.gateway.get_item(Employee.Meta.build_key(employee_id))
        if item is None:
            logger.info(f"Employee not found: {employee_id}")
            raise EmployeeNotFoundError(employee_id)

        return Employee.from_dynamodb_item(item)

    def list_active_employees(
        self,
        start_key: Optional[str] = None,
        forward: bool = True
    ) -> List[Employee]:
        """
        List one page of active employees ordered by employee id.

        DynamoDB Operation: Query on EmployeeStatusIndex
        GSI Structure: PK=employeeStatus, SK=employeeId

        Args:
            start_key: Employee id to resume strictly after; None or "" starts
                       from the first record in the requested direction
            forward: Ascending ids when True, descending when False

        Returns:
            Up to page_size employees, empty when nothing lies past the cursor
        """
        status = EmployeeStatus.ACTIVE.value
        exclusive_start_key = None
        if start_key:
            exclusive_start_key = {
                self.status_index.partition_key: status,
                self.status_index.sort_key: start_key,
            }

        items, _ = self.gateway.query_page(
            index_name=self.status_index.name,
            partition_key=self.status_index.partition_key,
            partition_value=status,
            exclusive_start_key=exclusive_start_key,
            limit=self.page_size,
            scan_forward=forward,
            consistent_read=False
        )

        return [Employee.from_dynamodb_item(item) for item in items]
