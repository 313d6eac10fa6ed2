"""
Result models returned by the directory activities.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .domain_models import Department, Employee


class CreateDepartmentResult(BaseModel):
    department: Department


class CreateEmployeeResult(BaseModel):
    employee: Employee


class GetEmployeeResult(BaseModel):
    employee: Employee


class GetAllActiveEmployeesResult(BaseModel):
    """One page of active employees."""

    employee_list: List[Employee] = Field(default_factory=list)

    @property
    def last_employee_id(self) -> Optional[str]:
        """Cursor for the next page in the same direction, None when empty."""
        if not self.employee_list:
            return None
        return self.employee_list[-1].employee_id
