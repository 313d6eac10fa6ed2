"""
Activities: request object in, result object out.

Each activity is constructed with the access-layer APIs it needs; nothing is
looked up from a global registry.
"""

from .create_department import CreateDepartmentActivity
from .create_employee import CreateEmployeeActivity
from .get_employee import GetAllActiveEmployeesActivity, GetEmployeeActivity

__all__ = [
    "CreateDepartmentActivity",
    "CreateEmployeeActivity",
    "GetAllActiveEmployeesActivity",
    "GetEmployeeActivity",
]
