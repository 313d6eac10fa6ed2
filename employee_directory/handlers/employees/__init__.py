"""
Employee CQRS APIs

Read API:
- get_employee: raises EmployeeNotFoundError on a miss
- list_active_employees: cursor paging over EmployeeStatusIndex

Write API:
- create_employee: unconditional upsert
"""

from .queries import EmployeeReadApi
from .commands import EmployeeWriteApi

__all__ = [
    "EmployeeReadApi",
    "EmployeeWriteApi",
]
