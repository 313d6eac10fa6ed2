"""
Department CQRS APIs

Read API:
- get_department: None when absent

Write API:
- save_department: unconditional upsert
"""

from .queries import DepartmentReadApi
from .commands import DepartmentWriteApi

__all__ = [
    "DepartmentReadApi",
    "DepartmentWriteApi",
]
