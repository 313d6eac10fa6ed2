"""
Handler Layer for the Employee Directory

The record access layer. Each domain has its own subdirectory with
queries.py (read) and commands.py (write); all of them sit on a
TableGateway and never talk to boto3 directly.

Architecture:
activities/ -> handlers/ (this layer) -> core/ (store adapter) -> DynamoDB
"""

from .employees.queries import EmployeeReadApi
from .employees.commands import EmployeeWriteApi
from .departments.queries import DepartmentReadApi
from .departments.commands import DepartmentWriteApi

__all__ = [
    'DepartmentReadApi',
    'DepartmentWriteApi',
    'EmployeeReadApi',
    'EmployeeWriteApi',
]
