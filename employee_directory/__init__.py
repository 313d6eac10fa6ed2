"""
Employee Directory

Employee and department records in DynamoDB, read and written through a
thin table gateway, CQRS-style read/write APIs and request/result
activities.
"""

from .config import DirectoryConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    DirectoryServiceError,
    EmployeeNotFoundError,
    InvalidAttributeValueError,
    NotFoundError,
    RetryableError,
    StoreError,
    ValidationError,
)
from .models import (
    Employee,
    EmployeeStatus,
    Department,
    CreateDepartmentRequest,
    CreateEmployeeRequest,
    GetEmployeeRequest,
    GetAllActiveEmployeesRequest,
    CreateDepartmentResult,
    CreateEmployeeResult,
    GetEmployeeResult,
    GetAllActiveEmployeesResult,
)
from .core import (
    TableGateway,
    create_dynamodb_resource,
    create_table_gateway,
)
from .handlers import (
    DepartmentReadApi,
    DepartmentWriteApi,
    EmployeeReadApi,
    EmployeeWriteApi,
)
from .activities import (
    CreateDepartmentActivity,
    CreateEmployeeActivity,
    GetAllActiveEmployeesActivity,
    GetEmployeeActivity,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DirectoryConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "DirectoryServiceError",
    "EmployeeNotFoundError",
    "InvalidAttributeValueError",
    "NotFoundError",
    "RetryableError",
    "StoreError",
    "ValidationError",

    # Records
    "Employee",
    "EmployeeStatus",
    "Department",

    # Requests and results
    "CreateDepartmentRequest",
    "CreateEmployeeRequest",
    "GetEmployeeRequest",
    "GetAllActiveEmployeesRequest",
    "CreateDepartmentResult",
    "CreateEmployeeResult",
    "GetEmployeeResult",
    "GetAllActiveEmployeesResult",

    # Store adapter
    "TableGateway",
    "create_dynamodb_resource",
    "create_table_gateway",

    # Access layer
    "DepartmentReadApi",
    "DepartmentWriteApi",
    "EmployeeReadApi",
    "EmployeeWriteApi",

    # Activities
    "CreateDepartmentActivity",
    "CreateEmployeeActivity",
    "GetAllActiveEmployeesActivity",
    "GetEmployeeActivity",
]
