# Base mixins
from .base import (
    DynamoDBMixin,
    RecordModel,
)

# Core domain models
from .domain_models import (
    GSIDefinition,
    TableMeta,
    Employee,
    EmployeeStatus,
    Department,
)

# Activity requests and results
from .dtos import (
    CreateDepartmentRequest,
    CreateEmployeeRequest,
    GetEmployeeRequest,
    GetAllActiveEmployeesRequest,
)
from .views import (
    CreateDepartmentResult,
    CreateEmployeeResult,
    GetEmployeeResult,
    GetAllActiveEmployeesResult,
)

__all__ = [
    "DynamoDBMixin",
    "RecordModel",

    "GSIDefinition",
    "TableMeta",
    "Employee",
    "EmployeeStatus",
    "Department",

    # Requests
    "CreateDepartmentRequest",
    "CreateEmployeeRequest",
    "GetEmployeeRequest",
    "GetAllActiveEmployeesRequest",

    # Results
    "CreateDepartmentResult",
    "CreateEmployeeResult",
    "GetEmployeeResult",
    "GetAllActiveEmployeesResult",
]
