# Base exception class
from .base import DirectoryServiceError

from .domain_exceptions import (
    ValidationError,
    InvalidAttributeValueError,
    NotFoundError,
    EmployeeNotFoundError,
    StoreError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    # Base exception
    "DirectoryServiceError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "EmployeeNotFoundError",
    "InvalidAttributeValueError",
    "NotFoundError",
    "RetryableError",
    "StoreError",
    "ValidationError",
]
