"""
Domain-Specific Exceptions for the Employee Directory

Organized by category:
1. Record Validation Errors
2. Not Found Errors
3. Store Errors (everything the DynamoDB client raises, translated one-to-one)
"""

from typing import Any, Dict, Optional

from .base import DirectoryServiceError


# =============================================================================
# Record Validation Errors
# =============================================================================

class ValidationError(DirectoryServiceError):
    """Raised when record data fails validation.

    Used for:
    - Pydantic model validation failures on stored items
    - Malformed request objects
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


class InvalidAttributeValueError(ValidationError):
    """Raised by activities when a request attribute is unacceptable.

    Covers names with illegal characters and ids that are already taken.
    """

    def __init__(self, message: str, attribute: Optional[str] = None, value: Any = None):
        self.attribute = attribute
        self.value = value
        errors = {attribute: value} if attribute else None
        super().__init__(message, errors)


# =============================================================================
# Not Found Errors
# =============================================================================

class NotFoundError(DirectoryServiceError):
    """Raised when a requested record does not exist."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of record not found (e.g., 'Employee')
            resource_name: Identifier of the record not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


class EmployeeNotFoundError(NotFoundError):
    """Raised when a get-by-id finds no employee for the requested id."""

    def __init__(self, employee_id: str):
        self.employee_id = employee_id
        super().__init__(
            f"Could not find Employee with ID '{employee_id}'",
            resource_type="Employee",
            resource_name=employee_id
        )


# =============================================================================
# Store Errors
# =============================================================================

class StoreError(DirectoryServiceError):
    """Raised when the underlying DynamoDB call fails.

    Store errors are never recovered locally. Subclasses only classify the
    failure; the botocore error is always kept as ``original_error``.
    """


class ConflictError(StoreError):
    """Raised when a conditional write is rejected by the store.

    Directory writes are unconditional upserts; this is only raised for
    callers passing a condition to ``TableGateway.put_item``.
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: Key of the conflicting record
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


class ConnectionError(StoreError):
    """Raised when DynamoDB cannot be reached or refuses the caller.

    Used for:
    - Network connectivity issues
    - Authentication/authorization failures
    - Missing tables
    - Invalid endpoint configurations
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(StoreError):
    """Raised for throttling, timeouts and temporary unavailability.

    The store client has already spent its configured retries by the time
    this surfaces; callers decide whether to try again.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
