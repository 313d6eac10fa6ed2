"""
Domain Models for the Employee Directory

Organized by domain:
1. Table metadata helpers
2. Employee
3. Department

Each record model declares a nested ``Meta`` describing the DynamoDB table it
lives in. Key names in ``Meta`` are the stored (camelCase) attribute names.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import DynamoDBMixin, RecordModel


# =============================================================================
# DynamoDB Table Metadata Classes
# =============================================================================

class GSIDefinition:
    """Defines a Global Secondary Index for DynamoDB."""
    def __init__(
        self,
        name: str,
        partition_key: str,
        sort_key: Optional[str] = None
    ):
        self.name = name
        self.partition_key = partition_key
        self.sort_key = sort_key


class TableMeta:
    """Base class for table metadata definitions."""
    table_name: str
    partition_key: str
    sort_key: Optional[str] = None
    gsis: List[GSIDefinition] = []

    @classmethod
    def build_key(cls, pk_value: str, sk_value: Optional[str] = None) -> dict:
        """Build the primary key dictionary for GetItem."""
        key = {cls.partition_key: pk_value}
        if cls.sort_key and sk_value is not None:
            key[cls.sort_key] = sk_value
        return key

    @classmethod
    def get_gsi_by_name(cls, gsi_name: str) -> Optional[GSIDefinition]:
        """Get GSI definition by name."""
        for gsi in cls.gsis:
            if gsi.name == gsi_name:
                return gsi
        return None


# =============================================================================
# Employee Domain
# =============================================================================

class EmployeeStatus(str, Enum):
    """Employment status, the partition key of the status index."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Employee(DynamoDBMixin, RecordModel):
    """
    An employee record.

    ``employee_id`` is the table's partition key and never changes once the
    record exists. ``employee_status`` feeds ``EmployeeStatusIndex``; records
    without a status are simply absent from that index.
    """

    employee_id: str = Field(..., min_length=1, description="Unique employee identifier")
    employee_status: Optional[EmployeeStatus] = Field(None, description="Active or Inactive")

    first_name: Optional[str] = Field(None, description="Given name")
    last_name: Optional[str] = Field(None, description="Family name")
    job_title: Optional[str] = Field(None, description="Job title")
    email: Optional[str] = Field(None, description="Work email address")
    dept_id: Optional[str] = Field(None, description="Department identifier")
    dept_name: Optional[str] = Field(None, description="Department name")
    hire_date: Optional[str] = Field(None, description="Hire date (ISO format)")
    phone_number: Optional[str] = Field(None, description="Contact phone number")
    date_of_birth: Optional[str] = Field(None, description="Date of birth (ISO format)")

    class Meta(TableMeta):
        table_name = "employees"
        partition_key = "employeeId"
        gsis = [
            GSIDefinition(
                name="EmployeeStatusIndex",
                partition_key="employeeStatus",
                sort_key="employeeId"
            )
        ]


# =============================================================================
# Department Domain
# =============================================================================

class Department(DynamoDBMixin, RecordModel):
    """A department record. Name validity is checked by the create activity."""

    dept_id: str = Field(..., min_length=1, description="Unique department identifier")
    dept_name: Optional[str] = Field(None, description="Department name")
    dept_status: Optional[str] = Field(None, description="Department status")

    class Meta(TableMeta):
        table_name = "departments"
        partition_key = "deptId"
