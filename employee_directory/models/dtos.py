"""
Request DTOs for the directory activities.

Requests carry exactly what a caller supplies. Optional ids are generated by
the activity; name rules are checked there too, so a request can be built
with any string and rejected later with InvalidAttributeValueError.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .domain_models import EmployeeStatus


class RequestModel(BaseModel):
    """Requests accept both snake_case and the camelCase API field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True
    )


class CreateDepartmentRequest(RequestModel):
    dept_id: Optional[str] = Field(None, description="Requested id; generated when omitted")
    dept_name: Optional[str] = Field(None, description="Department name")
    dept_status: Optional[str] = Field(None, description="Department status")


class CreateEmployeeRequest(RequestModel):
    employee_id: Optional[str] = Field(None, description="Requested id; generated when omitted")
    employee_status: Optional[EmployeeStatus] = Field(None, description="Defaults to Active")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    email: Optional[str] = None
    dept_id: Optional[str] = None
    dept_name: Optional[str] = None
    hire_date: Optional[str] = None
    phone_number: Optional[str] = None
    date_of_birth: Optional[str] = None


class GetEmployeeRequest(RequestModel):
    employee_id: str = Field(..., min_length=1)


class GetAllActiveEmployeesRequest(RequestModel):
    """Cursor request for one page of active employees.

    An empty or missing ``employee_start_key`` starts from the first record
    in the requested direction.
    """

    employee_start_key: Optional[str] = None
    forward: bool = True
