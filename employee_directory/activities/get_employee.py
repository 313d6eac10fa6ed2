import logging

from ..handlers import EmployeeReadApi
from ..models import (
    GetAllActiveEmployeesRequest,
    GetAllActiveEmployeesResult,
    GetEmployeeRequest,
    GetEmployeeResult,
)

logger = logging.getLogger(__name__)


class GetEmployeeActivity:
    """Load one employee; EmployeeNotFoundError propagates to the caller."""

    def __init__(self, read_api: EmployeeReadApi):
        self.read_api = read_api

    def handle_request(self, request: GetEmployeeRequest) -> GetEmployeeResult:
        logger.info(f"Received GetEmployeeRequest {request}")
        employee = self.read_api.get_employee(request.employee_id)
        return GetEmployeeResult(employee=employee)


class GetAllActiveEmployeesActivity:
    """Return one page of active employees after the request's cursor."""

    def __init__(self, read_api: EmployeeReadApi):
        self.read_api = read_api

    def handle_request(self, request: GetAllActiveEmployeesRequest) -> GetAllActiveEmployeesResult:
        logger.info(f"Received GetAllActiveEmployeesRequest {request}")
        employees = self.read_api.list_active_employees(
            start_key=request.employee_start_key,
            forward=request.forward
        )
        return GetAllActiveEmployeesResult(employee_list=employees)
