import logging

from ..exceptions import EmployeeNotFoundError, InvalidAttributeValueError
from ..handlers import EmployeeReadApi, EmployeeWriteApi
from ..models import CreateEmployeeRequest, CreateEmployeeResult, Employee, EmployeeStatus
from ..utils import generate_id, is_valid_name

logger = logging.getLogger(__name__)


class CreateEmployeeActivity:
    """Create an employee after validating names and id uniqueness.

    EmployeeWriteApi.create_employee overwrites blindly, so uniqueness is
    enforced here: a requested id that get_employee can load is rejected.
    """

    def __init__(self, read_api: EmployeeReadApi, write_api: EmployeeWriteApi):
        self.read_api = read_api
        self.write_api = write_api

    def handle_request(self, request: CreateEmployeeRequest) -> CreateEmployeeResult:
        logger.info(f"Received CreateEmployeeRequest {request}")

        for attribute, value in (("firstName", request.first_name), ("lastName", request.last_name)):
            if not is_valid_name(value):
                raise InvalidAttributeValueError(
                    f"Employee {attribute} [{value}] contains illegal characters",
                    attribute=attribute,
                    value=value
                )

        employee_id = request.employee_id
        if employee_id:
            if self._exists(employee_id):
                raise InvalidAttributeValueError(
                    f"Employee ID [{employee_id}] is already taken",
                    attribute="employeeId",
                    value=employee_id
                )
        else:
            employee_id = generate_id()

        fields = request.model_dump(exclude={'employee_id', 'employee_status'}, exclude_none=True)
        employee = Employee(
            employee_id=employee_id,
            employee_status=request.employee_status or EmployeeStatus.ACTIVE,
            **fields
        )
        self.write_api.create_employee(employee)

        return CreateEmployeeResult(employee=employee)

    def _exists(self, employee_id: str) -> bool:
        try:
            self.read_api.get_employee(employee_id)
        except EmployeeNotFoundError:
            return False
        return True
