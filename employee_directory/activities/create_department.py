import logging

from ..exceptions import InvalidAttributeValueError
from ..handlers import DepartmentReadApi, DepartmentWriteApi
from ..models import CreateDepartmentRequest, CreateDepartmentResult, Department
from ..utils import generate_id, is_valid_name

logger = logging.getLogger(__name__)


class CreateDepartmentActivity:
    """Create a department after checking its name and that its id is free."""

    def __init__(self, read_api: DepartmentReadApi, write_api: DepartmentWriteApi):
        self.read_api = read_api
        self.write_api = write_api

    def handle_request(self, request: CreateDepartmentRequest) -> CreateDepartmentResult:
        """
        Args:
            request: Department attributes; dept_id is generated when omitted

        Returns:
            Result wrapping the saved department

        Raises:
            InvalidAttributeValueError: Invalid name, or dept_id already in use
        """
        logger.info(f"Received CreateDepartmentRequest {request}")

        if not is_valid_name(request.dept_name):
            raise InvalidAttributeValueError(
                f"Department name [{request.dept_name}] contains illegal characters",
                attribute="deptName",
                value=request.dept_name
            )

        dept_id = request.dept_id
        if dept_id:
            if self.read_api.get_department(dept_id) is not None:
                raise InvalidAttributeValueError(
                    f"Department ID [{dept_id}] is already taken",
                    attribute="deptId",
                    value=dept_id
                )
        else:
            dept_id = generate_id()

        department = Department(
            dept_id=dept_id,
            dept_name=request.dept_name,
            dept_status=request.dept_status
        )
        self.write_api.save_department(department)

        return CreateDepartmentResult(department=department)
