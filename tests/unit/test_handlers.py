"""
Tests for the employee and department read/write APIs against a mock gateway.
"""

import pytest
from unittest.mock import Mock, patch

from employee_directory.config import DirectoryConfig
from employee_directory.exceptions import EmployeeNotFoundError, RetryableError
from employee_directory.handlers import (
    DepartmentReadApi,
    DepartmentWriteApi,
    EmployeeReadApi,
    EmployeeWriteApi,
)
from employee_directory.models import Department, Employee, EmployeeStatus


@pytest.fixture
def mock_config():
    """Mock configuration for testing."""
    return DirectoryConfig(
        region_name="us-east-1",
        table_prefix="hr",
        environment="dev",
        page_size=20
    )


@pytest.fixture
def mock_gateway():
    """Mock table gateway for testing."""
    gateway = Mock()
    gateway.table_name = "hr_dev_employees"
    gateway.get_item.return_value = None
    gateway.query_page.return_value = ([], None)
    return gateway


class TestEmployeeReadApi:

    def test_from_config(self, mock_config):
        with patch('employee_directory.handlers.employees.queries.create_table_gateway') as mock_create:
            mock_create.return_value = Mock()

            api = EmployeeReadApi.from_config(mock_config)

            mock_create.assert_called_once_with(
                mock_config, "employees", partition_key="employeeId", dynamodb=None
            )
            assert api.page_size == 20

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_page_size_below_one_rejected(self, mock_gateway, page_size):
        with pytest.raises(ValueError, match="Page size must be at least 1"):
            EmployeeReadApi(mock_gateway, page_size=page_size)

    def test_custom_page_size_sent_as_limit(self, mock_gateway):
        api = EmployeeReadApi(mock_gateway, page_size=1)

        api.list_active_employees("E1")

        _, kwargs = mock_gateway.query_page.call_args
        assert kwargs['limit'] == 1

    def test_get_employee_found(self, mock_gateway, sample_employee_data):
        mock_gateway.get_item.return_value = sample_employee_data
        api = EmployeeReadApi(mock_gateway)

        employee = api.get_employee("E1")

        assert employee.employee_id == "E1"
        mock_gateway.get_item.assert_called_once_with({'employeeId': 'E1'})

    def test_get_employee_not_found(self, mock_gateway):
        api = EmployeeReadApi(mock_gateway)

        with pytest.raises(EmployeeNotFoundError, match="Could not find Employee with ID 'E404'") as exc_info:
            api.get_employee("E404")

        assert exc_info.value.employee_id == "E404"

    def test_store_errors_propagate(self, mock_gateway):
        mock_gateway.get_item.side_effect = RetryableError("Throttling")
        api = EmployeeReadApi(mock_gateway)

        with pytest.raises(RetryableError):
            api.get_employee("E1")

    def test_list_active_employees_first_page(self, mock_gateway):
        mock_gateway.query_page.return_value = (
            [{'employeeId': 'E1', 'employeeStatus': 'Active'}],
            None
        )
        api = EmployeeReadApi(mock_gateway)

        employees = api.list_active_employees("", forward=True)

        assert [e.employee_id for e in employees] == ["E1"]
        mock_gateway.query_page.assert_called_once_with(
            index_name="EmployeeStatusIndex",
            partition_key="employeeStatus",
            partition_value="Active",
            exclusive_start_key=None,
            limit=20,
            scan_forward=True,
            consistent_read=False
        )

    def test_list_active_employees_with_cursor_backward(self, mock_gateway):
        api = EmployeeReadApi(mock_gateway, page_size=5)

        employees = api.list_active_employees("E30", forward=False)

        assert employees == []
        _, kwargs = mock_gateway.query_page.call_args
        assert kwargs['exclusive_start_key'] == {'employeeStatus': 'Active', 'employeeId': 'E30'}
        assert kwargs['scan_forward'] is False
        assert kwargs['limit'] == 5

    def test_list_active_employees_none_cursor(self, mock_gateway):
        api = EmployeeReadApi(mock_gateway)

        api.list_active_employees(None)

        _, kwargs = mock_gateway.query_page.call_args
        assert kwargs['exclusive_start_key'] is None


class TestEmployeeWriteApi:

    def test_create_employee_puts_item(self, mock_gateway):
        api = EmployeeWriteApi(mock_gateway)

        api.create_employee(Employee(employee_id="E1", employee_status=EmployeeStatus.ACTIVE))

        mock_gateway.put_item.assert_called_once_with({'employeeId': 'E1', 'employeeStatus': 'Active'})

    def test_create_employee_is_unconditional(self, mock_gateway):
        api = EmployeeWriteApi(mock_gateway)

        api.create_employee(Employee(employee_id="E1"))

        args, kwargs = mock_gateway.put_item.call_args
        assert len(args) == 1
        assert 'condition_expression' not in kwargs


class TestDepartmentApis:

    def test_get_department_absent_returns_none(self, mock_gateway):
        api = DepartmentReadApi(mock_gateway)

        assert api.get_department("D404") is None
        mock_gateway.get_item.assert_called_once_with({'deptId': 'D404'})

    def test_get_department_found(self, mock_gateway, sample_department_data):
        mock_gateway.get_item.return_value = sample_department_data
        api = DepartmentReadApi(mock_gateway)

        department = api.get_department("D100")

        assert department == Department(dept_id="D100", dept_name="Engineering", dept_status="Active")

    def test_save_department(self, mock_gateway):
        api = DepartmentWriteApi(mock_gateway)

        api.save_department(Department(dept_id="D1", dept_name="Sales"))

        mock_gateway.put_item.assert_called_once_with({'deptId': 'D1', 'deptName': 'Sales'})

    def test_from_config(self, mock_config):
        with patch('employee_directory.handlers.departments.commands.create_table_gateway') as mock_create:
            DepartmentWriteApi.from_config(mock_config)

            mock_create.assert_called_once_with(
                mock_config, "departments", partition_key="deptId", dynamodb=None
            )
