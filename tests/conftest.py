"""
Test configuration and fixtures for the employee directory.

Provides configuration, moto-backed DynamoDB tables and ready-made
read/write APIs wired to them.
"""

import sys
from pathlib import Path

# Add repository root to path so employee_directory imports without install
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from employee_directory import (
    DirectoryConfig,
    DepartmentReadApi,
    DepartmentWriteApi,
    EmployeeReadApi,
    EmployeeWriteApi,
)


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so no test can reach a real AWS account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture
def mock_config():
    """Directory configuration for mocked testing."""
    return DirectoryConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        environment="test",
        table_prefix=""
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def employees_table(mock_dynamodb_resource):
    """Create the employees table with its status index."""
    return mock_dynamodb_resource.create_table(
        TableName='test_employees',
        KeySchema=[
            {'AttributeName': 'employeeId', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'employeeId', 'AttributeType': 'S'},
            {'AttributeName': 'employeeStatus', 'AttributeType': 'S'}
        ],
        GlobalSecondaryIndexes=[
            {
                'IndexName': 'EmployeeStatusIndex',
                'KeySchema': [
                    {'AttributeName': 'employeeStatus', 'KeyType': 'HASH'},
                    {'AttributeName': 'employeeId', 'KeyType': 'RANGE'}
                ],
                'Projection': {'ProjectionType': 'ALL'}
            }
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def departments_table(mock_dynamodb_resource):
    """Create the departments table."""
    return mock_dynamodb_resource.create_table(
        TableName='test_departments',
        KeySchema=[
            {'AttributeName': 'deptId', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'deptId', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def employee_read_api(mock_config, mock_dynamodb_resource, employees_table):
    """Employee read API with mocked DynamoDB."""
    return EmployeeReadApi.from_config(mock_config, dynamodb=mock_dynamodb_resource)


@pytest.fixture
def employee_write_api(mock_config, mock_dynamodb_resource, employees_table):
    """Employee write API with mocked DynamoDB."""
    return EmployeeWriteApi.from_config(mock_config, dynamodb=mock_dynamodb_resource)


@pytest.fixture
def department_read_api(mock_config, mock_dynamodb_resource, departments_table):
    """Department read API with mocked DynamoDB."""
    return DepartmentReadApi.from_config(mock_config, dynamodb=mock_dynamodb_resource)


@pytest.fixture
def department_write_api(mock_config, mock_dynamodb_resource, departments_table):
    """Department write API with mocked DynamoDB."""
    return DepartmentWriteApi.from_config(mock_config, dynamodb=mock_dynamodb_resource)


# Sample Data Fixtures

@pytest.fixture
def sample_employee_data():
    """Sample employee data as stored in DynamoDB."""
    return {
        "employeeId": "E1",
        "employeeStatus": "Active",
        "firstName": "Ada",
        "lastName": "Lovelace",
        "jobTitle": "Engineer",
        "email": "ada@example.com",
        "deptId": "D100",
        "deptName": "Engineering"
    }


@pytest.fixture
def sample_department_data():
    """Sample department data as stored in DynamoDB."""
    return {
        "deptId": "D100",
        "deptName": "Engineering",
        "deptStatus": "Active"
    }
