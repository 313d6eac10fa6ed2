"""
Core infrastructure components for DynamoDB operations.

- TableGateway: record store adapter over one boto3 DynamoDB table
- Factory functions for creating resources and gateways
"""

from .table_gateway import (
    TableGateway,
    configure_logging,
    create_dynamodb_resource,
    create_table_gateway,
    map_botocore_error,
    map_dynamodb_error,
)

__all__ = [
    "TableGateway",
    "configure_logging",
    "create_dynamodb_resource",
    "create_table_gateway",
    "map_botocore_error",
    "map_dynamodb_error",
]
