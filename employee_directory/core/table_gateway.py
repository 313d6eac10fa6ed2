"""
Thin DynamoDB Table Gateway

This module is the record store adapter for the directory. It wraps one
boto3 DynamoDB table and exposes the three primitives the access layers
need:

- get_item: direct key lookup, None when absent
- put_item: unconditional (or conditional) write
- query_page: one page of an index range query with an equality condition,
  an exclusive start key, a limit and a direction

Index names and condition expressions are built here from plain values, so
the access layers never handle boto3 condition objects. Every botocore
ClientError is translated by ``map_dynamodb_error``, and every transport
failure (timeouts, unreachable endpoints) by ``map_botocore_error``, into the
package's StoreError hierarchy and re-raised; nothing is retried or
swallowed here.
Retries and timeouts belong to the botocore Config built from
DirectoryConfig.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import boto3
from boto3.dynamodb.conditions import Key
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from ..config import DirectoryConfig
from ..exceptions import (
    ConflictError,
    ConnectionError,
    RetryableError,
    StoreError,
)

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = __name__.split('.')[0]


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> StoreError:
    """Map DynamoDB ClientError to the directory's store exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "Query")
        table_name: The DynamoDB table name
        resource_id: Optional record key for context

    Returns:
        StoreError subclass carrying the original error
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code in ['ConditionalCheckFailedException', 'TransactionConflictException']:
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code == 'ResourceNotFoundException':
        return ConnectionError(f"Table or index not found - {full_message}", original_error=error)

    elif error_code == 'ValidationException':
        return StoreError(f"Validation failed - {full_message}", original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in [
        'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
        'RequestTimeoutException', 'RequestExpiredException'
    ]:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException',
        'ExpiredTokenException', 'InvalidSignatureException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def map_botocore_error(
    error: BotoCoreError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> StoreError:
    """Map botocore transport errors (no DynamoDB response) to store exceptions.

    Timeouts become RetryableError; unreachable endpoints and any other
    BotoCoreError become ConnectionError.

    Args:
        error: The botocore error
        operation: The operation that failed (e.g., "GetItem", "Query")
        table_name: The DynamoDB table name
        resource_id: Optional record key for context

    Returns:
        StoreError subclass carrying the original error
    """
    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error}"

    # ConnectTimeoutError is also an EndpointConnectionError, check timeouts first
    if isinstance(error, (ReadTimeoutError, ConnectTimeoutError)):
        return RetryableError(f"Request timeout - {full_message}", original_error=error)

    elif isinstance(error, EndpointConnectionError):
        return ConnectionError(f"Endpoint unreachable - {full_message}", original_error=error)

    logger.warning(f"Unhandled botocore error {type(error).__name__} mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class TableGateway:
    """
    Thin gateway for one DynamoDB table.

    The boto3 resource is created lazily on first use and is read-only
    afterwards. Pass ``dynamodb`` to share an existing resource (and its
    connection pool) between gateways.
    """

    def __init__(
        self,
        config: DirectoryConfig,
        table_name: str,
        partition_key: Optional[str] = None,
        dynamodb=None
    ):
        """Initialize table gateway.

        Args:
            config: Directory configuration
            table_name: Full name of the DynamoDB table
            partition_key: Stored name of the table's partition key, used for error context
            dynamodb: Optional prebuilt boto3 DynamoDB resource
        """
        self.config = config
        self.table_name = table_name
        self.partition_key = partition_key
        self._dynamodb = dynamodb
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            self._dynamodb = create_dynamodb_resource(self.config)
        return self._dynamodb

    @property
    def table(self):
        """boto3 Table resource for this gateway."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def _resource_id(self, item: Optional[Dict[str, Any]]) -> Optional[str]:
        if not item or not self.partition_key:
            return None
        value = item.get(self.partition_key)
        return str(value) if value is not None else None

    def get_item(self, key: Dict[str, Any], consistent_read: bool = False) -> Optional[Dict[str, Any]]:
        """
        Fetch one item by primary key.

        Args:
            key: Primary key, e.g. {'employeeId': 'E1'}
            consistent_read: Request a strongly consistent read

        Returns:
            The raw item, or None when no item has that key
        """
        try:
            response = self.table.get_item(Key=key, ConsistentRead=consistent_read)
        except ClientError as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, self._resource_id(key)) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "GetItem", self.table_name, self._resource_id(key)) from e

        item = response.get('Item')
        logger.debug(f"GetItem on {self.table_name} {key}: {'hit' if item else 'miss'}")
        return item

    def put_item(self, item: Dict[str, Any], condition_expression=None) -> None:
        """
        Put item into the table.

        Without a condition this is an upsert: an existing item with the same
        key is replaced. The directory's own writes are all upserts; the
        condition is for callers that want create-if-absent in one call
        (e.g. ``Attr('deptId').not_exists()``), which fails with
        ConflictError when the key is taken.

        Args:
            item: Item to store
            condition_expression: Optional boto3 condition for the write
        """
        try:
            put_kwargs = {'Item': item}
            if condition_expression is not None:
                put_kwargs['ConditionExpression'] = condition_expression

            self.table.put_item(**put_kwargs)
            logger.info(f"Put item in {self.table_name}: {self._resource_id(item)}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, self._resource_id(item)) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "PutItem", self.table_name, self._resource_id(item)) from e

    def query_page(
        self,
        index_name: str,
        partition_key: str,
        partition_value: Any,
        exclusive_start_key: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        scan_forward: bool = True,
        consistent_read: bool = False
    ) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """
        Read one page of an index, restricted to a single partition.

        DynamoDB Operation: Query on ``index_name`` with
        ``partition_key = partition_value``, ordered by the index sort key.

        Args:
            index_name: GSI to query
            partition_key: Stored name of the index partition key
            partition_value: Value the partition key must equal
            exclusive_start_key: Resume strictly after this position
            limit: Maximum items to return
            scan_forward: Ascending sort-key order when True, descending when False
            consistent_read: Strong consistency (not supported on GSIs)

        Returns:
            Tuple of (items, last_evaluated_key)
        """
        query_kwargs = {
            'IndexName': index_name,
            'KeyConditionExpression': Key(partition_key).eq(partition_value),
            'ScanIndexForward': scan_forward,
            'ConsistentRead': consistent_read
        }
        if limit is not None:
            query_kwargs['Limit'] = limit
        if exclusive_start_key:
            query_kwargs['ExclusiveStartKey'] = exclusive_start_key

        response = self.query(**query_kwargs)
        items = response.get('Items', [])
        logger.debug(f"Query {index_name} on {self.table_name} returned {len(items)} items")
        return items, response.get('LastEvaluatedKey')

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Execute a DynamoDB Query.

        Raw pass-through to boto3 with error mapping, for query shapes that
        query_page does not cover.

        Args:
            **kwargs: All boto3 query parameters

        Returns:
            Raw DynamoDB response
        """
        try:
            return self.table.query(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name) from e
        except BotoCoreError as e:
            raise map_botocore_error(e, "Query", self.table_name) from e


def create_dynamodb_resource(config: DirectoryConfig):
    """
    Build a boto3 DynamoDB resource from configuration.

    Raises:
        ConnectionError: If the session or resource cannot be created
    """
    try:
        session = boto3.Session(
            aws_access_key_id=config.aws_access_key_id,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.region_name
        )

        dynamodb_config = {
            'region_name': config.region_name
        }

        if config.endpoint_url:
            dynamodb_config['endpoint_url'] = config.endpoint_url

        boto_config = Config(
            retries={'max_attempts': config.retries},
            max_pool_connections=config.max_pool_connections,
            read_timeout=config.timeout_seconds,
            connect_timeout=config.timeout_seconds
        )
        dynamodb_config['config'] = boto_config

        return session.resource('dynamodb', **dynamodb_config)
    except Exception as e:
        logger.error(f"Failed to create DynamoDB resource: {e}")
        raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e


_logging_configured = False


def configure_logging(config: DirectoryConfig) -> None:
    """Apply ``enable_debug_logging`` to the package logger, once per process."""
    global _logging_configured
    if _logging_configured:
        return
    _logging_configured = True

    if config.enable_debug_logging:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG)


def create_table_gateway(
    config: DirectoryConfig,
    table_name: str,
    partition_key: Optional[str] = None,
    dynamodb=None
) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: Directory configuration
        table_name: Base table name; prefixed via config.get_table_name()
        partition_key: Stored name of the table's partition key
        dynamodb: Optional shared boto3 resource

    Returns:
        Configured TableGateway instance
    """
    configure_logging(config)

    full_table_name = config.get_table_name(table_name)
    return TableGateway(config, full_table_name, partition_key=partition_key, dynamodb=dynamodb)
