"""AWS DynamoDB helpers.

Thin, standardized wrappers around the DynamoDB operations the translation
row repository needs. All functions return an OperationResult; scan and
query collect every page.

Usage:
    result = put_item(
        table_name="i18n_translations",
        Item={"locale": {"S": "en"}, "entry_key": {"S": "foo#"}},
    )
    if not result.is_success:
        error = result.message
"""

from typing import Any, Dict

from integrations.aws.client import execute_aws_api_call
from infrastructure.operations.result import OperationResult


def put_item(
    table_name: str,
    Item: Dict[str, Any],
    **kwargs,
) -> OperationResult:
    """Put (create or replace) an item in a DynamoDB table.

    Args:
        table_name: DynamoDB table name
        Item: Item attributes (DynamoDB format)
        **kwargs: Additional parameters for put_item call

    Returns:
        OperationResult: Success or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="put_item",
        TableName=table_name,
        Item=Item,
        **kwargs,
    )


def query(
    table_name: str,
    KeyConditionExpression: str,
    **kwargs,
) -> OperationResult:
    """Query a DynamoDB table, collecting every page.

    Args:
        table_name: DynamoDB table name
        KeyConditionExpression: Query condition
        **kwargs: Additional parameters for query call

    Returns:
        OperationResult: List of items or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="query",
        TableName=table_name,
        KeyConditionExpression=KeyConditionExpression,
        keys=["Items"],
        force_paginate=True,
        **kwargs,
    )


def scan(
    table_name: str,
    **kwargs,
) -> OperationResult:
    """Scan a DynamoDB table, collecting every page.

    Args:
        table_name: DynamoDB table name
        **kwargs: Additional parameters for scan call

    Returns:
        OperationResult: List of items or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="scan",
        TableName=table_name,
        keys=["Items"],
        force_paginate=True,
        **kwargs,
    )
