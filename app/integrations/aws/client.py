"""AWS client helpers.

Centralized client creation, pagination and error classification for AWS API
calls. Every call returns an OperationResult; exceptions raised by boto3 are
classified and logged instead of propagated.

Calls are not retried. Callers treat a failed call as "nothing found" or a
falsy write result.

Usage:
    result = execute_aws_api_call(
        service_name="dynamodb",
        method="scan",
        keys=["Items"],
        force_paginate=True,
        TableName="i18n_translations",
    )
    if result.is_success:
        items = result.data
"""

from typing import Any, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from core.logging import get_module_logger
from infrastructure.configuration import settings
from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult

logger = get_module_logger()


def get_aws_client(
    service_name: str,
    client_config: Optional[dict] = None,
) -> BaseClient:
    """Create a boto3 AWS service client.

    Args:
        service_name: The name of the AWS service.
        client_config: Client configuration (defaults to the configured
            region and optional endpoint override).
    """
    if client_config is None:
        client_config = {"region_name": settings.aws.AWS_REGION}
        if settings.aws.ENDPOINT_URL:
            client_config["endpoint_url"] = settings.aws.ENDPOINT_URL
    session = boto3.Session()
    return session.client(service_name, **client_config)


def _paginate_all_results(
    client: BaseClient, method: str, keys: Optional[List[str]] = None, **kwargs
) -> List[Any]:
    paginator = client.get_paginator(method)
    results: List[Any] = []
    for page in paginator.paginate(**kwargs):
        if keys is None:
            for key, value in page.items():
                if key == "ResponseMetadata":
                    continue
                if isinstance(value, list):
                    results.extend(value)
                else:
                    results.append(value)
        else:
            for key in keys:
                if key in page:
                    results.extend(page[key])
    return results


def execute_aws_api_call(
    service_name: str,
    method: str,
    keys: Optional[List[str]] = None,
    client_config: Optional[dict] = None,
    force_paginate: bool = False,
    **kwargs,
) -> OperationResult:
    """Execute a single AWS API call and wrap the outcome.

    Args:
        service_name: The name of the AWS service.
        method: The client method to call.
        keys: Keys to collect from each page when paginating.
        client_config: Client configuration override.
        force_paginate: Collect every page through the method's paginator.
        **kwargs: Keyword arguments for the API call.

    Returns:
        OperationResult: SUCCESS with the response (or collected items), or
        the classified error.
    """
    function_name = f"{service_name}_{method}"
    try:
        client = get_aws_client(service_name, client_config)
        if force_paginate:
            data = _paginate_all_results(client, method, keys, **kwargs)
        else:
            data = getattr(client, method)(**kwargs)
    except Exception as e:  # pylint: disable=broad-except
        result = classify_aws_error(e)
        logger.error(
            "aws_api_error",
            function=function_name,
            error=str(e),
            error_code=result.error_code,
        )
        return result

    logger.debug("aws_api_call_success", function=function_name)
    return OperationResult.success(data=data, message=f"{function_name} succeeded")
