"""Error classifiers for storage exceptions.

Converts AWS SDK exceptions raised while reading or writing translation rows
into standardized OperationResult objects.

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        response = client.put_item(TableName=table, Item=item)
    except Exception as exc:
        return classify_aws_error(exc)
"""

from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

THROTTLING_CODES = frozenset(
    {
        "ThrottlingException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
    }
)

VALIDATION_CODES = frozenset(
    {
        "ValidationException",
        "ConditionalCheckFailedException",
        "SerializationException",
    }
)


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - Throttling / ProvisionedThroughputExceeded: TRANSIENT_ERROR
    - AccessDeniedException: PERMANENT_ERROR
    - ResourceNotFoundException (missing table): NOT_FOUND
    - Validation errors: PERMANENT_ERROR
    - Other client errors: TRANSIENT_ERROR
    - Non-ClientError (connection, endpoint): TRANSIENT_ERROR

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = "Unknown"
    if hasattr(exc, "response") and exc.response:
        error_code = exc.response.get("Error", {}).get("Code", "Unknown")

    if error_code in THROTTLING_CODES:
        return OperationResult.transient_error(
            "AWS API throttled", error_code="RATE_LIMITED"
        )

    if error_code == "AccessDeniedException":
        return OperationResult.permanent_error(
            "AWS API access denied", error_code="FORBIDDEN"
        )

    if error_code == "ResourceNotFoundException":
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "AWS resource not found",
            error_code="NOT_FOUND",
        )

    if error_code in VALIDATION_CODES:
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}",
            error_code="INVALID_REQUEST",
        )

    return OperationResult.transient_error(
        f"AWS client error: {error_code}",
        error_code="AWS_CLIENT_ERROR",
    )
