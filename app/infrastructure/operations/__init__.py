"""Operation result types and status enums.

Standardized result types shared by translation backends and storage
helpers, plus the classifier that maps AWS SDK errors onto them.
"""

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
]
