"""Infrastructure modules for the translation service.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, AwsSettings)
- i18n: Chained translation backends
- operations: Operation results and error classification
"""

# Configuration
from infrastructure.configuration import settings

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "settings",
    # Operations
    "OperationResult",
    "OperationStatus",
]
