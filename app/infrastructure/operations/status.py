"""Operation status enumeration.

Status codes for operation results. Translation lookups use SUCCESS and
NOT_FOUND; storage operations additionally report transient or permanent
errors.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: Nothing matched (e.g. no translation for a key)
        TRANSIENT_ERROR: Error that may not recur (network, throttling)
        PERMANENT_ERROR: Error that will recur (validation, access denied)
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
