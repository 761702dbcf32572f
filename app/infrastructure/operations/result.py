"""Operation result dataclass.

Uniform result type returned by translation backends and storage helpers,
carrying a status, a payload and error information. Backends answer a lookup
with either ``OperationResult.success(value)`` or
``OperationResult.not_found(...)`` so callers branch on the status instead of
catching exceptions.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (translation value, rows, ...)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """True if status is NOT_FOUND."""
        return self.status == OperationStatus.NOT_FOUND

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def not_found(
        cls, message: str = "not found", data: Optional[Any] = None
    ) -> "OperationResult":
        """Create a NOT_FOUND OperationResult.

        Args:
            message: Human-friendly description of what was missing
            data: Optional diagnostic payload (e.g. the normalized key path)

        Returns:
            OperationResult with NOT_FOUND status
        """
        return cls(
            status=OperationStatus.NOT_FOUND,
            message=message,
            data=data,
            error_code="NOT_FOUND",
        )

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a transient error result (network, throttling)."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a permanent error result (validation, access denied)."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
