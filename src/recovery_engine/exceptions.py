"""
Custom exceptions for the recovery engine.

The scoring core never raises: degenerate inputs are handled with numeric
guards that return neutral values. These exceptions belong to the layers
around it (sample sources, the HTTP API, the CLI and the training-load /
progression helpers that validate their arguments). Each exception carries:
- A descriptive message
- An error code for API responses
- HTTP status code mapping
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Health data errors
    NO_HEALTH_DATA = "NO_HEALTH_DATA"
    SAMPLE_SOURCE_ERROR = "SAMPLE_SOURCE_ERROR"
    SAMPLE_FILE_INVALID = "SAMPLE_FILE_INVALID"

    # Training errors
    INVALID_THRESHOLD_POWER = "INVALID_THRESHOLD_POWER"


class RecoveryEngineError(Exception):
    """
    Base exception for all recovery engine errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors (400)
# ============================================================================

class ValidationError(RecoveryEngineError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            details=error_details,
        )


class SampleFileError(ValidationError):
    """Raised when a samples file cannot be read or does not match the expected layout."""

    def __init__(
        self,
        path: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        error_details["path"] = path
        super().__init__(
            message=f"Invalid samples file '{path}': {reason}",
            code=ErrorCode.SAMPLE_FILE_INVALID,
            details=error_details,
        )


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class DataNotFoundError(RecoveryEngineError):
    """Raised when there is not enough health data to produce a result."""

    def __init__(
        self,
        message: str = "No HRV or resting heart rate data available",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.NO_HEALTH_DATA,
            status_code=404,
            details=details,
        )


# ============================================================================
# Upstream Errors (502)
# ============================================================================

class SampleSourceError(RecoveryEngineError):
    """Raised by sample sources when the underlying health store fails."""

    def __init__(
        self,
        message: str,
        metric: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if metric:
            error_details["metric"] = metric
        super().__init__(
            message=message,
            code=ErrorCode.SAMPLE_SOURCE_ERROR,
            status_code=502,
            details=error_details,
        )
