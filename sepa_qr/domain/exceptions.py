"""
Exception classes for EPC QR payload building.

Exception design:
1. Every exception carries a machine-readable error code
2. Field errors name the offending parameter
3. Messages restate the accepted bound so the caller can fix the input

Errors are raised where the rule is broken and never retried or logged
here. A host app decides whether they are user input errors or bugs.
"""

from typing import Any, Dict, Optional


class SepaQrError(Exception):
    """
    Base exception for all payload errors.

    Every exception includes:
    - Error code (for client handling)
    - Field name (when a single field is at fault)
    - Message (safe to show to users, contains no payment data)
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.field = field
        self.metadata = kwargs

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for API responses"""
        error: Dict[str, Any] = {
            "code": self.error_code,
            "message": self.message,
            "type": self.__class__.__name__,
        }
        if self.field:
            error["field"] = self.field
        return {"error": error}


class MissingValueError(SepaQrError, ValueError):
    """A required value was not provided."""

    def __init__(self, field: str, message: Optional[str] = None, **kwargs):
        super().__init__(
            message=message or f"{field} is required",
            error_code="missing_value",
            field=field,
            **kwargs
        )


class OutOfRangeError(SepaQrError, ValueError):
    """
    A value's length or magnitude is outside the accepted bound.

    The message restates the bound, e.g.
    "The value should have a length between 1 and 70".
    """

    def __init__(self, field: str, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="out_of_range",
            field=field,
            **kwargs
        )


class InvalidStateError(SepaQrError):
    """
    Fields are individually valid but violate a cross-field rule.

    Only raised when the payload is rendered.
    """

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="invalid_state",
            **kwargs
        )
