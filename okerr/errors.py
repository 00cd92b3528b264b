"""
Exception types for okerr.

Expected failures travel as ``Err`` values; the classes here cover programming
mistakes (handing a combinator something that is not a Result) and invalid
configuration.
"""

from typing import Any, Dict, Optional


class OkerrException(Exception):
    """Base exception for all okerr-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Flat view of the error, e.g. ``log_event("ERROR", str(exc), **exc.to_dict())``."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context
        }


class NotAResultError(OkerrException, TypeError):
    """Raised when a combinator receives something other than Ok or Err."""

    def __init__(self, received: Any, operation: str):
        type_name = type(received).__name__
        super().__init__(
            f"{operation}() expected Ok or Err, got {type_name}",
            error_code="NOT_A_RESULT",
            context={"operation": operation, "received_type": type_name}
        )


class InvalidConfigurationError(OkerrException):
    """Raised when settings loaded from the environment fail validation.

    The underlying pydantic ``ValidationError`` is chained as ``__cause__``.
    """

    def __init__(self, details: str):
        super().__init__(
            f"Invalid okerr configuration: {details}",
            error_code="INVALID_CONFIGURATION",
            context={"details": details}
        )
