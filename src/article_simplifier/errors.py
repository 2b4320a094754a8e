"""
Exception types for the article simplifier.

The text-processing core never raises for string input; these cover the
surrounding layer (level parsing, lexicon loading) where bad input has to
surface to the caller.
"""

from typing import Any, Dict, Optional


class SimplifierError(Exception):
    """Base exception for article simplifier errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "SIMPLIFIER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class UnknownLevelError(SimplifierError, ValueError):
    """Raised when a proficiency level name cannot be resolved."""

    def __init__(self, value: Any, choices: Optional[list] = None):
        super().__init__(
            message=f"Unknown proficiency level: {value!r}",
            error_code="UNKNOWN_LEVEL",
            details={"value": value, "choices": choices or []},
        )


class VocabularyLoadError(SimplifierError):
    """Raised when an external vocabulary file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="VOCABULARY_LOAD_ERROR",
            details={"path": path},
        )
