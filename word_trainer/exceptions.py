"""Custom exceptions for the word trainer"""

from typing import Any


class WordTrainerError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordSourceError(WordTrainerError):
    """Raised when the raw word list cannot be obtained"""

    def __init__(
        self,
        source: str,
        reason: str,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Unable to load word file '{source}': {reason}",
            {
                "source": source,
                "reason": reason,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.source = source
        self.reason = reason
        self.original_error = original_error
