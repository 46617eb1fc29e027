"""Custom exception hierarchy for ReadSelf.

All exceptions inherit from ReadSelfError so callers can handle any
library failure at a single boundary while keeping the domain context
attached to each error.

Example:
    >>> from readself.core.exceptions import UnknownGenreError
    >>> raise UnknownGenreError("Genre is not recognised", genre="Cookbooks")
"""

from __future__ import annotations

from typing import Any


class ReadSelfError(Exception):
    """Base exception for all ReadSelf errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Engine Domain Exceptions
# =============================================================================


class EngineError(ReadSelfError):
    """Base exception for engine precondition violations.

    These indicate a caller or schema bug, never a runtime data
    condition such as an empty library.
    """


class InvalidSeedError(EngineError):
    """Raised when a derivation is requested with an empty or blank seed."""

    def __init__(
        self,
        message: str = "Seed must be a non-empty string",
        *,
        seed: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid seed error.

        Args:
            message: Human-readable error description.
            seed: The rejected seed value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        combined_details["seed"] = seed
        super().__init__(message, details=combined_details)


class UnknownGenreError(EngineError):
    """Raised when a genre outside the fixed enumeration is supplied."""

    def __init__(
        self,
        message: str,
        *,
        genre: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown genre error.

        Args:
            message: Human-readable error description.
            genre: The unrecognised genre value.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if genre is not None:
            combined_details["genre"] = genre
        super().__init__(message, details=combined_details)


class UnknownAttributeError(EngineError):
    """Raised when an attribute key outside the seven fixed kinds is used."""

    def __init__(
        self,
        message: str,
        *,
        attribute: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown attribute error.

        Args:
            message: Human-readable error description.
            attribute: The unrecognised attribute key.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if attribute is not None:
            combined_details["attribute"] = attribute
        super().__init__(message, details=combined_details)


class BookNotFoundError(EngineError):
    """Raised when removing a book id that is not in the library."""

    def __init__(
        self,
        message: str,
        *,
        book_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if book_id is not None:
            combined_details["book_id"] = book_id
        super().__init__(message, details=combined_details)


class InvalidSessionError(EngineError):
    """Raised when a reading session has a negative duration."""

    def __init__(
        self,
        message: str,
        *,
        duration_seconds: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if duration_seconds is not None:
            combined_details["duration_seconds"] = duration_seconds
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(ReadSelfError):
    """Raised when there are configuration errors.

    This includes missing settings, invalid values, or environment
    variable issues.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ReadSelfError):
    """Raised when data validation fails outside of pydantic models."""

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "ReadSelfError",
    "EngineError",
    "InvalidSeedError",
    "UnknownGenreError",
    "UnknownAttributeError",
    "BookNotFoundError",
    "InvalidSessionError",
    "ConfigurationError",
    "ValidationError",
]
