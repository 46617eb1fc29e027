"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from readself.core.exceptions import (
    BookNotFoundError,
    ConfigurationError,
    EngineError,
    InvalidSeedError,
    InvalidSessionError,
    ReadSelfError,
    UnknownAttributeError,
    UnknownGenreError,
    ValidationError,
)


class TestReadSelfError:
    """Tests for the base ReadSelfError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = ReadSelfError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = ReadSelfError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(ReadSelfError("Test", details={"x": 1}))
        assert "ReadSelfError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestEngineExceptions:
    """Tests for engine precondition exceptions."""

    def test_invalid_seed_default_message(self) -> None:
        """Test InvalidSeedError default message and seed context."""
        exc = InvalidSeedError(seed="")
        assert exc.message == "Seed must be a non-empty string"
        assert exc.details["seed"] == ""

    def test_unknown_genre(self) -> None:
        """Test UnknownGenreError with genre."""
        exc = UnknownGenreError("Unknown genre", genre="Cookbooks")
        assert exc.details["genre"] == "Cookbooks"

    def test_unknown_attribute(self) -> None:
        """Test UnknownAttributeError with attribute."""
        exc = UnknownAttributeError("Unknown attribute", attribute="luck")
        assert exc.details["attribute"] == "luck"

    def test_book_not_found(self) -> None:
        """Test BookNotFoundError with book id."""
        exc = BookNotFoundError("Missing", book_id="b-1")
        assert exc.details == {"book_id": "b-1"}

    def test_invalid_session(self) -> None:
        """Test InvalidSessionError with duration."""
        exc = InvalidSessionError("Negative", duration_seconds=-5)
        assert exc.details["duration_seconds"] == -5

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidSeedError(),
            UnknownGenreError("x"),
            UnknownAttributeError("x"),
            BookNotFoundError("x"),
            InvalidSessionError("x"),
        ],
    )
    def test_inheritance(self, exc: EngineError) -> None:
        """Test exception inheritance chain."""
        assert isinstance(exc, EngineError)
        assert isinstance(exc, ReadSelfError)
        assert isinstance(exc, Exception)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_with_config_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Invalid", config_key="neutral_color")
        assert exc.details["config_key"] == "neutral_color"

    def test_without_config_key(self) -> None:
        """Test ConfigurationError keeps only supplied context."""
        assert ConfigurationError("Invalid").details == {}


class TestValidationError:
    """Tests for ValidationError."""

    def test_with_field_info(self) -> None:
        """Test ValidationError with field context."""
        exc = ValidationError("Blank", field_name="name", invalid_value="  ")
        assert exc.details["field_name"] == "name"
        assert exc.details["invalid_value"] == "  "

    def test_catch_all_at_base(self) -> None:
        """Test that all errors can be caught at the base class."""
        with pytest.raises(ReadSelfError):
            raise ValidationError("Blank")
