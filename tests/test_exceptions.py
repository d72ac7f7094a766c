"""Tests for exception hierarchy."""

import pytest

from gifnar.exceptions import (
    DeserializationError,
    GifnarError,
    MissingRequiredError,
    NonPositiveHoursError,
    StorageError,
    StorageUnavailableError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and messages."""

    @pytest.mark.parametrize(
        "exception_class",
        [ValidationError, StorageError, StorageUnavailableError, DeserializationError],
    )
    def test_all_exceptions_inherit_from_base(self, exception_class):
        """All custom exceptions inherit from GifnarError."""
        error = exception_class("specific error")
        assert isinstance(error, GifnarError)
        assert str(error) == "specific error"

    def test_validation_errors(self):
        """Validation errors carry the user-facing messages."""
        assert isinstance(MissingRequiredError(), ValidationError)
        assert str(MissingRequiredError()) == "Please enter at least Date and Organization."
        error = NonPositiveHoursError(0.0)
        assert isinstance(error, ValidationError)
        assert error.hours == 0.0
        assert str(error) == "Hours must be greater than 0."

    def test_storage_errors_are_not_validation_errors(self):
        """Storage errors form a separate branch."""
        assert not issubclass(StorageUnavailableError, ValidationError)
        assert issubclass(DeserializationError, StorageError)
