"""Exception hierarchy for gifnar."""


class GifnarError(Exception):
    """Base exception for all gifnar errors."""


class ValidationError(GifnarError):
    """User input cannot be turned into an entry."""


class MissingRequiredError(ValidationError):
    """Date or organization is empty."""

    def __init__(self) -> None:
        super().__init__("Please enter at least Date and Organization.")


class NonPositiveHoursError(ValidationError):
    """Hours parsed to zero or less."""

    def __init__(self, hours: float) -> None:
        self.hours = hours
        super().__init__("Hours must be greater than 0.")


class StorageError(GifnarError):
    """Base exception for persistence errors."""


class StorageUnavailableError(StorageError):
    """The key-value store cannot be read or written."""


class DeserializationError(StorageError):
    """Stored bytes are not a valid entry list."""
