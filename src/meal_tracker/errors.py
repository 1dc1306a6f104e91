"""Error taxonomy shared by services and adapters."""


class MealTrackerError(Exception):
    """Base error carrying a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(MealTrackerError):
    """Raised when input is malformed or missing."""


class DuplicateError(MealTrackerError):
    """Raised when a food name already exists in the catalog."""


class NotFoundError(MealTrackerError):
    """Raised when a referenced food or meal is absent."""


class StoreError(MealTrackerError):
    """Raised when the underlying record store fails."""
