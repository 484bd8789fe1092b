"""Error types raised by services and rendered as ``{"message": ...}`` responses."""

from __future__ import annotations


class PizzaHubError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(PizzaHubError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class RecordNotFoundError(PizzaHubError):
    """Raised when an id does not match any record of a collection."""

    def __init__(self, message: str):
        super().__init__(message, 404)
