"""
Error taxonomy for the community board.

NetworkFailure and HttpError come from the remote API and are terminal for
the one user action that caused them. ValidationFailure never reaches the
network layer.
"""

from typing import Iterable, Optional


class BoardError(Exception):
    """Base exception for community board errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkFailure(BoardError):
    """Raised when a request to the remote API could not complete."""
    pass


class HttpError(BoardError):
    """Raised when the remote API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class FetchError(HttpError):
    """Raised when listing a resource fails."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message or f"HTTP error! status: {status_code}", status_code)


class SaveError(HttpError):
    """Raised when a create or update is rejected."""
    pass


class DeleteError(HttpError):
    """Raised when a delete is rejected."""
    pass


class ParseError(BoardError):
    """Raised when a response body does not match the expected record shape."""
    pass


class ValidationFailure(BoardError):
    """Raised when a draft fails the local required-field check."""

    def __init__(self, message: str, missing: Iterable[str] = ()):
        super().__init__(message)
        self.missing = tuple(missing)
