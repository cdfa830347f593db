"""
Exception hierarchy for the Todoist client.

Every failure is raised as a subclass of TodoistError so callers can catch
the whole family in one place. Nothing here touches global state.
"""

from __future__ import annotations
from typing import Optional

# Response bodies are cut to this many characters in APIError messages.
ERROR_BODY_LIMIT = 100


class TodoistError(Exception):
    """Base class for all errors raised by doistapi."""


class ValidationError(TodoistError, ValueError):
    """Invalid input, detected locally before any network call."""


class TransportError(TodoistError):
    """The request never produced a response (DNS, connection, timeout...)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class APIError(TodoistError):
    """
    The API answered with an HTTP status >= 400.

    Only the first ERROR_BODY_LIMIT characters of the body are kept; the
    rest is discarded.
    """

    def __init__(self, status_code: int, status: str, body: str = "") -> None:
        self.status_code = status_code
        self.status = status
        self.body = (body or "")[:ERROR_BODY_LIMIT]
        super().__init__(f"API error: status {self.status}, response: {self.body}")


class DecodeError(TodoistError):
    """The response body did not match the expected JSON shape."""


def require(value: object, message: str) -> None:
    """Raise ValidationError(message) when a required value is empty."""
    if not value:
        raise ValidationError(message)


def require_exactly_one(**candidates: object) -> str:
    """
    Check that exactly one of the keyword arguments is non-empty.

    Returns:
        The name of the provided argument

    Raises:
        ValidationError: If none or more than one is provided
    """
    provided = [name for name, value in candidates.items() if value]
    names = " or ".join(candidates)
    if not provided:
        raise ValidationError(f"either {names} must be provided")
    if len(provided) > 1:
        raise ValidationError(f"provide only one of {names}, not {' and '.join(provided)}")
    return provided[0]
