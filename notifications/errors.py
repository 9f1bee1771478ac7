"""Errors raised by the notification service and helpers for displaying errors."""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable


class PersistentQuotaExceeded(RuntimeError):
    """Raised when a persistent notification would exceed ``maxPersistentAllow``."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"You cannot create more than {limit} persistent notification")
        self.limit = limit


@runtime_checkable
class ErrorWithDetails(Protocol):
    error_text: str


class DetailedError(Exception):
    """Base for errors that carry a richer text payload, e.g. a server response."""

    def __init__(self, message: str = "", error_text: str | None = None, **extra: Any) -> None:
        super().__init__(message)
        self.error_text = error_text if error_text is not None else message
        self.extra = extra


def has_details(error: BaseException) -> bool:
    return isinstance(error, ErrorWithDetails) and bool(getattr(error, "error_text", None))


def get_error_details(error: BaseException) -> Dict[str, str]:
    """Return ``{"name": ..., "message": ...}`` for showing ``error`` to a user.

    Prefers the detail text, then the exception message, then the type name.
    """
    name = type(error).__name__
    if has_details(error):
        message = error.error_text  # type: ignore[attr-defined]
    else:
        message = str(error) or name
    return {"name": name, "message": message}


__all__ = [
    "PersistentQuotaExceeded",
    "ErrorWithDetails",
    "DetailedError",
    "has_details",
    "get_error_details",
]
