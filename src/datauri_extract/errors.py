"""Exceptions raised by the extraction pipeline.

All fatal conditions derive from :class:`ExtractError` so callers can abort a
run with a single handler. None of them roll back what was already written.
"""

from __future__ import annotations

from .model.content import LeadInKind


class ExtractError(RuntimeError):
    """Base class for fatal extraction errors."""


class UnterminatedCaptureError(ExtractError):
    """No terminator was found for a payload or its enclosing ``url(``."""

    def __init__(self, offset: int, what: str = "capture") -> None:
        self.offset = offset
        self.what = what
        super().__init__(f"No end to {what} starting at position: {offset}")


class MalformedBase64Error(ExtractError):
    """A payload is not valid base64."""

    def __init__(self, offset: int, cause: Exception | None = None) -> None:
        self.offset = offset
        self.cause = cause
        message = f"Malformed base64 payload at position: {offset}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class UnknownLeadInKindError(ExtractError):
    """A lead-in keyword outside ``url``/``src``/``href`` reached the engine."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        valid = ", ".join(kind.value for kind in LeadInKind)
        super().__init__(f"Unknown match '{keyword}'. Valid kinds: {valid}")


__all__ = [
    "ExtractError",
    "MalformedBase64Error",
    "UnknownLeadInKindError",
    "UnterminatedCaptureError",
]
