"""Failures raised by completion providers."""

from __future__ import annotations


class CompletionError(Exception):
    """Base class for everything that can go wrong in one exchange."""


class CompletionTransportError(CompletionError):
    """The request never produced a usable HTTP response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CompletionDecodeError(CompletionError):
    """The response body is not JSON or does not have the expected shape."""


class EmptyChoicesError(CompletionError):
    """The response decoded fine but carried zero choices."""
