"""Errors raised by the reconciler clients."""

from __future__ import annotations


class ReconcilerAPIError(RuntimeError):
    """Base class for every failed call against the reconciler."""


class ReconcilerTransportError(ReconcilerAPIError):
    """Raised when no response was obtained (connection, read or timeout failure)."""

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class UnexpectedStatusError(ReconcilerAPIError):
    """Raised when the reconciler answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str,
        method: str,
        url: str,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class ReconcilerDecodeError(ReconcilerAPIError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message)
        self.body = body
