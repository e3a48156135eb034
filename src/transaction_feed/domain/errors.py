"""Errors raised by the transaction feed."""

from __future__ import annotations


class FetchError(RuntimeError):
    """The underlying backend call failed."""

    def __init__(self, endpoint: str, message: str, status_code: int | None = None) -> None:
        """Initialize the error.

        Args:
            endpoint: Endpoint that was being fetched.
            message: Human readable reason.
            status_code: HTTP status code, if the failure came from an HTTP response.
        """
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.status_code = status_code


class CacheDecodeError(ValueError):
    """A cached entry could not be decoded back into a payload."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cannot decode cache entry {key!r}: {reason}")
        self.key = key
