"""Exception types raised by the Pinata client.

Transport failures (``httpx.HTTPError``) and filesystem errors raised while
assembling an upload (``OSError``, ``ValueError``) are not wrapped; they
reach the caller unchanged.
"""

from __future__ import annotations


class PinataError(Exception):
    """Base class for errors raised by pinata_sdk."""


class CredentialError(PinataError, ValueError):
    """An API credential passed to the client is empty."""


class InvalidApiKeyError(CredentialError):
    def __init__(self) -> None:
        super().__init__("api_key must not be empty")


class InvalidSecretApiKeyError(CredentialError):
    def __init__(self) -> None:
        super().__init__("secret_api_key must not be empty")


class ApiError(PinataError):
    """Pinata answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"


class DecodeError(PinataError):
    """A response body did not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
