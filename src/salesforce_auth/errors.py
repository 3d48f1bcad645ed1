"""
Exceptions raised by the Salesforce OAuth client.

Transport failures (httpx timeouts, connection errors, cancellation) are not
wrapped here; they reach the caller exactly as the transport raised them.
"""

from typing import Any


class OAuthClientError(Exception):
    """Base exception for OAuth client operations."""

    pass


class InvalidArgumentError(OAuthClientError, ValueError):
    """Configuration or call input is malformed (e.g. a domain that is not a string)."""

    pass


class MissingGrantParameterError(InvalidArgumentError):
    """A grant was executed without one of its required parameters."""

    pass


class IdentityProviderError(OAuthClientError):
    """
    The identity provider answered with an HTTP error (status >= 400).

    Keeps the provider message, the HTTP status code and the raw decoded body
    so callers can log or inspect the original failure.
    """

    def __init__(self, message: str, status_code: int, response_body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __repr__(self) -> str:
        return f"IdentityProviderError(message={self.message!r}, status_code={self.status_code})"


class MalformedResponseError(OAuthClientError):
    """A successful response is missing a field the client requires."""

    pass


__all__ = [
    "OAuthClientError",
    "InvalidArgumentError",
    "MissingGrantParameterError",
    "IdentityProviderError",
    "MalformedResponseError",
]
