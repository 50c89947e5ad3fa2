"""Failure kinds of a single generation request.

Every error carries a human-readable message that can be shown to the
user as-is, and a short title for notifications.
"""


class LLMError(Exception):
    """Base class for generation failures."""

    title = "Error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CredentialMissingError(LLMError):
    """No API key is configured."""

    title = "API Key Required"

    def __init__(self, message: str = "Please enter your Gemini API key first."):
        super().__init__(message)


class AuthenticationError(LLMError):
    """The endpoint refused the API key."""

    title = "Authentication Failed"


class ConnectivityError(LLMError):
    """The request never got a response (DNS, connect, TLS, read errors)."""

    title = "Connection Failed"


class RequestRejectedError(LLMError):
    """The endpoint answered with a non-2xx status."""

    title = "Request Rejected"

    @property
    def is_rate_limited(self) -> bool:
        """True when the rejection is a quota or rate limit (HTTP 429)."""
        return self.status_code == 429


class EmptyResponseError(LLMError):
    """The endpoint answered but returned no usable candidate."""

    title = "Empty Response"


__all__ = [
    "AuthenticationError",
    "ConnectivityError",
    "CredentialMissingError",
    "EmptyResponseError",
    "LLMError",
    "RequestRejectedError",
]
