from .base import LLMProvider
from .errors import (
    AuthenticationError,
    ConnectivityError,
    CredentialMissingError,
    EmptyResponseError,
    LLMError,
    RequestRejectedError,
)
from .providers import DEFAULT_MODEL, GeminiProvider, build_prompt

__all__ = [
    "DEFAULT_MODEL",
    "AuthenticationError",
    "ConnectivityError",
    "CredentialMissingError",
    "EmptyResponseError",
    "GeminiProvider",
    "LLMError",
    "LLMProvider",
    "RequestRejectedError",
    "build_prompt",
]
