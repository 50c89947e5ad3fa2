"""Google Gemini provider implementation.

Uses the official Google GenAI SDK for async single-turn generation.
Reference: https://github.com/googleapis/python-genai

Note: Gemini can return a response without usable text when the prompt or
the candidate is blocked by safety filtering. That case is reported as an
EmptyResponseError instead of being retried.
"""

from collections.abc import Callable
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import (
    AuthenticationError,
    ConnectivityError,
    CredentialMissingError,
    EmptyResponseError,
    LLMError,
    RequestRejectedError,
)

DEFAULT_MODEL = "gemini-2.0-flash"

DebugCallback = Callable[[str, str, str], None]


def build_prompt(instruction: str, message: str) -> str:
    """Combine persona framing and the user message into one input text."""
    if not instruction.strip():
        return message
    return f"{instruction}\n\nUser: {message}"


class GeminiProvider(LLMProvider):
    """Google Gemini provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - Prompt layout (instruction and message in a single user turn)
    - Mapping SDK and transport exceptions to LLMError subclasses
    - Extraction of the first candidate's text
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float | None = None,
        client: Any | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Model name (gemini-2.0-flash, gemini-2.5-flash, ...)
            temperature: Sampling temperature, None keeps the model default
            client: Pre-built genai client (used by tests)
            **client_kwargs: Additional kwargs for genai.Client

        Raises:
            CredentialMissingError: If api_key is blank
        """
        if not api_key or not api_key.strip():
            raise CredentialMissingError()

        self._model = model
        self._temperature = temperature
        self._client = client if client is not None else genai.Client(api_key=api_key, **client_kwargs)
        self._debug_callback: DebugCallback | None = None

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set debug callback for logging.

        Args:
            callback: Function(level, component, message) or None to disable
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "LLM", message)

    def _build_config(self) -> types.GenerateContentConfig | None:
        if self._temperature is None:
            return None
        return types.GenerateContentConfig(temperature=self._temperature)

    def _extract_content(self, response: Any) -> str:
        """Extract text from the first candidate.

        Args:
            response: Gemini GenerateContentResponse

        Returns:
            Stripped text of the first candidate

        Raises:
            EmptyResponseError: If there is no candidate or it has no text
        """
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            feedback = getattr(response, "prompt_feedback", None)
            block_reason = getattr(feedback, "block_reason", None) if feedback else None
            if block_reason:
                raise EmptyResponseError(f"The request was blocked by the model ({block_reason}).")
            raise EmptyResponseError("The model returned no response. Please try again.")

        content = candidates[0].content
        parts = content.parts if content and content.parts else []
        texts = [part.text for part in parts if getattr(part, "text", None)]
        text = "".join(texts).strip()
        if not text:
            raise EmptyResponseError("The model returned an empty response. Please try again.")
        return text

    def _map_api_error(self, exc: errors.APIError) -> LLMError:
        """Translate an SDK APIError into the matching LLMError."""
        code = getattr(exc, "code", None)
        detail = getattr(exc, "message", None) or str(exc)
        if code in (401, 403) or (code == 400 and "api key" in detail.lower()):
            return AuthenticationError(
                f"Your Gemini API key was rejected: {detail}",
                status_code=code,
            )
        if code == 429:
            return RequestRejectedError(
                f"Quota or rate limit exceeded: {detail}",
                status_code=code,
            )
        return RequestRejectedError(
            f"Gemini API request failed ({code}): {detail}",
            status_code=code,
        )

    async def generate_response(self, instruction: str, message: str) -> str:
        """Generate a reply with one generateContent call.

        Args:
            instruction: Persona framing (may be empty)
            message: User message

        Returns:
            Text of the first candidate

        Raises:
            AuthenticationError: Key refused by the endpoint
            ConnectivityError: Transport failure
            RequestRejectedError: Any other non-2xx status
            EmptyResponseError: No usable candidate or an unparseable body
        """
        contents = [
            types.Content(
                role="user",
                parts=[types.Part(text=build_prompt(instruction, message))],
            )
        ]

        self._debug("debug", f"generate_content model={self._model} chars={len(message)}")
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=self._build_config(),
            )
        except errors.APIError as e:
            mapped = self._map_api_error(e)
            self._debug("error", f"API error {mapped.status_code}: {mapped.message}")
            raise mapped from e
        except httpx.TransportError as e:
            self._debug("error", f"Transport error: {e}")
            raise ConnectivityError(
                "Could not reach the Gemini API. Please check your network connection."
            ) from e
        except (errors.UnknownApiResponseError, httpx.DecodingError) as e:
            # 2xx with a body the SDK could not parse
            self._debug("error", f"Unparseable response: {e}")
            raise EmptyResponseError(
                "The model returned an unexpected response. Please try again."
            ) from e

        text = self._extract_content(response)
        self._debug("info", f"Received {len(text)} chars")
        return text

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
