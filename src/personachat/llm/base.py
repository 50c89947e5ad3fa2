from abc import ABC, abstractmethod
from typing import Any


class LLMProvider(ABC):
    """Abstract base class for the text-generation backend.

    This module hides the design decision of how a request reaches the model.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Translating transport and API failures into LLMError subclasses

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            text = await provider.generate_response(instruction, message)
        # Automatically cleaned up
    """

    @abstractmethod
    async def generate_response(self, instruction: str, message: str) -> str:
        """Generate a single reply.

        Args:
            instruction: Persona framing for the model (may be empty)
            message: The user's message

        Returns:
            Text of the first candidate, stripped of surrounding whitespace

        Raises:
            LLMError: One of its subclasses, depending on the failure kind
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
