from .gemini import DEFAULT_MODEL, GeminiProvider, build_prompt

__all__ = ["DEFAULT_MODEL", "GeminiProvider", "build_prompt"]
