"""
Personachat: a terminal chat companion with switchable personas, backed by Google Gemini.

Each subpackage hides one design decision: personas (what the model is told),
llm (how a request reaches the model), conversation (how history is kept),
settings (where the API key lives), ui and cli (how the user drives it).
"""

__version__ = "0.1.0"

from .conversation import ChatSession, Conversation, Message, Notice, Sender
from .llm import GeminiProvider, LLMError, LLMProvider
from .personas import Persona, PersonaId, get_persona, list_personas
from .settings import AppConfig, SettingsStore, load_config

__all__ = [
    "AppConfig",
    "ChatSession",
    "Conversation",
    "GeminiProvider",
    "LLMError",
    "LLMProvider",
    "Message",
    "Notice",
    "Persona",
    "PersonaId",
    "Sender",
    "SettingsStore",
    "get_persona",
    "list_personas",
    "load_config",
]
