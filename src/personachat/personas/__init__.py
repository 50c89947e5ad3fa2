"""Persona module for personachat.

Provides the fixed set of chat personas and their instruction templates.
"""

from .catalog import DEFAULT_PERSONA, get_persona, list_personas
from .models import Persona, PersonaId

__all__ = [
    "DEFAULT_PERSONA",
    "Persona",
    "PersonaId",
    "get_persona",
    "list_personas",
]
