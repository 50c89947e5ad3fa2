"""Static persona catalog.

Hides where persona texts come from: display strings live here,
instruction templates live in the prompts package.
"""

from functools import lru_cache
from typing import assert_never

from ..prompts import load_prompt
from .models import Persona, PersonaId

DEFAULT_PERSONA = PersonaId.CUSTOMER_SERVICE


def _build_persona(persona_id: PersonaId) -> Persona:
    match persona_id:
        case PersonaId.CUSTOMER_SERVICE:
            name = "Customer Service"
            description = "Professional and empathetic support"
            welcome = (
                "Hello! I'm here to help you with any questions or issues you might have. "
                "How can I assist you today?"
            )
        case PersonaId.MENTAL_HEALTH:
            name = "Mental Health"
            description = "Gentle, compassionate companion"
            welcome = (
                "Hi there. I'm here to listen and provide support. Remember, you're not alone, "
                "and it's okay to not be okay. What's on your mind today?"
            )
        case PersonaId.LEARNING:
            name = "Learning Assistant"
            description = "Friendly and patient tutor"
            welcome = (
                "Welcome to your learning session! I'm excited to help you explore new topics "
                "and understand complex concepts. What would you like to learn about today?"
            )
        case PersonaId.FUN_CHAT:
            name = "Fun Chat"
            description = "Playful and witty conversation"
            welcome = (
                "Hey there! Ready to have some fun? Whether you want to chat, play games, "
                "or just share some laughs, I'm here for it! What's up?"
            )
        case _:
            assert_never(persona_id)

    return Persona(
        id=persona_id,
        name=name,
        description=description,
        instruction=load_prompt(persona_id.value),
        welcome=welcome,
    )


@lru_cache(maxsize=None)
def get_persona(persona_id: PersonaId | str) -> Persona:
    """Look up a persona by id.

    Args:
        persona_id: PersonaId or its string value (e.g. "fun-chat")

    Returns:
        The persona definition

    Raises:
        ValueError: If the id is not a known persona
    """
    return _build_persona(PersonaId(persona_id))


def list_personas() -> list[Persona]:
    """Return all personas in picker order."""
    return [get_persona(pid) for pid in PersonaId]
