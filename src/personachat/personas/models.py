"""Data models for personas.

A persona is a named preset that frames how the model answers.
The set of personas is closed: every consumer switches over PersonaId.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PersonaId(str, Enum):
    """Identifiers of the available personas."""

    CUSTOMER_SERVICE = "customer-service"
    MENTAL_HEALTH = "mental-health"
    LEARNING = "learning"
    FUN_CHAT = "fun-chat"


class Persona(BaseModel):
    """A chat persona with its instruction template."""

    model_config = ConfigDict(frozen=True)

    id: PersonaId = Field(description="Persona identifier")
    name: str = Field(description="Display name")
    description: str = Field(description="One-line description shown in the picker")
    instruction: str = Field(description="System framing prepended to every user message")
    welcome: str = Field(description="Greeting inserted when a conversation starts")
