"""Data models for the conversation.

These models define the structure of chat messages, independent of
how they are rendered.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Sequential identifier within the conversation")
    content: str = Field(description="Message text")
    sender: Sender = Field(description="Author of the message")
    timestamp: datetime = Field(description="Creation time, strictly increasing per conversation")

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER
