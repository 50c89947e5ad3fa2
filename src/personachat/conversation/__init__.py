"""Conversation module for personachat.

Provides the in-memory message history and the session controller.
"""

from .conversation import Conversation
from .models import Message, Sender
from .session import ChatSession, Notice, ProviderFactory, SessionBusyError

__all__ = [
    "ChatSession",
    "Conversation",
    "Message",
    "Notice",
    "ProviderFactory",
    "Sender",
    "SessionBusyError",
]
