"""In-memory conversation state.

Session-only: the history is never persisted and is lost when the app exits.
"""

import itertools
from collections.abc import Callable
from datetime import datetime, timedelta

from .models import Message, Sender


class Conversation:
    """Ordered sequence of chat messages.

    Message ids come from a counter that is never reset, so ids stay unique
    across clears. Timestamps are nudged forward when the clock has not
    advanced, keeping them strictly increasing.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._messages: list[Message] = []
        self._ids = itertools.count(1)
        self._last_timestamp: datetime | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the history, oldest first."""
        return tuple(self._messages)

    @property
    def is_empty(self) -> bool:
        return not self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    def _append(self, content: str, sender: Sender) -> Message:
        message = Message(
            id=next(self._ids),
            content=content,
            sender=sender,
            timestamp=self._next_timestamp(),
        )
        self._messages.append(message)
        return message

    def add_user_message(self, content: str) -> Message:
        """Append a message written by the user."""
        return self._append(content, Sender.USER)

    def add_assistant_message(self, content: str) -> Message:
        """Append a reply from the model (or a welcome greeting)."""
        return self._append(content, Sender.ASSISTANT)

    def clear(self) -> None:
        """Remove every message."""
        self._messages.clear()

    def reset(self, welcome: str) -> Message:
        """Clear the history and start over with a single welcome message."""
        self.clear()
        return self.add_assistant_message(welcome)

    def last_assistant_message(self) -> Message | None:
        """Most recent assistant message, if any."""
        for message in reversed(self._messages):
            if message.sender is Sender.ASSISTANT:
                return message
        return None
