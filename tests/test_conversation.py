"""Unit tests for the conversation state holder."""
from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from personachat.conversation import Conversation, Message, Sender


def frozen_clock():
    """Clock that never advances."""
    moment = datetime(2024, 5, 1, 12, 0, 0)
    return lambda: moment


class TestMessage:
    """Tests for the Message model."""

    def test_message_is_immutable(self):
        message = Message(id=1, content="hi", sender=Sender.USER, timestamp=datetime.now())

        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore[misc]

    def test_is_user(self):
        now = datetime.now()
        assert Message(id=1, content="a", sender=Sender.USER, timestamp=now).is_user
        assert not Message(id=2, content="b", sender=Sender.ASSISTANT, timestamp=now).is_user


class TestConversation:
    """Tests for Conversation."""

    def test_starts_empty(self):
        conversation = Conversation()

        assert conversation.is_empty
        assert len(conversation) == 0
        assert conversation.messages == ()

    def test_append_order_and_senders(self):
        conversation = Conversation()
        conversation.add_user_message("Hello")
        conversation.add_assistant_message("Hi there")

        assert [m.sender for m in conversation.messages] == [Sender.USER, Sender.ASSISTANT]
        assert [m.content for m in conversation.messages] == ["Hello", "Hi there"]

    def test_timestamps_strictly_increase_with_stalled_clock(self):
        """Test that equal clock readings still produce increasing timestamps."""
        conversation = Conversation(clock=frozen_clock())
        for i in range(5):
            conversation.add_user_message(f"m{i}")

        stamps = [m.timestamp for m in conversation.messages]
        assert all(a < b for a, b in zip(stamps, stamps[1:]))

    def test_ids_unique_across_clear(self):
        """Test that ids keep counting after the history is cleared."""
        conversation = Conversation()
        first = conversation.add_user_message("one")
        conversation.clear()
        second = conversation.add_user_message("two")

        assert second.id > first.id

    def test_reset_leaves_single_welcome(self):
        conversation = Conversation()
        conversation.add_user_message("question")
        conversation.add_assistant_message("answer")

        welcome = conversation.reset("Welcome!")

        assert conversation.messages == (welcome,)
        assert welcome.sender is Sender.ASSISTANT
        assert welcome.content == "Welcome!"

    def test_snapshot_is_detached(self):
        """Test that the messages tuple does not change after later appends."""
        conversation = Conversation()
        conversation.add_user_message("first")
        snapshot = conversation.messages
        conversation.add_user_message("second")

        assert len(snapshot) == 1
        assert len(conversation.messages) == 2

    def test_last_assistant_message(self):
        conversation = Conversation()
        assert conversation.last_assistant_message() is None

        conversation.add_assistant_message("older")
        newer = conversation.add_assistant_message("newer")
        conversation.add_user_message("follow-up")

        assert conversation.last_assistant_message() == newer

    @given(st.lists(st.tuples(st.booleans(), st.text()), max_size=30))
    def test_ids_and_timestamps_monotonic(self, entries):
        """Property test: any append sequence yields increasing ids and timestamps."""
        conversation = Conversation(clock=frozen_clock())
        for is_user, text in entries:
            if is_user:
                conversation.add_user_message(text)
            else:
                conversation.add_assistant_message(text)

        messages = conversation.messages
        assert len(messages) == len(entries)
        assert all(a.id < b.id for a, b in zip(messages, messages[1:]))
        assert all(a.timestamp < b.timestamp for a, b in zip(messages, messages[1:]))
