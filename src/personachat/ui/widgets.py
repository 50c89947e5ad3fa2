"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Persona picker buttons and active-state highlighting
- API key entry, reveal toggle and save/clear controls
- Chat message rendering
- Input history management
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Markdown, RichLog, Static, TextArea

from ..conversation import Message as ChatMessage
from ..personas import PersonaId, list_personas
from .config import (
    API_KEY_URL,
    EMPTY_CHAT_HINT,
    INFO_TIMEOUT,
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIME_FORMAT,
    LogLevel,
)


class PersonaPicker(Horizontal):
    """Row of persona buttons; exactly one is marked active."""

    BORDER_TITLE = "Choose Your AI Companion"

    class Selected(Message):
        """Message sent when the user picks a persona."""

        def __init__(self, persona_id: PersonaId) -> None:
            super().__init__()
            self.persona_id = persona_id

    def __init__(self, selected: PersonaId, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._selected = selected

    def compose(self):
        for persona in list_personas():
            button = Button(persona.name, id=f"persona-{persona.id.value}")
            button.tooltip = persona.description
            yield button

    def on_mount(self) -> None:
        self.set_selected(self._selected)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("persona-"):
            event.stop()
            self.post_message(self.Selected(PersonaId(button_id[len("persona-"):])))

    def set_selected(self, persona_id: PersonaId) -> None:
        """Highlight the active persona."""
        self._selected = persona_id
        for button in self.query(Button):
            is_active = button.id == f"persona-{persona_id.value}"
            button.set_class(is_active, "-active")
            button.variant = "primary" if is_active else "default"


class ApiKeyPanel(Vertical):
    """Settings panel for entering, revealing, saving and clearing the API key."""

    BORDER_TITLE = "Gemini API Key"

    class Saved(Message):
        """Message sent when the user saves a key."""

        def __init__(self, api_key: str) -> None:
            super().__init__()
            self.api_key = api_key

    class Cleared(Message):
        """Message sent when the user clears the saved key."""

    def __init__(self, api_key: str = "", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._initial_key = api_key
        self._has_saved_key = bool(api_key)

    def compose(self):
        yield Static(
            "Enter your Google Gemini API key to start chatting. "
            "Your key is stored locally in your settings file.",
            classes="settings-description",
        )
        with Horizontal(id="api-key-row"):
            yield Input(
                value=self._initial_key,
                placeholder="AIzaSy...",
                password=True,
                id="api-key-input",
            )
            yield Button("Show", id="reveal-key-btn")
            yield Button("Save", id="save-key-btn", variant="primary")
            yield Button("Clear", id="clear-key-btn", variant="error")
        yield Static(
            f"Don't have an API key? Get one from Google AI Studio: {API_KEY_URL}",
            classes="settings-hint",
        )

    def on_mount(self) -> None:
        self._update_buttons()

    def _update_buttons(self) -> None:
        value = self.query_one("#api-key-input", Input).value
        self.query_one("#save-key-btn", Button).disabled = not value.strip()
        self.query_one("#clear-key-btn", Button).display = self._has_saved_key

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "api-key-input":
            self._update_buttons()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "api-key-input":
            event.stop()
            self._save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "reveal-key-btn":
            event.stop()
            self.toggle_reveal()
        elif button_id == "save-key-btn":
            event.stop()
            self._save()
        elif button_id == "clear-key-btn":
            event.stop()
            self.query_one("#api-key-input", Input).value = ""
            self.post_message(self.Cleared())

    def _save(self) -> None:
        value = self.query_one("#api-key-input", Input).value.strip()
        if value:
            self.post_message(self.Saved(value))

    def toggle_reveal(self) -> bool:
        """Switch between masked and plain key display. Returns True when revealed."""
        key_input = self.query_one("#api-key-input", Input)
        key_input.password = not key_input.password
        self.query_one("#reveal-key-btn", Button).label = "Show" if key_input.password else "Hide"
        return not key_input.password

    def set_saved(self, has_key: bool) -> None:
        """Reflect whether a key is currently persisted."""
        self._has_saved_key = has_key
        self._update_buttons()

    def show(self) -> None:
        self.display = True

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        self.display = not self.display
        return self.display


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=INFO_TIMEOUT)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history mirroring the session's messages."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered_ids: list[int] = []
        self._showing_placeholder = False

    @property
    def rendered_ids(self) -> list[int]:
        """Ids of the messages currently on screen, oldest first."""
        return list(self._rendered_ids)

    def render_messages(self, messages: Sequence[ChatMessage]) -> None:
        """Sync the display with the given history.

        Appends only new messages when the history grew; rebuilds when it
        was cleared or replaced.
        """
        ids = [m.id for m in messages]
        if ids == self._rendered_ids and (ids or self._showing_placeholder):
            return

        is_extension = (
            self._rendered_ids
            and ids[: len(self._rendered_ids)] == self._rendered_ids
        )
        if is_extension:
            new_messages = messages[len(self._rendered_ids):]
        else:
            self.remove_children()
            self._rendered_ids = []
            self._showing_placeholder = False
            new_messages = messages

        if not messages:
            self.mount(Static(EMPTY_CHAT_HINT, classes="chat-empty"))
            self._showing_placeholder = True
        else:
            for message in new_messages:
                self._render_message(message)
                self._rendered_ids.append(message.id)

        self.border_subtitle = f"{len(messages)} messages" if messages else "Conversation history"
        self.scroll_end(animate=False)

    def _render_message(self, msg: ChatMessage) -> None:
        if msg.is_user:
            prefix = "You"
            border_class = "user-message"
        else:
            prefix = "Assistant"
            border_class = "assistant-message"

        header_text = f"{prefix} [{msg.timestamp.strftime(MESSAGE_TIME_FORMAT)}]"

        container = ClickableMessage(content=msg.content, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(Text(header_text), classes="message-header"))
        if msg.is_user:
            container.compose_add_child(Static(Text(msg.content), classes="message-content"))
        else:
            container.compose_add_child(Markdown(msg.content, classes="message-content"))
        self.mount(container)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        send = Button("Send", id="send-btn", variant="success")
        send.tooltip = "Send message (Ctrl+J)"
        yield send

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        return text_area.cursor_location == (len(lines) - 1, len(lines[-1]))

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self.has_class("-busy"):
            return
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if not value:
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""
        self.post_message(self.Submitted(value))

    def set_busy(self, busy: bool) -> None:
        """Disable sending while a response is outstanding."""
        self.set_class(busy, "-busy")
        send = self.query_one("#send-btn", Button)
        send.disabled = busy
        send.label = "..." if busy else "Send"
        self.query_one("#chat-input", TextArea).read_only = busy

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _COMPONENT_COLORS = {
        "TUI": "cyan",
        "Session": "green",
        "LLM": "magenta",
        "Settings": "bright_blue",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, LLM, Settings)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        line = Text()
        line.append(datetime.now().strftime(LOG_TIMESTAMP_FORMAT), style="dim")
        line.append(" ")
        line.append(f"{LogLevel.name(level):<5}", style=self._LEVEL_COLORS.get(level, "white"))
        line.append(" ")
        line.append(f"[{component}]", style=self._COMPONENT_COLORS.get(component, "white"))
        line.append(f" {message}")
        self.write(line)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
