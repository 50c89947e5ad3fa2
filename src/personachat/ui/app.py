"""Main Textual TUI application.

Orchestrates the UI components and handles user interaction with a ChatSession.
"""

import asyncio
from functools import partial

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..conversation import ChatSession, Notice, ProviderFactory, SessionBusyError
from ..llm import DEFAULT_MODEL, GeminiProvider
from ..personas import DEFAULT_PERSONA, PersonaId
from ..settings import AppConfig, SettingsStore
from .config import INFO_TIMEOUT, NOTICE_TIMEOUT, LogLevel
from .styles import APP_CSS
from .themes import COMPANION_NIGHT
from .widgets import ApiKeyPanel, ChatHistoryWidget, ChatInputBar, DebugPanel, PersonaPicker


class PersonaChatApp(App):
    """Textual TUI for persona chat."""

    CSS = APP_CSS
    TITLE = "AI Chat Companion"
    SUB_TITLE = "Powered by Google Gemini"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+k", "clear_chat", "Clear Chat", priority=True),
        Binding("ctrl+s", "toggle_settings", "Settings", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("ctrl+d", "toggle_debug", "Debug", priority=True),
    ]

    def __init__(
        self,
        settings: SettingsStore,
        provider_factory: ProviderFactory | None = None,
        persona: PersonaId = DEFAULT_PERSONA,
        model: str = DEFAULT_MODEL,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._log_level = log_level
        factory = provider_factory or partial(GeminiProvider, model=model)
        self._session = ChatSession(settings, factory, persona=persona)

    @property
    def session(self) -> ChatSession:
        return self._session

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ApiKeyPanel(api_key=self._settings.api_key, id="settings-panel")
        yield PersonaPicker(selected=self._session.persona.id, id="persona-picker")
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(COMPANION_NIGHT)
        self.theme = "companion-night"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route debug messages to the log panel."""
            log_panel.add_entry(component, message, LogLevel.from_string(level))

        self._session.set_debug_callback(debug_callback)
        self._session.set_notify_callback(self._show_notice)
        self._session.set_update_callback(self._refresh)

        settings_panel = self.query_one("#settings-panel", ApiKeyPanel)
        settings_panel.display = not self._settings.has_api_key

        self._refresh()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _show_notice(self, notice: Notice) -> None:
        self.notify(notice.message, title=notice.title, severity=notice.severity, timeout=NOTICE_TIMEOUT)

    def _refresh(self) -> None:
        """Mirror session state into the widgets."""
        session = self._session
        persona = session.persona

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.border_title = f"{persona.name} Mode"
        chat.render_messages(session.messages)

        self.query_one("#persona-picker", PersonaPicker).set_selected(persona.id)
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(session.is_busy)

        if session.settings_requested:
            self.query_one("#settings-panel", ApiKeyPanel).show()
            session.acknowledge_settings_request()

    def on_persona_picker_selected(self, event: PersonaPicker.Selected) -> None:
        self._session.select_persona(event.persona_id)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        if self._session.is_busy:
            self.notify("Please wait for the current response", severity="warning", timeout=INFO_TIMEOUT)
            return
        self._send_message(event.value)

    @work(exclusive=True)
    async def _send_message(self, text: str) -> None:
        """Send a message as a background async worker."""
        try:
            await self._session.send(text)
        except SessionBusyError as e:
            self.notify(str(e), severity="warning", timeout=INFO_TIMEOUT)

    def on_api_key_panel_saved(self, event: ApiKeyPanel.Saved) -> None:
        panel = self.query_one("#settings-panel", ApiKeyPanel)
        try:
            self._settings.save_api_key(event.api_key)
        except ValueError as e:
            self.notify(str(e), severity="error", timeout=NOTICE_TIMEOUT)
            return
        panel.set_saved(True)
        self.query_one("#debug-panel", DebugPanel).info("Settings", "API key saved")
        self.notify("API key saved", timeout=INFO_TIMEOUT)

    def on_api_key_panel_cleared(self, event: ApiKeyPanel.Cleared) -> None:
        self._settings.clear_api_key()
        self.query_one("#settings-panel", ApiKeyPanel).set_saved(False)
        self.query_one("#debug-panel", DebugPanel).info("Settings", "API key cleared")
        self.notify("API key cleared", timeout=INFO_TIMEOUT)

    def action_clear_chat(self) -> None:
        """Reset the chat to the persona's welcome message. No-op on an empty chat."""
        if self._session.is_busy:
            self.notify("Please wait for the current response", severity="warning", timeout=INFO_TIMEOUT)
            return
        if self._session.conversation.is_empty:
            self.notify("Nothing to clear", severity="warning", timeout=INFO_TIMEOUT)
            return
        self._session.clear()
        self.notify("Chat cleared", timeout=INFO_TIMEOUT)

    def action_toggle_settings(self) -> None:
        """Show or hide the API key panel."""
        is_visible = self.query_one("#settings-panel", ApiKeyPanel).toggle()
        if not is_visible:
            self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=INFO_TIMEOUT)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        message = self._session.conversation.last_assistant_message()
        if message:
            self.copy_to_clipboard(message.content)
            self.notify("Response copied", timeout=INFO_TIMEOUT)
        else:
            self.notify("No response to copy", severity="warning", timeout=INFO_TIMEOUT)


async def run_textual_tui(
    config: AppConfig,
    persona: PersonaId = DEFAULT_PERSONA,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Opens the settings store for the lifetime of the app and closes it on exit.

    Args:
        config: Application configuration
        persona: Persona active at startup
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    with SettingsStore(config.settings_path) as settings:
        app = PersonaChatApp(
            settings=settings,
            persona=persona,
            model=config.model,
            log_level=log_level or config.log_level,
        )
        try:
            await app.run_async()
        except (KeyboardInterrupt, asyncio.CancelledError):
            pass
