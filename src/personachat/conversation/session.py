"""Chat session controller.

Joins the conversation, the active persona, the settings store and the
backend client. Front ends (TUI, CLI) drive a session and receive updates
through callbacks instead of reading its internals.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from ..llm import CredentialMissingError, GeminiProvider, LLMError, LLMProvider
from ..personas import DEFAULT_PERSONA, Persona, PersonaId, get_persona
from ..settings import SettingsStore
from .conversation import Conversation
from .models import Message

ProviderFactory = Callable[[str], LLMProvider]
DebugCallback = Callable[[str, str, str], None]
Severity = Literal["information", "warning", "error"]


@dataclass(frozen=True)
class Notice:
    """A user-facing notification (shown as a toast by the TUI)."""

    title: str
    message: str
    severity: Severity = "information"


class SessionBusyError(RuntimeError):
    """Raised when a message is sent while a request is still outstanding."""


class ChatSession:
    """One conversation with one active persona.

    State machine: idle -> awaiting response -> idle. The busy flag is the
    only guard against concurrent requests.
    """

    def __init__(
        self,
        settings: SettingsStore,
        provider_factory: ProviderFactory = GeminiProvider,
        persona: PersonaId = DEFAULT_PERSONA,
        conversation: Conversation | None = None,
    ) -> None:
        self._settings = settings
        self._provider_factory = provider_factory
        self._persona_id = PersonaId(persona)
        self._conversation = conversation or Conversation()
        self._busy = False
        self._settings_requested = False
        self._notify_callback: Callable[[Notice], None] | None = None
        self._update_callback: Callable[[], None] | None = None
        self._debug_callback: DebugCallback | None = None

    # ---- Callbacks ----

    def set_notify_callback(self, callback: Callable[[Notice], None] | None) -> None:
        """Set the receiver of user-facing notices."""
        self._notify_callback = callback

    def set_update_callback(self, callback: Callable[[], None] | None) -> None:
        """Set a callback fired after every change to messages, persona or busy flag."""
        self._update_callback = callback

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set debug callback for detailed execution logging.

        Args:
            callback: Function(level, component, message) or None to disable
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _notify(self, notice: Notice) -> None:
        if self._notify_callback:
            self._notify_callback(notice)

    def _changed(self) -> None:
        if self._update_callback:
            self._update_callback()

    # ---- State ----

    @property
    def persona(self) -> Persona:
        return get_persona(self._persona_id)

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._conversation.messages

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def is_busy(self) -> bool:
        """True while a request is in flight."""
        return self._busy

    @property
    def settings_requested(self) -> bool:
        """True once a send was blocked for lack of an API key."""
        return self._settings_requested

    def acknowledge_settings_request(self) -> None:
        """Reset the settings prompt flag after the front end has shown the settings."""
        self._settings_requested = False

    # ---- Operations ----

    def select_persona(self, persona_id: PersonaId | str) -> Persona:
        """Make a persona active.

        The persona's welcome message is inserted only when the conversation
        is empty; an ongoing conversation is left untouched.
        """
        self._persona_id = PersonaId(persona_id)
        persona = self.persona
        if self._conversation.is_empty:
            self._conversation.reset(persona.welcome)
        self._debug("info", f"Persona: {persona.id.value}")
        self._changed()
        return persona

    def clear(self) -> Message:
        """Reset the conversation to the active persona's welcome message."""
        welcome = self._conversation.reset(self.persona.welcome)
        self._debug("info", "Conversation cleared")
        self._changed()
        return welcome

    async def send(self, content: str) -> Message | None:
        """Submit a user message and wait for the reply.

        Args:
            content: Text typed by the user

        Returns:
            The assistant message on success, None when nothing was sent
            or the request failed (a notice has been emitted)

        Raises:
            SessionBusyError: If a previous request is still outstanding
        """
        text = content.strip()
        if not text:
            return None

        if self._busy:
            raise SessionBusyError("A response is already being generated")

        api_key = self._settings.api_key
        if not api_key:
            missing = CredentialMissingError()
            self._settings_requested = True
            self._debug("warning", "Send blocked: no API key configured")
            self._notify(Notice(missing.title, missing.message, "error"))
            self._changed()
            return None

        self._conversation.add_user_message(text)
        self._busy = True
        self._changed()

        persona = self.persona
        self._debug("info", f"Sending {len(text)} chars as {persona.id.value}")
        try:
            provider = self._provider_factory(api_key)
            if hasattr(provider, "set_debug_callback"):
                provider.set_debug_callback(self._debug_callback)
            async with provider:
                reply = await provider.generate_response(persona.instruction, text)
        except LLMError as e:
            self._debug("error", f"{type(e).__name__}: {e.message}")
            self._notify(Notice(e.title, e.message, "error"))
            return None
        else:
            message = self._conversation.add_assistant_message(reply)
            self._debug("info", f"Reply received ({len(reply)} chars)")
            return message
        finally:
            self._busy = False
            self._changed()
