"""Terminal UI module for personachat.

Provides a Textual-based TUI for persona chat.

Module structure (each module hides a design decision):
- config.py: Constants and log levels
- widgets.py: Custom widgets (persona picker, key panel, chat history, input, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- app.py: Application orchestration (user interaction flow)
"""

from .app import PersonaChatApp, run_textual_tui
from .config import LogLevel
from .widgets import ApiKeyPanel, ChatHistoryWidget, ChatInputBar, DebugPanel, PersonaPicker

__all__ = [
    "ApiKeyPanel",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "PersonaChatApp",
    "PersonaPicker",
    "run_textual_tui",
]
