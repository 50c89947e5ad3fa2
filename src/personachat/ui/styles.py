"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - single column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Settings Panel - API key entry
   ============================================ */
#settings-panel {
    height: auto;
    margin: 0 1;
    padding: 0 1;
    background: $panel;
    border: round $accent 60%;
    border-title-color: $accent;
    border-title-style: bold;

    & .settings-description {
        color: $text-muted;
        margin-bottom: 1;
    }

    & .settings-hint {
        color: $text-muted;
        margin-top: 1;
    }
}

#api-key-row {
    height: auto;
}

#api-key-input {
    width: 1fr;
}

#api-key-row Button {
    margin: 0 0 0 1;
}

/* ============================================
   Persona Picker
   ============================================ */
#persona-picker {
    height: auto;
    margin: 0 1;
    padding: 0 1;
    border: round $border;
    border-title-color: $foreground;
    border-title-style: bold;
    border-title-align: center;

    & Button {
        width: 1fr;
        margin: 0 1;
    }

    & Button.-active {
        border: tall $accent;
        text-style: bold;
    }
}

/* ============================================
   Chat History Panel - Primary Focus Area
   ============================================ */
#chat-history {
    height: 1fr;
    margin: 0 1;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-empty {
    width: 100%;
    content-align: center middle;
    color: $text-muted;
    padding: 2 0;
}

.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: transparent;
}

/* User messages - violet, right-leaning */
.user-message {
    border-right: tall $primary;
    background: $primary 10%;

    & .message-header {
        color: $primary;
        text-style: bold;
        text-align: right;
    }
}

/* Assistant messages - teal */
.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    margin: 0 1;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    margin: 0 1;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }

    &.-busy {
        border: round $warning;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    text-style: bold;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
    }

    &.-error {
        border: tall $error;
        background: $error 12%;
    }

    &.-warning {
        border: tall $warning;
        background: $warning 12%;
    }
}

Header {
    background: $panel;
    color: $foreground;
}

Footer {
    background: $panel;
}
"""
