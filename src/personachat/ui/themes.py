"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Soft violet-on-navy palette, echoing the companion gradients of the web version
COMPANION_NIGHT = Theme(
    name="companion-night",
    primary="#8b7cf6",      # Violet - main accent, user messages
    secondary="#5ec4d6",    # Teal - assistant messages
    accent="#f4b860",       # Amber - highlights, active persona
    foreground="#e4e6f1",
    background="#0f1020",
    success="#7dd3a0",
    warning="#f2a65a",
    error="#ef6f8b",
    surface="#1a1b30",
    panel="#15162a",
    dark=True,
    variables={
        "block-cursor-foreground": "#0f1020",
        "block-cursor-background": "#c9c2ff",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#e4e6f1",
        "input-cursor-foreground": "#0f1020",
        "input-selection-background": "#8b7cf6 30%",
        "border": "#34365a",
        "border-blurred": "#25274a",
        "scrollbar": "#25274a",
        "scrollbar-hover": "#34365a",
        "scrollbar-active": "#8b7cf6",
        "scrollbar-background": "#15162a",
        "footer-key-foreground": "#f4b860",
        "footer-description-foreground": "#a9acc8",
        "text-muted": "#6d7090",
        "link-color": "#8b7cf6",
        "link-style": "underline",
    },
)
