"""Factory functions for CLI.

Centralizes creation of configuration, the settings store and the LLM
provider factory. Hides configuration details from command implementations.
"""

from functools import partial

from rich.console import Console
from rich.text import Text

from ..conversation import ProviderFactory
from ..llm import GeminiProvider
from ..settings import AppConfig, SettingsStore, load_config
from ..ui.config import LogLevel

# Default console for output
_console = Console()

_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


def get_config() -> AppConfig:
    """Read application configuration from the environment.

    Environment variables:
        PERSONACHAT_HOME: Settings directory (default: ~/.personachat)
        GEMINI_MODEL: Gemini model (default: gemini-2.0-flash)
        PERSONACHAT_LOG_LEVEL: Trace log level
    """
    return load_config()


def get_settings(config: AppConfig | None = None) -> SettingsStore:
    """Create the (unopened) settings store for the configured data directory."""
    cfg = config or get_config()
    return SettingsStore(cfg.settings_path)


def get_provider_factory(config: AppConfig | None = None) -> ProviderFactory:
    """Return a callable building a Gemini provider for a given API key."""
    cfg = config or get_config()
    return partial(GeminiProvider, model=cfg.model)


def make_debug_printer(log_level: str | None, console: Console | None = None):
    """Build a debug callback printing to the console, or None when disabled.

    Args:
        log_level: Minimum level to print (debug/info/warning/error), None disables
        console: Optional Rich console for output
    """
    if log_level is None:
        return None

    con = console or _console
    threshold = LogLevel.from_string(log_level)

    def _print(level: str, component: str, message: str) -> None:
        numeric = LogLevel.from_string(level)
        if numeric < threshold:
            return
        line = Text()
        line.append(f"{LogLevel.name(numeric):<5} ", style=_LEVEL_STYLES.get(numeric, "white"))
        line.append(f"[{component}]", style="bold")
        line.append(f" {message}")
        con.print(line)

    return _print


def mask_key(api_key: str) -> str:
    """Mask an API key for display, keeping only its ends."""
    if len(api_key) <= 8:
        return "*" * len(api_key)
    return f"{api_key[:4]}...{api_key[-4:]}"
