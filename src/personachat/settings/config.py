"""Application configuration from environment variables.

Environment variables:
    PERSONACHAT_HOME: Directory for the settings file (default: ~/.personachat)
    GEMINI_MODEL: Gemini model name (default: gemini-2.0-flash)
    PERSONACHAT_LOG_LEVEL: Trace log level (debug/info/warning/error), unset hides it
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..llm import DEFAULT_MODEL

SETTINGS_FILENAME = "settings.json"


class AppConfig(BaseModel):
    """Process-level configuration, read once at startup."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".personachat",
        description="Directory holding the persisted settings file"
    )
    model: str = Field(default=DEFAULT_MODEL, description="Gemini model name")
    log_level: str | None = Field(default=None, description="Trace log level, None to hide")

    @property
    def settings_path(self) -> Path:
        """Path of the JSON settings file."""
        return self.data_dir / SETTINGS_FILENAME


def load_config() -> AppConfig:
    """Build an AppConfig from the current environment."""
    values: dict = {}
    home = os.getenv("PERSONACHAT_HOME")
    if home:
        values["data_dir"] = Path(home).expanduser()
    model = os.getenv("GEMINI_MODEL")
    if model:
        values["model"] = model
    log_level = os.getenv("PERSONACHAT_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.lower()
    return AppConfig(**values)
