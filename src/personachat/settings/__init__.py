"""Settings module for personachat.

Provides environment configuration and the persisted API key store.
"""

from .config import AppConfig, load_config
from .store import SettingsClosedError, SettingsStore, StoredSettings

__all__ = [
    "AppConfig",
    "SettingsClosedError",
    "SettingsStore",
    "StoredSettings",
    "load_config",
]
