"""Settings layer: key/value application settings from a configuration file."""

from .loader import (
    IllegalConfigurationError,
    Settings,
    SettingsNotLoadedError,
    extract_entries,
    load_settings,
)

__all__ = [
    "IllegalConfigurationError",
    "Settings",
    "SettingsNotLoadedError",
    "extract_entries",
    "load_settings",
]
