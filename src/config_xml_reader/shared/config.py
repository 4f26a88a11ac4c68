"""Configuration classes for the configuration markup reader.

This module provides immutable configuration objects for the reader core and
for the settings loader that sits on top of it.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional, Tuple

# Characters the reader may treat as insignificant between tokens
ALLOWED_WHITESPACE = " \t"

# Deepest nesting the recursive parser supports within the interpreter stack
MAX_NESTING_DEPTH = 500

DEFAULT_SECTIONS: Dict[str, Tuple[str, str]] = {
    "appsettings": ("key", "value"),
    "connectionstrings": ("name", "connectionstring"),
}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for loading a single markup document.

    Thread-safe due to frozen dataclass implementation; one instance may be
    shared by any number of concurrent loads.
    """

    encoding: str = "utf-8"
    max_depth: int = MAX_NESTING_DEPTH
    whitespace: str = ALLOWED_WHITESPACE
    allow_declaration: bool = True
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if not self.encoding:
            raise ConfigValidationError("encoding cannot be empty", "encoding")
        if self.max_depth <= 0:
            raise ConfigValidationError("max_depth must be > 0", "max_depth")
        if self.max_depth > MAX_NESTING_DEPTH:
            raise ConfigValidationError(
                f"max_depth must be <= {MAX_NESTING_DEPTH}", "max_depth",
                suggestions=[f"Use a value between 1 and {MAX_NESTING_DEPTH}"]
            )
        if not self.whitespace:
            raise ConfigValidationError(
                "whitespace cannot be empty", "whitespace",
                suggestions=["Use the default of space and tab"]
            )
        unsupported = set(self.whitespace) - set(ALLOWED_WHITESPACE)
        if unsupported:
            raise ConfigValidationError(
                f"whitespace may only contain space and tab, got {sorted(unsupported)!r}",
                "whitespace",
            )

    def override(self, **kwargs: Any) -> "ReaderConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ReaderConfig().override(max_depth=50)
            >>> config.max_depth
            50
        """
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReaderConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_json(cls, json_str: str) -> "ReaderConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def default(cls) -> "ReaderConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "ReaderConfig":
        """Create a configuration that rejects declarations and deep nesting."""
        return cls(max_depth=64, allow_declaration=False)


@dataclass(frozen=True)
class SettingsConfig:
    """Configuration for extracting key/value settings from a loaded tree."""

    config_file: str = "web.config"
    root_name: str = "configuration"
    entry_name: str = "add"
    sections: Dict[str, Tuple[str, str]] = field(
        default_factory=lambda: dict(DEFAULT_SECTIONS)
    )
    environment_fallback: bool = True
    environment_variable: str = "ASPNETCORE_ENVIRONMENT"
    default_env: str = "Development"
    log_folder: str = "Logs"

    def __post_init__(self) -> None:
        """Validate settings configuration."""
        if not self.config_file:
            raise ConfigValidationError("config_file cannot be empty", "config_file")
        if not self.root_name:
            raise ConfigValidationError("root_name cannot be empty", "root_name")
        if not self.entry_name:
            raise ConfigValidationError("entry_name cannot be empty", "entry_name")
        for section, names in self.sections.items():
            if len(names) != 2 or not all(names):
                raise ConfigValidationError(
                    f"section {section!r} must name a key and a value attribute",
                    "sections",
                )

    def section_attributes(self, section: str) -> Optional[Tuple[str, str]]:
        """Return the (key, value) attribute names for a section, if configured.

        Section names are matched case-insensitively.
        """
        wanted = section.lower()
        for name, attributes in self.sections.items():
            if name.lower() == wanted:
                return attributes[0], attributes[1]
        return None

    def override(self, **kwargs: Any) -> "SettingsConfig":
        """Create a new configuration with specific overrides."""
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result["sections"] = {
            name: list(attributes) for name, attributes in self.sections.items()
        }
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SettingsConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "sections" in values:
            values["sections"] = {
                name: tuple(attributes)
                for name, attributes in values["sections"].items()
            }
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "SettingsConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
