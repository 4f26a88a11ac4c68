"""Configuration markup reader.

A small, strict reader for the restricted markup used by application
configuration files: elements with double-quoted attributes, nested or
self-closing, with comments allowed between elements and an optional leading
declaration. Malformed input raises an ``XmlReadError``.

- load(), load_string(), load_lines(): read a document into an XmlFileNode tree
- Settings, load_settings(): extract key/value settings from such a tree
"""

__version__ = "0.1.0"
__author__ = "Config XML Reader Team"

from .api import load, load_lines, load_string, load_with_statistics
from .settings import Settings, load_settings
from .shared import (
    LoadStatistics,
    ReaderConfig,
    SettingsConfig,
    XmlReadError,
)
from .tokenization import XmlFileAttribute
from .tree import XmlFileNode

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Loading
    "load",
    "load_lines",
    "load_string",
    "load_with_statistics",

    # Settings
    "Settings",
    "load_settings",

    # Result objects and data structures
    "LoadStatistics",
    "XmlFileAttribute",
    "XmlFileNode",

    # Configuration and errors
    "ReaderConfig",
    "SettingsConfig",
    "XmlReadError",
]
