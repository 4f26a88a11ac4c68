"""Command-line interface for the configuration markup reader."""

from .main import main

__all__ = ["main"]
