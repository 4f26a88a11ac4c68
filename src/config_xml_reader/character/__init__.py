"""Character layer: the buffer every parsing step reads from."""

from .cursor import CursorBuffer

__all__ = ["CursorBuffer"]
