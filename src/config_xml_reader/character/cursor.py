"""In-memory character buffer with a single forward-moving read position.

The buffer holds an entire document as one string. Every parsing step receives
the same ``CursorBuffer`` instance and advances its position; nothing else
holds parse state.
"""

import re
from typing import Optional, Pattern

from config_xml_reader.shared.config import ALLOWED_WHITESPACE


class CursorBuffer:
    """Character sequence plus current read position.

    ``position`` never decreases during a parse and never exceeds ``end + 1``.
    Any position at or beyond ``end`` is the exhausted state; ``end + 1`` is the
    sentinel reached when a skip target is never found.
    """

    def __init__(self, text: str, whitespace: str = ALLOWED_WHITESPACE) -> None:
        self.text = text
        self.end = len(text)
        self.position = 0
        self._whitespace = re.compile("[" + re.escape(whitespace) + "]*")

    def __repr__(self) -> str:
        return f"CursorBuffer(position={self.position}, end={self.end})"

    @property
    def exhausted_position(self) -> int:
        return self.end + 1

    def at_end(self) -> bool:
        """Return True when no characters remain to be read."""
        return self.position >= self.end

    def current(self) -> Optional[str]:
        """Return the character under the cursor, or None when exhausted."""
        if self.at_end():
            return None
        return self.text[self.position]

    def remainder(self) -> str:
        """Return the unread part of the buffer."""
        return self.text[self.position:self.end]

    def peek_matches(self, literal: str) -> bool:
        """Check whether the unread text starts with ``literal`` without consuming it."""
        if self.at_end():
            return False
        return self.text.startswith(literal, self.position)

    def consume_if_matches(self, literal: str) -> bool:
        """Consume ``literal`` if the unread text starts with it.

        The position is left untouched when there is no match.
        """
        if not self.peek_matches(literal):
            return False
        self.position += len(literal)
        return True

    def skip_to_after(self, literal: str) -> None:
        """Advance past the next occurrence of ``literal``.

        If ``literal`` does not occur again the cursor moves to the exhausted
        sentinel.
        """
        found = self.text.find(literal, min(self.position, self.end))
        if found < 0:
            self.position = self.exhausted_position
        else:
            self.position = found + len(literal)

    def skip_whitespace(self) -> None:
        """Advance over the configured whitespace characters."""
        if self.at_end():
            return
        self.position = self._whitespace.match(self.text, self.position).end()

    def scan(self, pattern: Pattern[str]) -> str:
        """Consume and return the longest match of ``pattern`` at the cursor.

        Returns an empty string, leaving the position unchanged, when nothing
        matches.
        """
        if self.at_end():
            return ""
        match = pattern.match(self.text, self.position)
        if match is None:
            return ""
        self.position = match.end()
        return match.group()

    def read_until(self, literal: str) -> Optional[str]:
        """Consume and return everything up to, not including, ``literal``.

        Returns None and exhausts the buffer when ``literal`` never occurs.
        """
        start = min(self.position, self.end)
        found = self.text.find(literal, start)
        if found < 0:
            self.position = self.exhausted_position
            return None
        self.position = found
        return self.text[start:found]
