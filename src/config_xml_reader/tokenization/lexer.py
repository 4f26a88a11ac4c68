"""Lexical matchers over a ``CursorBuffer``.

Each function consumes from the buffer it is given and returns what it read.
None of them raise: deciding whether a missing token is fatal is left to the
attribute and node parsers.
"""

import re

from config_xml_reader.character import CursorBuffer

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
DECLARATION_OPEN = "<?"
DECLARATION_CLOSE = "?>"

# Element names may contain periods, attribute names may not
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z.]+")
NAME_PATTERN = re.compile(r"[A-Za-z]+")


def eat_whitespace(buffer: CursorBuffer) -> None:
    """Skip spaces and tabs. Line breaks are not whitespace here."""
    buffer.skip_whitespace()


def eat_comments(buffer: CursorBuffer) -> None:
    """Skip any run of comments interleaved with whitespace."""
    eat_whitespace(buffer)
    while buffer.consume_if_matches(COMMENT_OPEN):
        buffer.skip_to_after(COMMENT_CLOSE)
        eat_whitespace(buffer)


def eat_declaration(buffer: CursorBuffer) -> bool:
    """Skip a leading ``<?...?>`` declaration.

    Returns:
        True if a declaration was present
    """
    eat_whitespace(buffer)
    found = buffer.consume_if_matches(DECLARATION_OPEN)
    if found:
        buffer.skip_to_after(DECLARATION_CLOSE)
    eat_whitespace(buffer)
    return found


def read_identifier(buffer: CursorBuffer) -> str:
    """Read an element name: the longest run of ASCII letters and periods.

    Returns an empty string if the cursor is not on such a character.
    """
    return buffer.scan(IDENTIFIER_PATTERN)


def read_name(buffer: CursorBuffer) -> str:
    """Read an attribute name: the longest run of ASCII letters."""
    return buffer.scan(NAME_PATTERN)
