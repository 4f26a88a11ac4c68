"""Exception hierarchy for markup reading failures.

Every failure is fatal for the load that raised it: there is no partial tree
and no attempt to resynchronise after a malformed construct.
"""

from typing import Optional


class XmlReadError(Exception):
    """Base exception for all markup reading failures.

    Attributes:
        message: Human-readable description of what went wrong
        position: Cursor offset at which parsing stopped
        expected: The token that was required at ``position``, if any
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        expected: Optional[str] = None
    ) -> None:
        self.message = message
        self.position = position
        self.expected = expected
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class StructuralMismatchError(XmlReadError):
    """A closing tag does not match its enclosing element, or has none."""


class MalformedTagError(XmlReadError):
    """A tag does not start with '<' or '</', or is not terminated."""


class MalformedAttributeError(XmlReadError):
    """An attribute name is not followed by '=' and a double-quoted value."""


class UnterminatedValueError(MalformedAttributeError):
    """The closing quote of an attribute value was never found."""


class UnterminatedDocumentError(XmlReadError):
    """Input ended while an element was still open."""


class NestingTooDeepError(XmlReadError):
    """Element nesting exceeded the configured maximum depth."""
