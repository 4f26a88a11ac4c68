"""Attribute parsing: ``name="value"`` pairs inside an opening tag."""

from dataclasses import dataclass
from typing import List, Optional

from config_xml_reader.character import CursorBuffer
from config_xml_reader.shared.errors import (
    MalformedAttributeError,
    UnterminatedValueError,
)

from .lexer import eat_whitespace, read_name

QUOTE = '"'
EQUALS = "="


@dataclass(frozen=True)
class XmlFileAttribute:
    """A name/value pair from an opening tag.

    The value is the literal text between the quotes; nothing is unescaped.
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Attribute name cannot be empty")

    def __str__(self) -> str:
        return f"{self.name} = {self.value}"


def read_attribute(buffer: CursorBuffer) -> Optional[XmlFileAttribute]:
    """Read one attribute at the cursor.

    Returns:
        The attribute, or None if the cursor is not on an attribute name. None
        is the normal end of an attribute list, not an error.

    Raises:
        MalformedAttributeError: '=' or the opening quote is missing
        UnterminatedValueError: the closing quote is never found
    """
    name = read_name(buffer)
    if not name:
        return None

    if not buffer.consume_if_matches(EQUALS):
        raise MalformedAttributeError(
            f"No '=' between attribute name '{name}' and value",
            buffer.position,
            EQUALS,
        )
    if not buffer.consume_if_matches(QUOTE):
        raise MalformedAttributeError(
            f"Value of attribute '{name}' does not begin with a double quote",
            buffer.position,
            QUOTE,
        )

    start = buffer.position
    value = buffer.read_until(QUOTE)
    if value is None:
        raise UnterminatedValueError(
            f"Value of attribute '{name}' did not end with a double quote",
            start,
            QUOTE,
        )
    buffer.consume_if_matches(QUOTE)
    eat_whitespace(buffer)

    return XmlFileAttribute(name, value)


def read_attributes(buffer: CursorBuffer) -> List[XmlFileAttribute]:
    """Read attributes until no further name is found, preserving order."""
    attributes: List[XmlFileAttribute] = []
    while True:
        attribute = read_attribute(buffer)
        if attribute is None:
            return attributes
        attributes.append(attribute)
