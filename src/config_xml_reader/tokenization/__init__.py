"""Tokenization layer: lexical matchers and the attribute parser.

Key Components:
    eat_whitespace, eat_comments, eat_declaration: skip insignificant input
    read_identifier, read_name: scan element and attribute names
    read_attribute, read_attributes: parse ``name="value"`` pairs
    XmlFileAttribute: a parsed name/value pair
"""

from .attributes import (
    XmlFileAttribute,
    read_attribute,
    read_attributes,
)
from .lexer import (
    eat_comments,
    eat_declaration,
    eat_whitespace,
    read_identifier,
    read_name,
)

__all__ = [
    "XmlFileAttribute",
    "read_attribute",
    "read_attributes",
    "eat_comments",
    "eat_declaration",
    "eat_whitespace",
    "read_identifier",
    "read_name",
]
