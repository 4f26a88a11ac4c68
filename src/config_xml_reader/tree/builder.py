"""Recursive descent parser that builds the node tree.

``NodeParser.parse_node`` reads exactly one construct at the cursor: either a
complete element (recursing for its children) or the closing tag of the
element that called it. The two outcomes are returned as a ``ParseStep`` so
that "no more children" is never confused with a failure; failures are raised.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from config_xml_reader.character import CursorBuffer
from config_xml_reader.shared.config import ReaderConfig
from config_xml_reader.shared.errors import (
    MalformedTagError,
    NestingTooDeepError,
    StructuralMismatchError,
    UnterminatedDocumentError,
)
from config_xml_reader.tokenization import (
    eat_comments,
    eat_whitespace,
    read_attributes,
    read_identifier,
)

from .node import XmlFileNode

TAG_OPEN = "<"
END_TAG_OPEN = "</"
TAG_CLOSE = ">"
EMPTY_TAG_CLOSE = "/>"


class StepKind(Enum):
    """Outcome of reading one construct."""

    NODE = auto()             # A complete element was read
    END_OF_SIBLINGS = auto()  # The enclosing element's closing tag was read


@dataclass(frozen=True)
class ParseStep:
    """Tagged result of ``NodeParser.parse_node``."""

    kind: StepKind
    node: Optional[XmlFileNode] = None

    @classmethod
    def of(cls, node: XmlFileNode) -> "ParseStep":
        return cls(StepKind.NODE, node)

    @classmethod
    def end_of_siblings(cls) -> "ParseStep":
        return cls(StepKind.END_OF_SIBLINGS)

    @property
    def is_end(self) -> bool:
        return self.kind is StepKind.END_OF_SIBLINGS


class NodeParser:
    """Builds a tree from the buffer it is given.

    The parser keeps no state of its own besides the buffer; one instance is
    used for one document.
    """

    def __init__(self, buffer: CursorBuffer, config: Optional[ReaderConfig] = None) -> None:
        self.buffer = buffer
        self.config = config or ReaderConfig()

    def parse_root(self) -> XmlFileNode:
        """Parse the single root element of the document."""
        try:
            step = self.parse_node(None)
        except RecursionError as e:
            raise NestingTooDeepError(
                "Elements nested deeper than the interpreter stack allows",
                self.buffer.position,
            ) from e
        if step.node is None:
            raise StructuralMismatchError(
                "Document has no root element", self.buffer.position
            )
        return step.node

    def parse_node(self, parent_name: Optional[str], depth: int = 1) -> ParseStep:
        """Read one element, or the closing tag of ``parent_name``.

        Args:
            parent_name: Name of the enclosing element, None at the top level
            depth: Nesting level of the element about to be read

        Returns:
            A node step, or an end-of-siblings step once the closing tag of
            ``parent_name`` has been consumed
        """
        buffer = self.buffer
        eat_comments(buffer)

        if buffer.at_end():
            if parent_name is None:
                raise UnterminatedDocumentError(
                    "Document ended before a root element was found",
                    buffer.position,
                    TAG_OPEN,
                )
            raise UnterminatedDocumentError(
                f"Document ended before </{parent_name}> was found",
                buffer.position,
                f"</{parent_name}>",
            )

        if buffer.consume_if_matches(END_TAG_OPEN):
            self._read_end_tag(parent_name)
            return ParseStep.end_of_siblings()

        if not buffer.consume_if_matches(TAG_OPEN):
            raise MalformedTagError(
                "Neither '<' nor '</' found when looking for tag start",
                buffer.position,
                TAG_OPEN,
            )

        if depth > self.config.max_depth:
            raise NestingTooDeepError(
                f"Elements nested deeper than {self.config.max_depth} levels",
                buffer.position,
            )

        name = read_identifier(buffer)
        if not name:
            raise MalformedTagError(
                "Element name not found after '<'", buffer.position, "element name"
            )
        eat_whitespace(buffer)

        node = XmlFileNode(name, read_attributes(buffer))

        if buffer.consume_if_matches(EMPTY_TAG_CLOSE):
            return ParseStep.of(node)
        if not buffer.consume_if_matches(TAG_CLOSE):
            raise MalformedTagError(
                f"Tag <{name}> is not closed with '>' or '/>'",
                buffer.position,
                TAG_CLOSE,
            )

        while True:
            step = self.parse_node(name, depth + 1)
            if step.is_end:
                return ParseStep.of(node)
            node.children.append(step.node)

    def _read_end_tag(self, parent_name: Optional[str]) -> None:
        buffer = self.buffer
        name = read_identifier(buffer)
        eat_whitespace(buffer)

        if parent_name is None:
            raise StructuralMismatchError(
                f"Misplaced end tag </{name}> with no enclosing element",
                buffer.position,
            )
        if name.lower() != parent_name.lower():
            raise StructuralMismatchError(
                f"Misplaced end tag </{name}>, expected </{parent_name}>",
                buffer.position,
                f"</{parent_name}>",
            )
        if not buffer.consume_if_matches(TAG_CLOSE):
            raise MalformedTagError(
                f"End tag </{name}> should end with '>'",
                buffer.position,
                TAG_CLOSE,
            )
