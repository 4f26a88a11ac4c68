"""Tree model produced by the reader.

A node owns its attribute list and its children outright; there are no parent
pointers, so a tree can be discarded or copied piecemeal without fix-ups.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from config_xml_reader.tokenization import XmlFileAttribute


@dataclass
class XmlFileNode:
    """One element: its name, ordered attributes and ordered children.

    ``name`` keeps the casing of the opening tag. Lookups by name are
    case-insensitive, matching how closing tags are paired with opening ones.
    """

    name: str
    attributes: List[XmlFileAttribute] = field(default_factory=list)
    children: List["XmlFileNode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Node name cannot be empty")

    def matches(self, name: str) -> bool:
        """Check whether this node's name equals ``name`` ignoring case."""
        return self.name.lower() == name.lower()

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first attribute named ``name`` (any case)."""
        wanted = name.lower()
        for attribute in self.attributes:
            if attribute.name.lower() == wanted:
                return attribute.value
        return default

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    def find_child(self, name: str) -> Optional["XmlFileNode"]:
        """Find the first direct child named ``name``."""
        return next((child for child in self.children if child.matches(name)), None)

    def find_children(self, name: str) -> List["XmlFileNode"]:
        """Find all direct children named ``name``, in document order."""
        return [child for child in self.children if child.matches(name)]

    def iter_nodes(self) -> Iterator["XmlFileNode"]:
        """Iterate over this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def depth(self) -> int:
        """Number of levels in the subtree rooted here (a leaf is 1)."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Convert node to dictionary representation.

        Attributes become a list of pairs so that order and duplicates survive.
        """
        result: Dict[str, Any] = {
            "name": self.name,
            "attributes": [[a.name, a.value] for a in self.attributes],
        }
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result

    def to_markup(self) -> str:
        """Serialize the subtree back to markup without insignificant whitespace."""
        attributes = "".join(f' {a.name}="{a.value}"' for a in self.attributes)
        if not self.children:
            return f"<{self.name}{attributes}/>"
        body = "".join(child.to_markup() for child in self.children)
        return f"<{self.name}{attributes}>{body}</{self.name}>"
