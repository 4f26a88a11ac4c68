"""Tree layer: the node model and the recursive node parser.

Key Components:
    NodeParser: Recursive descent parser over a CursorBuffer
    ParseStep: Tagged outcome of reading one construct
    XmlFileNode: One element with ordered attributes and children
"""

from .builder import NodeParser, ParseStep, StepKind
from .node import XmlFileNode

__all__ = [
    "NodeParser",
    "ParseStep",
    "StepKind",
    "XmlFileNode",
]
