"""Public loading API and export adapters."""

from .adapters import (
    AdapterMetadata,
    ConversionResult,
    ElementTreeAdapter,
    IntegrationAdapter,
    LxmlAdapter,
    get_adapter,
    list_available_adapters,
    register_adapter,
)
from .loader import (
    join_lines,
    load,
    load_lines,
    load_string,
    load_with_statistics,
    read_document,
)

__all__ = [
    "AdapterMetadata",
    "ConversionResult",
    "ElementTreeAdapter",
    "IntegrationAdapter",
    "LxmlAdapter",
    "get_adapter",
    "list_available_adapters",
    "register_adapter",
    "join_lines",
    "load",
    "load_lines",
    "load_string",
    "load_with_statistics",
    "read_document",
]
