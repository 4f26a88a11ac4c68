"""Adapters that hand a loaded tree to a full markup engine.

The reader deliberately builds its own small tree. Callers that need path
queries or serialization features of a complete engine convert the tree with
one of these adapters instead of re-reading the file.
"""

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from config_xml_reader.shared import get_logger
from config_xml_reader.tree import XmlFileNode

MS_PER_SECOND = 1000


@dataclass
class AdapterMetadata:
    """Metadata about an integration adapter."""

    name: str
    target_library: str
    description: str


@dataclass
class ConversionResult:
    """Result of a conversion operation."""

    success: bool
    converted_data: Any
    conversion_time_ms: float
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class IntegrationAdapter(ABC):
    """Base class for converting an ``XmlFileNode`` tree to another library's tree."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    @property
    @abstractmethod
    def metadata(self) -> AdapterMetadata:
        """Get adapter metadata."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the target library can be imported."""

    @abstractmethod
    def _make_module(self) -> Any:
        """Import and return the target ``etree`` module."""

    def to_target(self, root: XmlFileNode) -> ConversionResult:
        """Convert the tree rooted at ``root`` to the target library's element."""
        start_time = time.time()
        warnings: List[str] = []
        try:
            etree = self._make_module()
            element = self._convert(root, etree, None, warnings)
        except (ImportError, ValueError) as e:
            self._logger.warning(
                "Conversion failed",
                extra={"adapter": self.metadata.name, "error": str(e)}
            )
            return ConversionResult(
                success=False,
                converted_data=None,
                conversion_time_ms=(time.time() - start_time) * MS_PER_SECOND,
                warnings=warnings,
                errors=[str(e)],
            )

        return ConversionResult(
            success=True,
            converted_data=element,
            conversion_time_ms=(time.time() - start_time) * MS_PER_SECOND,
            warnings=warnings,
        )

    def _convert(
        self,
        node: XmlFileNode,
        etree: Any,
        parent: Any,
        warnings: List[str]
    ) -> Any:
        if parent is None:
            element = etree.Element(node.name)
        else:
            element = etree.SubElement(parent, node.name)

        for attribute in node.attributes:
            if element.get(attribute.name) is not None:
                warnings.append(
                    f"Duplicate attribute '{attribute.name}' on <{node.name}>; "
                    "last value kept"
                )
            element.set(attribute.name, attribute.value)

        for child in node.children:
            self._convert(child, etree, element, warnings)
        return element


class ElementTreeAdapter(IntegrationAdapter):
    """Adapter for the standard library's ``xml.etree.ElementTree``."""

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="elementtree",
            target_library="xml.etree.ElementTree",
            description="Conversion from XmlFileNode to xml.etree.ElementTree.Element",
        )

    def is_available(self) -> bool:
        return True

    def _make_module(self) -> Any:
        import xml.etree.ElementTree as ET
        return ET


class LxmlAdapter(IntegrationAdapter):
    """Adapter for ``lxml.etree``."""

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="lxml",
            target_library="lxml",
            description="Conversion from XmlFileNode to lxml.etree._Element",
        )

    def is_available(self) -> bool:
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def _make_module(self) -> Any:
        import lxml.etree
        return lxml.etree


class AdapterRegistry:
    """Registry for managing integration adapters."""

    def __init__(self) -> None:
        self._adapters: Dict[str, Type[IntegrationAdapter]] = {}
        self._lock = threading.RLock()

    def register(self, adapter_class: Type[IntegrationAdapter]) -> None:
        """Register an adapter class under its metadata name."""
        with self._lock:
            self._adapters[adapter_class().metadata.name] = adapter_class

    def get_adapter(
        self,
        adapter_name: str,
        correlation_id: Optional[str] = None
    ) -> Optional[IntegrationAdapter]:
        """Get an adapter instance by name, or None if unknown or unavailable."""
        with self._lock:
            adapter_class = self._adapters.get(adapter_name)
        if adapter_class is None:
            return None
        instance = adapter_class(correlation_id)
        return instance if instance.is_available() else None

    def list_available_adapters(self) -> List[AdapterMetadata]:
        """List metadata for every registered adapter whose library is importable."""
        with self._lock:
            classes = list(self._adapters.values())
        return [
            instance.metadata
            for instance in (adapter_class() for adapter_class in classes)
            if instance.is_available()
        ]


# Global adapter registry instance
_adapter_registry = AdapterRegistry()
_adapter_registry.register(ElementTreeAdapter)
_adapter_registry.register(LxmlAdapter)


def register_adapter(adapter_class: Type[IntegrationAdapter]) -> None:
    """Register an integration adapter globally."""
    _adapter_registry.register(adapter_class)


def get_adapter(
    adapter_name: str,
    correlation_id: Optional[str] = None
) -> Optional[IntegrationAdapter]:
    """Get a registered adapter instance."""
    return _adapter_registry.get_adapter(adapter_name, correlation_id)


def list_available_adapters() -> List[AdapterMetadata]:
    """List all available integration adapters."""
    return _adapter_registry.list_available_adapters()
