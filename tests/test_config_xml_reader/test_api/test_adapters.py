"""Tests for the export adapters."""

import xml.etree.ElementTree as ET

import pytest

from config_xml_reader.api import (
    ElementTreeAdapter,
    LxmlAdapter,
    get_adapter,
    list_available_adapters,
    load_string,
)
from config_xml_reader.tokenization import XmlFileAttribute
from config_xml_reader.tree import XmlFileNode

SAMPLE = '<configuration><appsettings><add key="k" value="v"/></appsettings></configuration>'


class TestElementTreeAdapter:
    """Test conversion to xml.etree.ElementTree."""

    def test_converts_tree(self):
        result = ElementTreeAdapter().to_target(load_string(SAMPLE))

        assert result.success
        element = result.converted_data
        assert element.tag == "configuration"
        assert element.find("appsettings/add").attrib == {"key": "k", "value": "v"}
        assert load_string(ET.tostring(element, encoding="unicode")) == load_string(SAMPLE)
        assert result.conversion_time_ms >= 0.0

    def test_duplicate_attribute_warning(self):
        node = XmlFileNode("a", [XmlFileAttribute("x", "1"), XmlFileAttribute("x", "2")])

        result = ElementTreeAdapter().to_target(node)

        assert result.success
        assert result.converted_data.get("x") == "2"
        assert len(result.warnings) == 1
        assert "Duplicate attribute 'x'" in result.warnings[0]


class TestLxmlAdapter:
    """Test conversion to lxml.etree."""

    def test_converts_tree(self):
        pytest.importorskip("lxml")

        result = LxmlAdapter().to_target(load_string(SAMPLE))

        assert result.success
        assert result.converted_data.xpath("/configuration/appsettings/add/@value") == ["v"]

    def test_invalid_name_is_reported(self):
        pytest.importorskip("lxml")

        result = LxmlAdapter().to_target(XmlFileNode(".hidden"))

        assert not result.success
        assert result.converted_data is None
        assert result.errors


class TestAdapterRegistry:
    """Test adapter lookup."""

    def test_get_known_adapter(self):
        adapter = get_adapter("elementtree", correlation_id="abc")

        assert isinstance(adapter, ElementTreeAdapter)
        assert adapter.correlation_id == "abc"

    def test_get_unknown_adapter(self):
        assert get_adapter("pandas") is None

    def test_list_available_adapters(self):
        names = [metadata.name for metadata in list_available_adapters()]

        assert "elementtree" in names
