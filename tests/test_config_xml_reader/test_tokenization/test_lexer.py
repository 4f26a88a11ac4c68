"""Tests for the lexical matchers."""

from config_xml_reader.character import CursorBuffer
from config_xml_reader.tokenization import (
    eat_comments,
    eat_declaration,
    eat_whitespace,
    read_identifier,
    read_name,
)


class TestWhitespaceAndComments:
    """Test skipping of insignificant input."""

    def test_eat_whitespace(self):
        buffer = CursorBuffer("\t  <a/>")

        eat_whitespace(buffer)

        assert buffer.remainder() == "<a/>"

    def test_eat_comments_skips_interleaved_comments(self):
        buffer = CursorBuffer("  <!-- one --> \t<!--two-->  <a/>")

        eat_comments(buffer)

        assert buffer.remainder() == "<a/>"

    def test_eat_comments_without_comment(self):
        buffer = CursorBuffer("<a/>")

        eat_comments(buffer)

        assert buffer.position == 0

    def test_unterminated_comment_exhausts_buffer(self):
        buffer = CursorBuffer("<!-- open <a/>")

        eat_comments(buffer)

        assert buffer.at_end()


class TestDeclaration:
    """Test the leading declaration skip."""

    def test_declaration_is_skipped(self):
        buffer = CursorBuffer('<?xml version="1.0" encoding="utf-8"?>  <a/>')

        assert eat_declaration(buffer) is True
        assert buffer.remainder() == "<a/>"

    def test_missing_declaration(self):
        buffer = CursorBuffer("<a/>")

        assert eat_declaration(buffer) is False
        assert buffer.position == 0


class TestIdentifiers:
    """Test element and attribute name scanning."""

    def test_identifier_includes_periods(self):
        buffer = CursorBuffer("system.web x")

        assert read_identifier(buffer) == "system.web"
        assert buffer.remainder() == " x"

    def test_identifier_stops_at_digit(self):
        buffer = CursorBuffer("item2")

        assert read_identifier(buffer) == "item"

    def test_identifier_empty_when_not_a_letter(self):
        buffer = CursorBuffer("/a>")

        assert read_identifier(buffer) == ""
        assert buffer.position == 0

    def test_name_excludes_periods(self):
        buffer = CursorBuffer("key.x")

        assert read_name(buffer) == "key"
        assert buffer.current() == "."

    def test_long_identifier_has_no_length_limit(self):
        name = "a" * 5000
        buffer = CursorBuffer(name + "/>")

        assert read_identifier(buffer) == name
