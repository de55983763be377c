"""Tests for XML 1.1 character escaping."""

import pytest

from xml_blob.character.escaping import (
    PREDEFINED_ENTITIES,
    escape_xml11,
)


class TestPredefinedEntities:
    """Test the five predefined entities."""

    @pytest.mark.parametrize("char,entity", sorted(PREDEFINED_ENTITIES.items()))
    def test_entity(self, char, entity):
        """Test each reserved character maps to its entity."""
        assert escape_xml11(char) == entity

    def test_mixed(self):
        """Test reserved characters inside ordinary text."""
        assert escape_xml11("Tom & Jerry's <show>") == "Tom &amp; Jerry&apos;s &lt;show&gt;"

    def test_no_double_escaping(self):
        """Test existing entity text is escaped again, not preserved."""
        assert escape_xml11("&amp;") == "&amp;amp;"

    def test_empty(self):
        """Test the empty string."""
        assert escape_xml11("") == ""


class TestControlCharacters:
    """Test removed and restricted code points."""

    @pytest.mark.parametrize("char", ["\x00", "\ufffe", "\uffff", "\ud800", "\udfff"])
    def test_removed(self, char):
        """Test characters that cannot be represented at all are dropped."""
        assert escape_xml11(f"a{char}b") == "ab"

    @pytest.mark.parametrize("code_point", [0x1, 0x8, 0xB, 0xC, 0xE, 0x1F, 0x7F, 0x84, 0x86, 0x9F])
    def test_restricted(self, code_point):
        """Test restricted controls become decimal references."""
        assert escape_xml11(chr(code_point)) == f"&#{code_point};"

    @pytest.mark.parametrize("char", ["\t", "\n", "\r", "\x85"])
    def test_allowed_whitespace(self, char):
        """Test tab, newline, carriage return and NEL pass through."""
        assert escape_xml11(char) == char

    @pytest.mark.parametrize("code_point", [0x20, 0x7E, 0xA0, 0xFFFD])
    def test_range_neighbours_pass_through(self, code_point):
        """Test characters just outside the restricted ranges are kept."""
        assert escape_xml11(chr(code_point)) == chr(code_point)


class TestCharacterExports:
    """Test the public surface of the character layer."""

    def test_exports(self):
        """Test only the escaping entry points are exported."""
        import xml_blob.character as character

        assert sorted(character.__all__) == ["PREDEFINED_ENTITIES", "escape_xml11"]
        assert not hasattr(character, "is_restricted_char")


class TestNonAscii:
    """Test handling of characters outside ASCII."""

    def test_passthrough(self):
        """Test non-ASCII text is kept by default."""
        assert escape_xml11("café ☕ 日本") == "café ☕ 日本"

    def test_ascii_only(self):
        """Test ASCII-only output uses numeric references."""
        assert escape_xml11("café <☕>", ascii_only=True) == "caf&#233; &lt;&#9749;&gt;"

    def test_ascii_only_astral(self):
        """Test characters outside the BMP become a single reference."""
        assert escape_xml11("\U0001F600", ascii_only=True) == "&#128512;"

    def test_ascii_only_plain_ascii(self):
        """Test plain ASCII is unaffected by the flag."""
        assert escape_xml11("abc", ascii_only=True) == "abc"
