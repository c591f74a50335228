"""Tests for tagged values and web part content resolution."""

from __future__ import annotations

import pytest

from conftest import standard_part, text_part
from graph_mcp.content.resolver import PLAIN, resolve_content, resolve_fields
from graph_mcp.content.values import ABSENT, Value, ValueKind
from graph_mcp.models.canvas import StandardWebPart, TextWebPart, WebPart, parse_web_part


class TestValue:
    """Tests for the tagged value type."""

    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("text", ValueKind.STRING),
            ("", ValueKind.STRING),
            (3, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            ({"a": 1}, ValueKind.MAPPING),
            (None, ValueKind.ABSENT),
            (["a"], ValueKind.ABSENT),
        ],
    )
    def test_of(self, raw, kind) -> None:
        """Test tagging of raw JSON values."""
        assert Value.of(raw).kind is kind

    def test_lookup_missing(self) -> None:
        """Test lookups on missing keys and missing bags."""
        assert Value.lookup({"a": "x"}, "b") is ABSENT
        assert Value.lookup(None, "a") is ABSENT
        assert Value.lookup({}, "a") is ABSENT

    def test_accessors(self) -> None:
        """Test the typed accessors."""
        assert Value.of("x").string() == "x"
        assert Value.of("").string() == ""
        assert Value.of("").non_empty_string() is None
        assert Value.of(1).string() is None
        assert Value.of({"a": 1}).mapping() == {"a": 1}
        assert Value.of("x").mapping() is None


class TestResolveFields:
    """Tests for the content source precedence chain."""

    def test_backing_store_wins_over_text(self) -> None:
        """Test that typed innerHtml beats untyped text."""
        content, found = resolve_fields({"innerHtml": "<p>A</p>"}, {"text": "B"})

        assert found is True
        assert content == "A"

    def test_backing_store_wins_over_additional_html(self) -> None:
        """Test that typed innerHtml beats untyped innerHtml."""
        content, _ = resolve_fields({"innerHtml": "<b>typed</b>"}, {"innerHtml": "<b>extra</b>"})

        assert content == "**typed**"

    def test_additional_html(self) -> None:
        """Test untyped innerHtml when the backing store lacks it."""
        assert resolve_fields({}, {"innerHtml": "<h2>T</h2>"}) == ("## T", True)

    def test_empty_html_is_still_found(self) -> None:
        """Test that an empty innerHtml string counts as found."""
        assert resolve_fields({"innerHtml": ""}, {"text": "B"}) == ("", True)

    def test_text_is_verbatim(self) -> None:
        """Test that text is returned without conversion."""
        assert resolve_fields(None, {"text": "<b>raw</b>"}) == ("<b>raw</b>", True)

    def test_plain_mode_keeps_html(self) -> None:
        """Test that plain mode returns HTML sources untouched."""
        assert resolve_fields({"innerHtml": "<p>A</p>"}, None, PLAIN) == ("<p>A</p>", True)

    @pytest.mark.parametrize(
        "data,expected",
        [
            ({"text": "t", "content": "c", "value": "v", "description": "d"}, "t"),
            ({"content": "c", "value": "v", "description": "d"}, "c"),
            ({"value": "v", "description": "d"}, "v"),
            ({"description": "d", "title": "ignored"}, "d"),
            ({"text": "", "description": "d"}, "d"),
            ({"text": 42, "value": "v"}, "v"),
        ],
    )
    def test_data_field_order(self, data, expected) -> None:
        """Test that data fields are tried in order and empty strings skipped."""
        assert resolve_fields({}, {"data": data}) == (expected, True)

    def test_data_html_is_converted(self) -> None:
        """Test that the html data field is converted in markdown mode."""
        assert resolve_fields({}, {"data": {"html": "<em>x</em>"}}) == ("*x*", True)
        assert resolve_fields({}, {"data": {"html": "<em>x</em>"}}, PLAIN) == ("<em>x</em>", True)

    def test_data_as_string(self) -> None:
        """Test a data property that is a bare string."""
        assert resolve_fields({}, {"data": "caption"}) == ("caption", True)

    @pytest.mark.parametrize(
        "additional",
        [
            None,
            {},
            {"data": ""},
            {"data": 3},
            {"data": True},
            {"data": {"title": "only"}},
            {"data": ["text"]},
            {"text": 7},
        ],
    )
    def test_not_found(self, additional) -> None:
        """Test parts with nothing displayable."""
        assert resolve_fields({}, additional) == ("", False)


class TestResolveContent:
    """Tests for resolving parsed web part models."""

    def test_text_web_part(self) -> None:
        """Test that a text web part exposes innerHtml through its backing store."""
        part = parse_web_part(text_part("<p>Hello</p>", text="ignored"))

        assert isinstance(part, TextWebPart)
        assert part.backing_store() == {"innerHtml": "<p>Hello</p>"}
        assert part.additional_data == {"text": "ignored"}
        assert resolve_content(part) == ("Hello", True)

    def test_standard_web_part_data(self) -> None:
        """Test that a standard web part falls back to its data."""
        part = parse_web_part(standard_part({"description": "Banner"}))

        assert isinstance(part, StandardWebPart)
        assert resolve_content(part) == ("Banner", True)

    def test_unknown_web_part_type(self) -> None:
        """Test that unknown types keep everything as additional data."""
        part = parse_web_part({"@odata.type": "#custom", "innerHtml": "<p>X</p>"})

        assert type(part) is WebPart
        assert part.backing_store() == {}
        assert resolve_content(part) == ("X", True)
