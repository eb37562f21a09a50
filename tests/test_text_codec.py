"""Tests for the whitespace-preserving text codec."""

from __future__ import annotations

from xml.etree.ElementTree import Element, tostring

import pytest

from flatodt.writer import Segment, SegmentKind, append_text, decode_segments, segment_text


def _kinds(text: str) -> list[str]:
    return [s.kind.value for s in segment_text(text)]


def _render(text: str) -> str:
    parent = Element("text:p")
    append_text(parent, text)
    return tostring(parent, encoding="unicode")


class TestSegmentText:
    """Tests for segment_text."""

    def test_reference_example(self) -> None:
        assert segment_text("a  b\tc\r\nd") == [
            Segment.of_text("a "),
            Segment.spaces(1),
            Segment.of_text("b"),
            Segment(SegmentKind.TAB),
            Segment.of_text("c"),
            Segment(SegmentKind.LINE_BREAK),
            Segment.of_text("d"),
        ]

    def test_single_space_stays_in_text(self) -> None:
        assert segment_text("a b") == [Segment.of_text("a b")]

    def test_run_of_spaces(self) -> None:
        assert segment_text("a     b") == [
            Segment.of_text("a "),
            Segment.spaces(4),
            Segment.of_text("b"),
        ]

    def test_trailing_spaces(self) -> None:
        assert segment_text("end   ") == [Segment.of_text("end "), Segment.spaces(2)]

    def test_empty_text_emits_nothing(self) -> None:
        assert segment_text("") == []

    def test_carriage_returns_are_dropped(self) -> None:
        assert segment_text("\r\r") == []
        assert _kinds("a\r\nb") == ["text", "line_break", "text"]

    def test_consecutive_controls_have_no_empty_text(self) -> None:
        assert _kinds("\t\t\n") == ["tab", "tab", "line_break"]

    @pytest.mark.parametrize(
        "text",
        [
            "plain",
            "a  b\tc\r\nd",
            "  leading",
            "trailing  ",
            "\t\tx\n\ny",
            "mixed \t  \r\n  spaces",
            " ",
            "\r\n",
        ],
    )
    def test_round_trip_drops_only_carriage_returns(self, text: str) -> None:
        assert decode_segments(segment_text(text)) == text.replace("\r", "")


class TestAppendText:
    """Tests for append_text (ElementTree output)."""

    def test_reference_example(self) -> None:
        assert _render("a  b\tc\r\nd") == (
            "<text:p>a <text:s />b<text:tab />c<text:line-break />d</text:p>"
        )

    def test_count_attribute_only_above_one(self) -> None:
        assert _render("a   b") == '<text:p>a <text:s text:c="2" />b</text:p>'

    def test_appends_after_existing_children(self) -> None:
        parent = Element("text:p")
        append_text(parent, "x\ty")
        append_text(parent, "z")
        assert tostring(parent, encoding="unicode") == "<text:p>x<text:tab />yz</text:p>"

    def test_plain_text_only_sets_text(self) -> None:
        parent = Element("text:p")
        append_text(parent, "hello")
        assert parent.text == "hello"
        assert len(parent) == 0
