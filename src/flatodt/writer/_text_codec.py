"""Whitespace-preserving text encoding.

ODF collapses runs of white space inside paragraphs, so repeated spaces,
tabs and line breaks are written as dedicated elements:

    "a  b\\tc\\r\\nd"  ->  "a " <text:s/> "b" <text:tab/> "c" <text:line-break/> "d"

A run of N spaces keeps the first space as text and encodes the other N-1 in
one ``text:s`` element (``text:c`` is omitted when N-1 is 1). Carriage
returns are dropped so CRLF line endings yield a single break.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from xml.etree.ElementTree import Element, SubElement


class SegmentKind(StrEnum):
    TEXT = "text"
    SPACE = "space"
    TAB = "tab"
    LINE_BREAK = "line_break"


@dataclass(frozen=True)
class Segment:
    """One emitted node: text content, or a control node."""

    kind: SegmentKind
    text: str = ""
    count: int = 0

    @classmethod
    def of_text(cls, text: str) -> Segment:
        return cls(SegmentKind.TEXT, text=text)

    @classmethod
    def spaces(cls, count: int) -> Segment:
        return cls(SegmentKind.SPACE, count=count)


TAB = Segment(SegmentKind.TAB)
LINE_BREAK = Segment(SegmentKind.LINE_BREAK)


def segment_text(text: str) -> list[Segment]:
    """Split ``text`` into the node sequence written to XML."""
    text = text.replace("\r", "")
    segments: list[Segment] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            segments.append(Segment.of_text("".join(pending)))
            pending.clear()

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == " ":
            pending.append(ch)
            j = i + 1
            while j < n and text[j] == " ":
                j += 1
            extra = j - i - 1
            if extra > 0:
                flush()
                segments.append(Segment.spaces(extra))
            i = j
            continue
        if ch == "\t":
            flush()
            segments.append(TAB)
        elif ch == "\n":
            flush()
            segments.append(LINE_BREAK)
        else:
            pending.append(ch)
        i += 1

    flush()
    return segments


def decode_segments(segments: Iterable[Segment]) -> str:
    """Inverse of :func:`segment_text` (carriage returns are not restored)."""
    parts: list[str] = []
    for segment in segments:
        if segment.kind is SegmentKind.TEXT:
            parts.append(segment.text)
        elif segment.kind is SegmentKind.SPACE:
            parts.append(" " * segment.count)
        elif segment.kind is SegmentKind.TAB:
            parts.append("\t")
        else:
            parts.append("\n")
    return "".join(parts)


def _append_chars(parent: Element, text: str) -> None:
    # ElementTree keeps character data in .text (before the first child)
    # and in each child's .tail
    if len(parent) == 0:
        parent.text = (parent.text or "") + text
    else:
        last = parent[-1]
        last.tail = (last.tail or "") + text


def append_text(parent: Element, text: str) -> None:
    """Write ``text`` into ``parent`` as text and control elements."""
    for segment in segment_text(text):
        if segment.kind is SegmentKind.TEXT:
            _append_chars(parent, segment.text)
        elif segment.kind is SegmentKind.SPACE:
            space = SubElement(parent, "text:s")
            if segment.count > 1:
                space.set("text:c", str(segment.count))
        elif segment.kind is SegmentKind.TAB:
            SubElement(parent, "text:tab")
        else:
            SubElement(parent, "text:line-break")
