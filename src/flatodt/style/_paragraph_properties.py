"""Paragraph formatting properties (``style:paragraph-properties``).

Lengths are in millimetres. Setters ignore invalid input and keep the
previous value.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from ._base import (
    Checked,
    PropertyBag,
    enum_field,
    is_color,
    is_non_negative_int,
    is_non_negative_number,
    is_number,
    is_percent,
    optional,
)
from ._border import Border
from ._enums import (
    HorizontalAlignment,
    HorizontalAlignmentLastLine,
    PageBreak,
    VerticalAlignment,
)
from ._tab_stop import TabStop


def _is_line_height(value: Any) -> bool:
    return is_non_negative_number(value) or is_percent(value)


def _is_border(value: Any) -> bool:
    return isinstance(value, Border)


class ParagraphProperties(PropertyBag):
    """Formatting that applies to whole paragraphs."""

    line_height = Checked(None, accept=optional(_is_line_height))
    line_height_at_least = Checked(None, accept=optional(is_non_negative_number))
    line_spacing = Checked(None, accept=optional(is_non_negative_number))
    horizontal_alignment = enum_field(HorizontalAlignment, HorizontalAlignment.DEFAULT)
    horizontal_alignment_last_line = enum_field(
        HorizontalAlignmentLastLine, HorizontalAlignmentLastLine.DEFAULT
    )
    keep_together = Checked(False, accept=lambda v: isinstance(v, bool))
    widows = Checked(None, accept=optional(is_non_negative_int))
    orphans = Checked(None, accept=optional(is_non_negative_int))
    margin_left = Checked(0, accept=is_number)
    margin_right = Checked(0, accept=is_number)
    text_indent = Checked(0, accept=is_number)
    margin_top = Checked(0, accept=is_number)
    margin_bottom = Checked(0, accept=is_number)
    page_break = enum_field(PageBreak, PageBreak.NONE)
    background_color = Checked(None, accept=optional(is_color))
    border_top = Checked(None, accept=optional(_is_border))
    border_bottom = Checked(None, accept=optional(_is_border))
    border_left = Checked(None, accept=optional(_is_border))
    border_right = Checked(None, accept=optional(_is_border))
    padding_top = Checked(None, accept=optional(is_non_negative_number))
    padding_bottom = Checked(None, accept=optional(is_non_negative_number))
    padding_left = Checked(None, accept=optional(is_non_negative_number))
    padding_right = Checked(None, accept=optional(is_non_negative_number))
    keep_with_next = Checked(False, accept=lambda v: isinstance(v, bool))
    vertical_alignment = enum_field(VerticalAlignment, VerticalAlignment.DEFAULT)

    def __init__(self) -> None:
        self._tab_stops: list[TabStop] = []

    # -- convenience setters -------------------------------------------------

    def set_border(self, border: Border | None) -> None:
        """Apply the same border to all four sides."""
        self.border_top = border
        self.border_bottom = border
        self.border_left = border
        self.border_right = border

    def set_margins(self, top: float, right: float, bottom: float, left: float) -> None:
        self.margin_top = top
        self.margin_right = right
        self.margin_bottom = bottom
        self.margin_left = left

    def set_padding(self, padding: float | None) -> None:
        self.padding_top = padding
        self.padding_bottom = padding
        self.padding_left = padding
        self.padding_right = padding

    # -- tab stops -----------------------------------------------------------

    @property
    def tab_stops(self) -> list[TabStop]:
        """Tab stops ordered by position (a copy)."""
        return list(self._tab_stops)

    def add_tab_stop(self, tab_stop: TabStop) -> TabStop | None:
        """Add a tab stop, keeping stops ordered by position.

        Returns None, and keeps the existing stop, if a stop already sits at
        the same position.
        """
        if any(t.position == tab_stop.position for t in self._tab_stops):
            logger.debug("Tab stop at {}mm already defined, ignoring", tab_stop.position)
            return None
        self._tab_stops.append(tab_stop)
        self._tab_stops.sort(key=lambda t: t.position)
        return tab_stop

    def remove_tab_stop(self, tab_stop: TabStop) -> None:
        self._tab_stops = [t for t in self._tab_stops if t != tab_stop]

    def clear_tab_stops(self) -> None:
        self._tab_stops = []

    def canonical_items(self) -> list[tuple[str, str]]:
        items = super().canonical_items()
        for i, tab_stop in enumerate(self._tab_stops):
            items.extend((f"tab_stops.{i}.{k}", v) for k, v in tab_stop.canonical_items())
        return items
