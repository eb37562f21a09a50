"""Underline and overline description."""

from __future__ import annotations

from typing import Any, Literal

from ._base import Checked, ValueObject, enum_field, is_color, is_non_negative_number
from ._color import Color
from ._enums import LineMode, LineStyle, LineType, LineWidth

FONT_COLOR = "font-color"


def _is_line_color(value: Any) -> bool:
    return value == FONT_COLOR or is_color(value)


def _is_line_width(value: Any) -> bool:
    return isinstance(value, LineWidth) or is_non_negative_number(value)


def _to_line_width(value: Any) -> Any:
    # numbers are widths in points; strings name a LineWidth
    if isinstance(value, str):
        return LineWidth(value)
    return value


class TextLine(ValueObject):
    """A line drawn over or under text.

    ``color`` is either ``"font-color"`` (follow the text color) or a
    :class:`Color`. ``width`` is a :class:`LineWidth` or a non-negative number
    of points; negative widths are ignored.
    """

    color = Checked(FONT_COLOR, accept=_is_line_color)
    width = Checked(LineWidth.AUTO, accept=_is_line_width, convert=_to_line_width)
    style = enum_field(LineStyle, LineStyle.SOLID)
    type = enum_field(LineType, LineType.SINGLE)
    mode = enum_field(LineMode, LineMode.CONTINUOUS)

    def __init__(
        self,
        color: Literal["font-color"] | Color = FONT_COLOR,
        width: LineWidth | float | str = LineWidth.AUTO,
        style: LineStyle | str = LineStyle.SOLID,
        type: LineType | str = LineType.SINGLE,
        mode: LineMode | str = LineMode.CONTINUOUS,
    ) -> None:
        self.color = color
        self.width = width
        self.style = style
        self.type = type
        self.mode = mode
