"""Paragraph border."""

from __future__ import annotations

from ._base import Checked, ValueObject, enum_field, is_color, is_non_negative_number
from ._color import Color
from ._enums import BorderStyle


class Border(ValueObject):
    """One side of a paragraph border: width in mm, line style and color."""

    width = Checked(0.0, accept=is_non_negative_number)
    style = enum_field(BorderStyle, BorderStyle.NONE)
    color = Checked(Color(0, 0, 0), accept=is_color)

    def __init__(
        self,
        width: float,
        style: BorderStyle | str,
        color: Color | None = None,
    ) -> None:
        self.width = width
        self.style = style
        if color is not None:
            self.color = color

    @property
    def is_visible(self) -> bool:
        return self.width > 0 and self.style != BorderStyle.NONE
