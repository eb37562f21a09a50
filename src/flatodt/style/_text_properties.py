"""Character formatting properties (``style:text-properties``)."""

from __future__ import annotations

from typing import Any

from ._base import (
    Checked,
    PropertyBag,
    enum_field,
    is_color,
    is_non_negative_number,
    optional,
)
from ._enums import FontVariant, TextTransformation, Typeface
from ._text_line import TextLine

DEFAULT_FONT_SIZE = 12


def _is_font_name(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_text_line(value: Any) -> bool:
    return isinstance(value, TextLine)


class TextProperties(PropertyBag):
    """Formatting that applies to runs of characters. Font size is in points."""

    font_variant = enum_field(FontVariant, FontVariant.NORMAL)
    text_transformation = enum_field(TextTransformation, TextTransformation.NONE)
    color = Checked(None, accept=optional(is_color))
    font_name = Checked(None, accept=optional(_is_font_name))
    font_size = Checked(DEFAULT_FONT_SIZE, accept=is_non_negative_number)
    typeface = enum_field(Typeface, Typeface.NORMAL)
    underline = Checked(None, accept=optional(_is_text_line))
    background_color = Checked(None, accept=optional(is_color))
    overline = Checked(None, accept=optional(_is_text_line))
