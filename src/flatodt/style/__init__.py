"""Style value objects.

Styles are plain mutable records with documented defaults. They compare by
value, and :meth:`is_default` tells whether anything was customized.

Public API:
    ParagraphStyle, ListStyle        - attachable styles
    ParagraphProperties, TextProperties, ListLevelProperties
    TabStop, Border, TextLine, Color, FontFace
    escape_style_name(display_name)  - schema-legal style name
"""

from ._base import is_percent
from ._border import Border
from ._color import Color
from ._enums import (
    AnchorType,
    BorderStyle,
    FontFamilyGeneric,
    FontPitch,
    FontVariant,
    HorizontalAlignment,
    HorizontalAlignmentLastLine,
    LabelFollowedBy,
    LineMode,
    LineStyle,
    LineType,
    LineWidth,
    PageBreak,
    StyleFamily,
    TabStopLeaderStyle,
    TabStopType,
    TextTransformation,
    Typeface,
    VerticalAlignment,
)
from ._font_face import FontFace
from ._list_style import (
    DEFAULT_BULLET_CHAR,
    BulletListLevelStyle,
    ListLevelProperties,
    ListStyle,
)
from ._paragraph_properties import ParagraphProperties
from ._style import ParagraphStyle, Style, escape_style_name
from ._tab_stop import TabStop
from ._text_line import FONT_COLOR, TextLine
from ._text_properties import DEFAULT_FONT_SIZE, TextProperties

__all__ = [
    "DEFAULT_BULLET_CHAR",
    "DEFAULT_FONT_SIZE",
    "FONT_COLOR",
    "AnchorType",
    "Border",
    "BorderStyle",
    "BulletListLevelStyle",
    "Color",
    "FontFace",
    "FontFamilyGeneric",
    "FontPitch",
    "FontVariant",
    "HorizontalAlignment",
    "HorizontalAlignmentLastLine",
    "LabelFollowedBy",
    "LineMode",
    "LineStyle",
    "LineType",
    "LineWidth",
    "ListLevelProperties",
    "ListStyle",
    "PageBreak",
    "ParagraphProperties",
    "ParagraphStyle",
    "Style",
    "StyleFamily",
    "TabStop",
    "TabStopLeaderStyle",
    "TabStopType",
    "TextLine",
    "TextProperties",
    "TextTransformation",
    "Typeface",
    "VerticalAlignment",
    "escape_style_name",
    "is_percent",
]
