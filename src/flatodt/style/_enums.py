"""Enumerations used by style value objects.

Member values are the literal ODF attribute values, so a member can be written
to XML as-is.
"""

from enum import StrEnum


class StyleFamily(StrEnum):
    """The kind of content a style applies to."""

    PARAGRAPH = "paragraph"
    TEXT = "text"
    LIST = "list"


class HorizontalAlignment(StrEnum):
    DEFAULT = "default"
    CENTER = "center"
    END = "end"
    JUSTIFY = "justify"
    LEFT = "left"
    RIGHT = "right"
    START = "start"


class HorizontalAlignmentLastLine(StrEnum):
    """Alignment of the last line of a justified paragraph."""

    DEFAULT = "default"
    CENTER = "center"
    JUSTIFY = "justify"
    START = "start"


class VerticalAlignment(StrEnum):
    DEFAULT = "default"
    AUTO = "auto"
    BASELINE = "baseline"
    BOTTOM = "bottom"
    MIDDLE = "middle"
    TOP = "top"


class PageBreak(StrEnum):
    NONE = "none"
    BEFORE = "before"
    AFTER = "after"


class TabStopType(StrEnum):
    CENTER = "center"
    CHAR = "char"
    LEFT = "left"
    RIGHT = "right"


class LineStyle(StrEnum):
    """Line pattern shared by tab leaders and text lines."""

    NONE = "none"
    DASH = "dash"
    DOT_DASH = "dot-dash"
    DOT_DOT_DASH = "dot-dot-dash"
    DOTTED = "dotted"
    LONG_DASH = "long-dash"
    SOLID = "solid"
    WAVE = "wave"


# Tab leaders use the same patterns as text lines.
TabStopLeaderStyle = LineStyle


class LineType(StrEnum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class LineWidth(StrEnum):
    AUTO = "auto"
    NORMAL = "normal"
    BOLD = "bold"
    THIN = "thin"
    MEDIUM = "medium"
    THICK = "thick"


class LineMode(StrEnum):
    CONTINUOUS = "continuous"
    SKIP_WHITE_SPACE = "skip-white-space"


class BorderStyle(StrEnum):
    NONE = "none"
    HIDDEN = "hidden"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"
    DOUBLE = "double"
    GROOVE = "groove"
    RIDGE = "ridge"
    INSET = "inset"
    OUTSET = "outset"


class FontVariant(StrEnum):
    NORMAL = "normal"
    SMALL_CAPS = "small-caps"


class TextTransformation(StrEnum):
    NONE = "none"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    CAPITALIZE = "capitalize"


class Typeface(StrEnum):
    """Combined font weight and posture."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"
    BOLD = "bold"
    BOLD_ITALIC = "bold-italic"
    BOLD_OBLIQUE = "bold-oblique"

    @property
    def is_bold(self) -> bool:
        return self in (Typeface.BOLD, Typeface.BOLD_ITALIC, Typeface.BOLD_OBLIQUE)

    @property
    def font_style(self) -> str | None:
        """The ``fo:font-style`` value, or None for upright text."""
        if self in (Typeface.ITALIC, Typeface.BOLD_ITALIC):
            return "italic"
        if self in (Typeface.OBLIQUE, Typeface.BOLD_OBLIQUE):
            return "oblique"
        return None


class FontPitch(StrEnum):
    FIXED = "fixed"
    VARIABLE = "variable"


class FontFamilyGeneric(StrEnum):
    DECORATIVE = "decorative"
    MODERN = "modern"
    ROMAN = "roman"
    SCRIPT = "script"
    SWISS = "swiss"
    SYSTEM = "system"


class LabelFollowedBy(StrEnum):
    """What follows a list label."""

    LISTTAB = "listtab"
    SPACE = "space"
    NOTHING = "nothing"


class AnchorType(StrEnum):
    AS_CHAR = "as-char"
    CHAR = "char"
    FRAME = "frame"
    PAGE = "page"
    PARAGRAPH = "paragraph"
