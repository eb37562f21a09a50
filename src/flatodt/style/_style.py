"""Named and anonymous styles."""

from __future__ import annotations

import re

from ._base import canonical_value
from ._enums import StyleFamily
from ._paragraph_properties import ParagraphProperties
from ._text_properties import TextProperties

_NOT_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def escape_style_name(display_name: str) -> str:
    """Turn a display name into a schema-legal style name.

    Every character that is not an ASCII letter or digit becomes its hex code
    point wrapped in underscores, e.g. ``"Text body"`` -> ``"Text_20_body"``.
    """
    return _NOT_ALNUM_RE.sub(lambda m: f"_{ord(m.group()):x}_", display_name)


class Style:
    """Base class for styles.

    A style created without a display name is *automatic*: it is declared in
    ``office:automatic-styles`` under a generated name. A named style is a
    *common* style and is declared in ``office:styles``.
    """

    family: StyleFamily

    def __init__(self, display_name: str | None = None) -> None:
        self._display_name = display_name
        self.class_name: str | None = None

    @property
    def display_name(self) -> str | None:
        return self._display_name

    @property
    def name(self) -> str | None:
        """Escaped style name, or None for automatic styles."""
        if self._display_name is None:
            return None
        return escape_style_name(self._display_name)

    @property
    def is_automatic(self) -> bool:
        return self._display_name is None

    def canonical_items(self) -> list[tuple[str, str]]:
        """Every semantically relevant field, in a fixed order."""
        raise NotImplementedError

    def is_default(self) -> bool:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._display_name == other._display_name  # type: ignore[attr-defined]
            and self.canonical_items() == other.canonical_items()  # type: ignore[attr-defined]
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        label = self._display_name if self._display_name is not None else "<automatic>"
        return f"{type(self).__name__}({label!r})"


class ParagraphStyle(Style):
    """Style for paragraphs and headings.

    Combines paragraph-level formatting with the default character formatting
    of the paragraph's text.

    Example::

        style = ParagraphStyle()
        style.paragraph_properties.horizontal_alignment = HorizontalAlignment.CENTER
        style.text_properties.font_size = 16
        document.body.add_paragraph("Title").style = style
    """

    family = StyleFamily.PARAGRAPH

    def __init__(self, display_name: str | None = None) -> None:
        super().__init__(display_name)
        self.paragraph_properties = ParagraphProperties()
        self.text_properties = TextProperties()

    def canonical_items(self) -> list[tuple[str, str]]:
        items = [("class", canonical_value(self.class_name))]
        items.extend(
            (f"paragraph.{k}", v) for k, v in self.paragraph_properties.canonical_items()
        )
        items.extend((f"text.{k}", v) for k, v in self.text_properties.canonical_items())
        return items

    def is_default(self) -> bool:
        return (
            self.class_name is None
            and self.paragraph_properties.is_default()
            and self.text_properties.is_default()
        )
