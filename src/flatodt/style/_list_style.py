"""List styles and their per-level bullet definitions."""

from __future__ import annotations

from typing import Any

from ._base import (
    Checked,
    PropertyBag,
    ValueObject,
    canonical_value,
    enum_field,
    is_number,
    is_percent,
    optional,
)
from ._enums import LabelFollowedBy, StyleFamily
from ._style import Style

MIN_LEVEL = 1
MAX_LEVEL = 10
DEFAULT_BULLET_CHAR = "•"
LIST_LEVEL_POSITION_AND_SPACE_MODE = "label-alignment"


def clamp_level(level: int) -> int:
    """Clamp to 1..10; non-numeric input means the first level."""
    try:
        return max(MIN_LEVEL, min(MAX_LEVEL, int(level)))
    except (TypeError, ValueError):
        return MIN_LEVEL


def _is_bullet_char(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_affix(value: Any) -> bool:
    return isinstance(value, str)


class ListLevelProperties(PropertyBag):
    """Label placement for one list level, in label-alignment mode (mm)."""

    label_followed_by = enum_field(LabelFollowedBy, LabelFollowedBy.LISTTAB)
    list_tab_stop_position = Checked(None, accept=optional(is_number))
    text_indent = Checked(None, accept=optional(is_number))
    margin_left = Checked(None, accept=optional(is_number))

    @property
    def position_and_space_mode(self) -> str:
        return LIST_LEVEL_POSITION_AND_SPACE_MODE


class BulletListLevelStyle(ValueObject):
    """Bullet formatting for one level of a list.

    ``level`` is fixed at construction and clamped to 1..10.
    """

    bullet_char = Checked(DEFAULT_BULLET_CHAR, accept=_is_bullet_char)
    number_prefix = Checked(None, accept=optional(_is_affix))
    number_suffix = Checked(None, accept=optional(_is_affix))
    relative_bullet_size = Checked(None, accept=optional(is_percent))

    def __init__(self, level: int) -> None:
        self._level = clamp_level(level)
        self.list_level_properties = ListLevelProperties()

    @property
    def level(self) -> int:
        return self._level

    def canonical_items(self) -> list[tuple[str, str]]:
        items = [("level", str(self._level))]
        items.extend(super().canonical_items())
        items.append(("properties", canonical_value(self.list_level_properties)))
        return items


class ListStyle(Style):
    """Style for lists: one bullet definition per level.

    Levels without a definition fall back to the next lower defined level in
    consuming applications.
    """

    family = StyleFamily.LIST

    def __init__(self, display_name: str | None = None) -> None:
        super().__init__(display_name)
        self.consecutive_numbering = False
        self._levels: dict[int, BulletListLevelStyle] = {}

    def create_bullet_list_level_style(self, level: int) -> BulletListLevelStyle:
        """Create the style for ``level``, replacing any existing one."""
        level_style = BulletListLevelStyle(level)
        self._levels[level_style.level] = level_style
        return level_style

    def get_bullet_list_level_style(self, level: int) -> BulletListLevelStyle | None:
        return self._levels.get(level)

    def remove_list_level_style(self, level: int) -> None:
        self._levels.pop(level, None)

    @property
    def list_level_styles(self) -> list[BulletListLevelStyle]:
        """Level styles ordered by level."""
        return [self._levels[level] for level in sorted(self._levels)]

    def canonical_items(self) -> list[tuple[str, str]]:
        items = [
            ("class", canonical_value(self.class_name)),
            ("consecutive_numbering", canonical_value(self.consecutive_numbering)),
        ]
        items.extend(
            (f"level.{s.level}", canonical_value(s)) for s in self.list_level_styles
        )
        return items

    def is_default(self) -> bool:
        return (
            self.class_name is None
            and not self.consecutive_numbering
            and not self._levels
        )
