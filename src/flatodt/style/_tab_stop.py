"""Tab stop definition for paragraph properties."""

from __future__ import annotations

from ._base import Checked, ValueObject, enum_field, is_color, is_number, optional
from ._color import Color
from ._enums import TabStopLeaderStyle, TabStopType


def _is_single_char(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1


class TabStop(ValueObject):
    """A tab stop at ``position`` millimetres from the paragraph start.

    Negative positions are clamped to 0. ``char`` is only meaningful for
    ``TabStopType.CHAR`` stops and must be a single character.
    """

    position = Checked(0.0, accept=is_number, convert=lambda v: max(v, 0))
    type = enum_field(TabStopType, TabStopType.LEFT)
    char = Checked(None, accept=optional(_is_single_char))
    leader_style = enum_field(TabStopLeaderStyle, TabStopLeaderStyle.NONE)
    leader_color = Checked(None, accept=optional(is_color))

    def __init__(
        self,
        position: float = 0,
        type: TabStopType | str = TabStopType.LEFT,
        *,
        char: str | None = None,
        leader_style: TabStopLeaderStyle | str = TabStopLeaderStyle.NONE,
        leader_color: Color | None = None,
    ) -> None:
        self.position = position
        self.type = type
        self.char = char
        self.leader_style = leader_style
        self.leader_color = leader_color
