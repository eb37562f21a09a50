"""RGB color value."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError("Invalid value for a color channel")
            if not 0 <= channel <= 255:
                raise ValueError("Invalid value for a color channel")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` (the leading ``#`` is optional)."""
        match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
        if match is None:
            raise ValueError("Invalid color value")
        return cls(*(int(part, 16) for part in match.groups()))

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls(red, green, blue)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def __str__(self) -> str:
        return self.to_hex()
