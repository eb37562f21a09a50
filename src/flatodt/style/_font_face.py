"""Font face declaration."""

from __future__ import annotations

import re
from typing import Any

from ._base import Checked, ValueObject, enum_field, optional
from ._enums import FontFamilyGeneric, FontPitch

_CHARSET_RE = re.compile(r"^[A-Za-z][A-Za-z0-9._-]*$")


def _is_charset(value: Any) -> bool:
    return isinstance(value, str) and _CHARSET_RE.match(value) is not None


def _to_family_generic(value: Any) -> FontFamilyGeneric:
    return FontFamilyGeneric(value)


class FontFace(ValueObject):
    """A font referenced by ``style:font-name`` in text properties."""

    font_pitch = enum_field(FontPitch, FontPitch.VARIABLE)
    charset = Checked(None, accept=optional(_is_charset))
    family_generic = Checked(
        None,
        accept=optional(lambda v: isinstance(v, FontFamilyGeneric)),
        convert=_to_family_generic,
    )

    def __init__(
        self,
        name: str,
        font_family: str | None = None,
        font_pitch: FontPitch | str = FontPitch.VARIABLE,
    ) -> None:
        self._name = name
        self.font_family = font_family or name
        self.font_pitch = font_pitch

    @property
    def name(self) -> str:
        return self._name

    def canonical_items(self) -> list[tuple[str, str]]:
        return [("name", self._name), ("font_family", self.font_family), *super().canonical_items()]
