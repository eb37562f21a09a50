"""Font face declarations of a document."""

from __future__ import annotations

from flatodt.style import FontFace, FontPitch


class FontFaceDeclarations:
    """Append-only map of font name to :class:`FontFace`."""

    def __init__(self) -> None:
        self._fonts: dict[str, FontFace] = {}

    def create(
        self,
        name: str,
        font_family: str | None = None,
        font_pitch: FontPitch | str = FontPitch.VARIABLE,
    ) -> FontFace:
        """Declare a font; returns the existing declaration if ``name`` is taken."""
        font = self._fonts.get(name)
        if font is None:
            font = FontFace(name, font_family, font_pitch)
            self._fonts[name] = font
        return font

    def get(self, name: str) -> FontFace | None:
        return self._fonts.get(name)

    def get_all(self) -> list[FontFace]:
        return list(self._fonts.values())

    def __len__(self) -> int:
        return len(self._fonts)
