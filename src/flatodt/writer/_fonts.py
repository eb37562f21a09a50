"""Write ``office:font-face-decls``."""

from __future__ import annotations

from xml.etree.ElementTree import Element, SubElement

from flatodt.office import FontFaceDeclarations


def _quote_family(font_family: str) -> str:
    # family names containing spaces must be quoted
    return f"'{font_family}'" if " " in font_family else font_family


def write_font_faces(font_faces: FontFaceDeclarations, root: Element) -> Element | None:
    """Append the font face declarations to ``root``; nothing if there are none."""
    fonts = font_faces.get_all()
    if not fonts:
        return None

    decls = SubElement(root, "office:font-face-decls")
    for font in fonts:
        elem = SubElement(decls, "style:font-face")
        elem.set("style:name", font.name)
        elem.set("svg:font-family", _quote_family(font.font_family))
        if font.family_generic is not None:
            elem.set("style:font-family-generic", font.family_generic.value)
        elem.set("style:font-pitch", font.font_pitch.value)
        if font.charset is not None:
            elem.set("style:font-charset", font.charset)
    return decls
