"""Writer module: TextDocument → flat ODF XML.

Public API:
    serialize(document) → Element       - build the office:document tree
    to_xml_string(element) → str        - XML text with declaration
    read_image_bytes(path) → bytes      - default image reader

Pipeline per call: a fresh AutomaticStyles registry is filled by the style
collector, then meta, font faces, common styles, automatic styles and the
body are written in schema order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element

from loguru import logger

from flatodt.office import AutomaticStyles

from ._body import write_body
from ._collector import collect_styles
from ._fonts import write_font_faces
from ._images import ImageReader, read_image_bytes
from ._meta import write_meta
from ._styles import write_styles
from ._text_codec import Segment, SegmentKind, append_text, decode_segments, segment_text
from ._utils import element_to_string

if TYPE_CHECKING:
    from flatodt.document import TextDocument

MIMETYPE = "application/vnd.oasis.opendocument.text"
OFFICE_VERSION = "1.2"

NAMESPACES: dict[str, str] = {
    "office": "urn:oasis:names:tc:opendocument:xmlns:office:1.0",
    "dc": "http://purl.org/dc/elements/1.1/",
    "draw": "urn:oasis:names:tc:opendocument:xmlns:drawing:1.0",
    "fo": "urn:oasis:names:tc:opendocument:xmlns:xsl-fo-compatible:1.0",
    "meta": "urn:oasis:names:tc:opendocument:xmlns:meta:1.0",
    "style": "urn:oasis:names:tc:opendocument:xmlns:style:1.0",
    "svg": "urn:oasis:names:tc:opendocument:xmlns:svg-compatible:1.0",
    "text": "urn:oasis:names:tc:opendocument:xmlns:text:1.0",
    "xlink": "http://www.w3.org/1999/xlink",
}


def serialize(
    document: TextDocument,
    *,
    automatic_styles_factory: Callable[[], AutomaticStyles] = AutomaticStyles,
    image_reader: ImageReader = read_image_bytes,
) -> Element:
    """Build the ``office:document`` element for ``document``.

    Raises:
        ImageReadError: If an embedded image cannot be read. No partial
            document is returned.
    """
    root = Element("office:document")
    for prefix, uri in NAMESPACES.items():
        root.set(f"xmlns:{prefix}", uri)
    root.set("office:mimetype", MIMETYPE)
    root.set("office:version", OFFICE_VERSION)

    automatic_styles = collect_styles(document.body, automatic_styles_factory())
    logger.debug(
        "Serializing document: {} common, {} automatic styles",
        len(document.common_styles),
        len(automatic_styles),
    )

    write_meta(document.meta, root)
    write_font_faces(document.font_faces, root)
    write_styles(document.common_styles, root)
    write_styles(automatic_styles, root)
    write_body(
        document.body,
        document.common_styles,
        automatic_styles,
        root,
        image_reader,
    )
    return root


def to_xml_string(element: Element, pretty: bool = True) -> str:
    """Serialize an element built by :func:`serialize` to text."""
    return element_to_string(element, pretty=pretty)


__all__ = [
    "MIMETYPE",
    "NAMESPACES",
    "OFFICE_VERSION",
    "ImageReader",
    "Segment",
    "SegmentKind",
    "append_text",
    "collect_styles",
    "decode_segments",
    "read_image_bytes",
    "segment_text",
    "serialize",
    "to_xml_string",
    "write_styles",
]
