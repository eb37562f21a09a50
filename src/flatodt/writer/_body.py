"""Write the document body (``office:body/office:text``)."""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

from loguru import logger

from flatodt.errors import ImageReadError
from flatodt.text import (
    Heading,
    Hyperlink,
    Image,
    List,
    ListItem,
    OdfElement,
    Paragraph,
    TextBody,
    TextRun,
)

from ._text_codec import append_text
from ._utils import mm

if TYPE_CHECKING:
    from flatodt.office import AutomaticStyles, CommonStyles

    from ._images import ImageReader

HYPERLINK_TYPE = "simple"


class BodyWriter:
    """Turns the document tree into XML, one method per node kind.

    Walks the tree in the same pre-order as
    :func:`flatodt.writer._collector.collect_styles`, so every anonymous style
    resolves to the name it was registered under.
    """

    def __init__(
        self,
        common_styles: CommonStyles,
        automatic_styles: AutomaticStyles,
        image_reader: ImageReader,
    ) -> None:
        self.common_styles = common_styles
        self.automatic_styles = automatic_styles
        self.image_reader = image_reader

    def write(self, node: OdfElement, parent: Element) -> None:
        match node:
            case TextBody():
                self._write_children(node, self._write_text_body(parent))
            case Heading():
                self._write_children(node, self._write_heading(node, parent))
            case Paragraph():
                self._write_children(node, self._write_paragraph(node, parent))
            case List():
                self._write_list(node, parent)
            case ListItem():
                self._write_children(node, SubElement(parent, "text:list-item"))
            case Hyperlink():
                self._write_hyperlink(node, parent)
            case TextRun():
                append_text(parent, node.text)
            case Image():
                self._write_image(node, parent)
            case _:
                raise TypeError(f"Unsupported element: {type(node).__name__}")

    def _write_children(self, node: OdfElement, parent: Element) -> None:
        for child in node.children:
            self.write(child, parent)

    # -- blocks --------------------------------------------------------------

    def _write_text_body(self, parent: Element) -> Element:
        body = SubElement(parent, "office:body")
        return SubElement(body, "office:text")

    def _write_heading(self, heading: Heading, parent: Element) -> Element:
        elem = SubElement(parent, "text:h")
        elem.set("text:outline-level", str(heading.level))
        self._set_style_name(heading, elem)
        return elem

    def _write_paragraph(self, paragraph: Paragraph, parent: Element) -> Element:
        elem = SubElement(parent, "text:p")
        self._set_style_name(paragraph, elem)
        return elem

    def _write_list(self, lst: List, parent: Element) -> None:
        # a list without items is not valid ODF
        if lst.size() == 0:
            return
        elem = SubElement(parent, "text:list")
        self._set_style_name(lst, elem)
        self._write_children(lst, elem)

    # -- inline --------------------------------------------------------------

    def _write_hyperlink(self, hyperlink: Hyperlink, parent: Element) -> None:
        elem = SubElement(parent, "text:a")
        elem.set("xlink:type", HYPERLINK_TYPE)
        elem.set("xlink:href", hyperlink.uri)
        append_text(elem, hyperlink.text)

    def _write_image(self, image: Image, parent: Element) -> None:
        try:
            data = self.image_reader(image.path)
        except OSError as e:
            # custom readers may raise plain I/O errors
            raise ImageReadError(image.path, e.strerror or str(e)) from e

        frame = SubElement(parent, "draw:frame")
        frame.set("text:anchor-type", image.anchor_type.value)
        if image.width is not None:
            frame.set("svg:width", mm(image.width))
        if image.height is not None:
            frame.set("svg:height", mm(image.height))

        draw_image = SubElement(frame, "draw:image")
        binary = SubElement(draw_image, "office:binary-data")
        binary.text = base64.b64encode(data).decode("ascii")
        logger.debug("Embedded image {} ({} bytes)", image.path, len(data))

    # -- styles --------------------------------------------------------------

    def _set_style_name(self, node: Paragraph | List, elem: Element) -> None:
        name = self._resolve_style_name(node)
        if name is not None:
            elem.set("text:style-name", name)

    def _resolve_style_name(self, node: Paragraph | List) -> str | None:
        """Anonymous style name first, then the common style, else None."""
        style = node.style
        if style is not None and not style.is_default():
            return self.automatic_styles.get_name(style)
        if node.style_name is not None:
            return self.common_styles.get_name(node.style_name)
        return None


def write_body(
    body: TextBody,
    common_styles: CommonStyles,
    automatic_styles: AutomaticStyles,
    root: Element,
    image_reader: ImageReader,
) -> None:
    """Append ``office:body`` for ``body`` to ``root``."""
    BodyWriter(common_styles, automatic_styles, image_reader).write(body, root)
