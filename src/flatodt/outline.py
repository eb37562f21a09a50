"""Build a TextDocument from a JSON outline.

The outline is validated with pydantic models and then replayed through the
builder API. Example::

    {
      "meta": {"title": "Notes", "language": "en"},
      "styles": [{"name": "Quote", "align": "center", "typeface": "italic"}],
      "body": [
        {"type": "heading", "text": "Notes", "level": 1},
        {"type": "paragraph", "text": "See ", "links": [{"text": "docs", "uri": "https://example.org"}]},
        {"type": "paragraph", "text": "Be brief.", "style": "Quote"},
        {"type": "list", "items": ["one", "two", {"type": "list", "items": ["two.a"]}]},
        {"type": "image", "path": "logo.png", "width": 40, "height": 20}
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flatodt.config import Settings
from flatodt.document import TextDocument
from flatodt.errors import OutlineError
from flatodt.style import (
    AnchorType,
    Color,
    FontPitch,
    HorizontalAlignment,
    PageBreak,
    ParagraphStyle,
    TextLine,
    Typeface,
)
from flatodt.text import List, ListItem, Paragraph, TextBody


class _Model(BaseModel):
    model_config = ConfigDict(extra="forbid")


class MetaOutline(_Model):
    title: str | None = None
    description: str | None = None
    subject: str | None = None
    creator: str | None = None
    keywords: list[str] = Field(default_factory=list)
    language: str | None = None


class FontOutline(_Model):
    name: str
    family: str | None = None
    pitch: FontPitch = FontPitch.VARIABLE


class FormatOutline(_Model):
    """Paragraph formatting shared by named styles and inline formats."""

    align: HorizontalAlignment | None = None
    margin_left: float | None = None
    margin_right: float | None = None
    margin_top: float | None = None
    margin_bottom: float | None = None
    text_indent: float | None = None
    line_height: float | str | None = None
    keep_with_next: bool = False
    page_break: PageBreak = PageBreak.NONE
    background: str | None = None
    color: str | None = None
    font_name: str | None = None
    font_size: float | None = None
    typeface: Typeface = Typeface.NORMAL
    underline: bool = False


class StyleOutline(FormatOutline):
    name: str


class LinkOutline(_Model):
    text: str
    uri: str


class HeadingBlock(_Model):
    type: Literal["heading"]
    text: str = ""
    level: int = 1
    style: str | None = None
    format: FormatOutline | None = None


class ParagraphBlock(_Model):
    type: Literal["paragraph"]
    text: str = ""
    style: str | None = None
    format: FormatOutline | None = None
    links: list[LinkOutline] = Field(default_factory=list)


class ImageBlock(_Model):
    type: Literal["image"]
    path: str
    width: float | None = None
    height: float | None = None
    anchor: AnchorType = AnchorType.PARAGRAPH


class ListBlock(_Model):
    type: Literal["list"]
    style: str | None = None
    items: list[str | ListBlock] = Field(default_factory=list)


Block = Annotated[
    HeadingBlock | ParagraphBlock | ListBlock | ImageBlock,
    Field(discriminator="type"),
]


class DocumentOutline(_Model):
    meta: MetaOutline = Field(default_factory=MetaOutline)
    fonts: list[FontOutline] = Field(default_factory=list)
    styles: list[StyleOutline] = Field(default_factory=list)
    body: list[Block] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_outline(path: Path) -> DocumentOutline:
    """Read and validate an outline file.

    Raises:
        OutlineError: If the file is unreadable, not JSON, or invalid.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise OutlineError(f"Cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise OutlineError(f"{path} is not valid JSON: {e}") from e
    try:
        return DocumentOutline.model_validate(raw)
    except ValidationError as e:
        raise OutlineError(f"{path} is not a valid document outline:\n{e}") from e


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


def _color(value: str | None) -> Color | None:
    if value is None:
        return None
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise OutlineError(f"Invalid color {value!r}") from e


def apply_format(style: ParagraphStyle, fmt: FormatOutline) -> ParagraphStyle:
    """Copy the outline formatting onto ``style``."""
    para = style.paragraph_properties
    if fmt.align is not None:
        para.horizontal_alignment = fmt.align
    for field in ("margin_left", "margin_right", "margin_top", "margin_bottom", "text_indent"):
        value = getattr(fmt, field)
        if value is not None:
            setattr(para, field, value)
    para.line_height = fmt.line_height
    para.keep_with_next = fmt.keep_with_next
    para.page_break = fmt.page_break
    para.background_color = _color(fmt.background)

    text = style.text_properties
    text.color = _color(fmt.color)
    text.font_name = fmt.font_name
    if fmt.font_size is not None:
        text.font_size = fmt.font_size
    text.typeface = fmt.typeface
    text.underline = TextLine() if fmt.underline else None
    return style


def _apply_paragraph_block(
    paragraph: Paragraph, block: HeadingBlock | ParagraphBlock
) -> None:
    paragraph.style_name = block.style
    if block.format is not None:
        paragraph.style = apply_format(ParagraphStyle(), block.format)


def _add_list(parent: TextBody | ListItem, block: ListBlock) -> List:
    lst = parent.add_list()
    lst.style_name = block.style
    for entry in block.items:
        if isinstance(entry, ListBlock):
            # a nested list belongs to the preceding item
            items = lst.get_items()
            holder = items[-1] if items else lst.add_item()
            _add_list(holder, entry)
        else:
            lst.add_item().add_paragraph(entry)
    return lst


def build_document(
    outline: DocumentOutline,
    *,
    base_dir: Path | None = None,
    settings: Settings | None = None,
) -> TextDocument:
    """Replay ``outline`` into a new :class:`TextDocument`.

    Relative image paths are resolved against ``base_dir``.
    """
    document = TextDocument(settings)

    meta = document.meta
    meta.title = outline.meta.title
    meta.description = outline.meta.description
    meta.subject = outline.meta.subject
    meta.creator = outline.meta.creator
    for keyword in outline.meta.keywords:
        meta.add_keyword(keyword)
    meta.language = outline.meta.language

    for font in outline.fonts:
        document.font_faces.create(font.name, font.family, font.pitch)

    for style_outline in outline.styles:
        style = document.common_styles.create_paragraph_style(style_outline.name)
        apply_format(style, style_outline)

    body = document.body
    for block in outline.body:
        if isinstance(block, HeadingBlock):
            _apply_paragraph_block(body.add_heading(block.text, block.level), block)
        elif isinstance(block, ParagraphBlock):
            paragraph = body.add_paragraph(block.text)
            for link in block.links:
                paragraph.add_hyperlink(link.text, link.uri)
            _apply_paragraph_block(paragraph, block)
        elif isinstance(block, ListBlock):
            _add_list(body, block)
        elif isinstance(block, ImageBlock):
            path = Path(block.path)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            image = body.add_paragraph().add_image(str(path))
            image.anchor_type = block.anchor
            if block.width is not None:
                image.width = block.width
            if block.height is not None:
                image.height = block.height

    return document
