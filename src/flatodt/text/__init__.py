"""Document tree: body, headings, paragraphs, lists, links and images."""

from ._elements import (
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

__all__ = [
    "Heading",
    "Hyperlink",
    "Image",
    "List",
    "ListItem",
    "OdfElement",
    "Paragraph",
    "TextBody",
    "TextRun",
]
