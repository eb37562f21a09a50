"""flatodt - build OpenDocument text documents and write them as flat XML."""

__version__ = "0.1.0"

from loguru import logger

from flatodt.document import TextDocument
from flatodt.errors import (
    DocumentWriteError,
    FlatOdtError,
    ImageReadError,
    OutlineError,
    StyleConflictError,
    UnknownStyleError,
)
from flatodt.meta import Meta
from flatodt.office import AutomaticStyles, CommonStyles, FontFaceDeclarations
from flatodt.style import ListStyle, ParagraphStyle
from flatodt.text import Heading, Hyperlink, Image, List, ListItem, Paragraph, TextBody
from flatodt.writer import serialize, to_xml_string

# Library code stays quiet until a host calls flatodt.logging.configure_logging().
logger.disable("flatodt")

__all__ = [
    "AutomaticStyles",
    "CommonStyles",
    "DocumentWriteError",
    "FlatOdtError",
    "FontFaceDeclarations",
    "Heading",
    "Hyperlink",
    "Image",
    "ImageReadError",
    "List",
    "ListItem",
    "ListStyle",
    "Meta",
    "OutlineError",
    "Paragraph",
    "ParagraphStyle",
    "StyleConflictError",
    "TextBody",
    "TextDocument",
    "UnknownStyleError",
    "__version__",
    "serialize",
    "to_xml_string",
]
