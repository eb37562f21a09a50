"""TextDocument: the object callers build and save."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from flatodt.config import Settings, get_settings
from flatodt.errors import DocumentWriteError
from flatodt.meta import Meta
from flatodt.office import CommonStyles, FontFaceDeclarations
from flatodt.text import TextBody
from flatodt.writer import ImageReader, read_image_bytes, serialize, to_xml_string


class TextDocument:
    """An OpenDocument text document.

    Example::

        document = TextDocument()
        document.meta.title = "Report"
        document.body.add_heading("Summary")
        document.body.add_paragraph("All good.")
        document.save("report.fodt")
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.body = TextBody()
        self.meta = Meta(
            generator=self.settings.generator,
            initial_creator=self.settings.initial_creator,
        )
        self.common_styles = CommonStyles()
        self.font_faces = FontFaceDeclarations()

    def to_xml_string(self, image_reader: ImageReader = read_image_bytes) -> str:
        """Serialize the document as flat ODF XML."""
        root = serialize(self, image_reader=image_reader)
        return to_xml_string(root, pretty=self.settings.pretty_print)

    def save(self, path: str | Path, image_reader: ImageReader = read_image_bytes) -> Path:
        """Write the document to ``path`` (conventionally ``*.fodt``).

        Raises:
            ImageReadError: If an embedded image cannot be read.
            DocumentWriteError: If the file cannot be written.
        """
        target = Path(path)
        xml = self.to_xml_string(image_reader=image_reader)
        try:
            target.write_text(xml, encoding="utf-8")
        except OSError as e:
            raise DocumentWriteError(f"Cannot write {target}: {e.strerror or e}") from e
        logger.info("Wrote {} ({} bytes)", target, len(xml.encode("utf-8")))
        return target

    def __repr__(self) -> str:
        return f"TextDocument(title={self.meta.title!r})"
