"""Convert lightly marked-up plain text into a TextDocument.

- Blank lines separate paragraphs; single newlines become line breaks.
- ``# Title`` lines become headings (the number of ``#`` is the level).
- Consecutive ``- item`` lines become a bulleted list.
"""

from __future__ import annotations

import re

from flatodt.config import Settings
from flatodt.document import TextDocument
from flatodt.text import List

_HEADING_RE = re.compile(r"^(#{1,10})\s+(.*)$")
_ITEM_RE = re.compile(r"^[-*]\s+(.*)$")


def text_to_document(
    text: str,
    *,
    title: str | None = None,
    settings: Settings | None = None,
) -> TextDocument:
    """Build a document from ``text``."""
    document = TextDocument(settings)
    document.meta.title = title
    body = document.body

    pending: list[str] = []
    current_list: List | None = None

    def flush_paragraph() -> None:
        if pending:
            body.add_paragraph("\n".join(pending))
            pending.clear()

    for raw_line in text.replace("\r\n", "\n").split("\n"):
        line = raw_line.rstrip()
        if not line.strip():
            flush_paragraph()
            current_list = None
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            flush_paragraph()
            current_list = None
            body.add_heading(heading.group(2), len(heading.group(1)))
            continue

        item = _ITEM_RE.match(line)
        if item:
            flush_paragraph()
            if current_list is None:
                current_list = body.add_list()
            current_list.add_item().add_paragraph(item.group(1))
            continue

        current_list = None
        pending.append(line)

    flush_paragraph()
    return document
