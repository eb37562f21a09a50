"""Document metadata (``office:meta``)."""

from __future__ import annotations

import re
from datetime import datetime

_LANGUAGE_RE = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")


class Meta:
    """Descriptive metadata of a document.

    ``initial_creator`` and ``generator`` are passed in by the caller (see
    :class:`flatodt.document.TextDocument`), never read from the environment
    here. Invalid language tags and editing-cycle counts are ignored.
    """

    def __init__(
        self,
        *,
        generator: str | None = None,
        initial_creator: str | None = None,
        creation_date: datetime | None = None,
    ) -> None:
        self.generator = generator
        self.title: str | None = None
        self.description: str | None = None
        self.subject: str | None = None
        self._keywords: list[str] = []
        self.initial_creator = initial_creator
        self.creator: str | None = None
        self.printed_by: str | None = None
        self.creation_date = creation_date or datetime.now().replace(microsecond=0)
        self.date: datetime | None = None
        self.print_date: datetime | None = None
        self._language: str | None = None
        self._editing_cycles = 1

    # -- keywords ------------------------------------------------------------

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    def add_keyword(self, keyword: str) -> Meta:
        if keyword and keyword not in self._keywords:
            self._keywords.append(keyword)
        return self

    def remove_keyword(self, keyword: str) -> Meta:
        if keyword in self._keywords:
            self._keywords.remove(keyword)
        return self

    def clear_keywords(self) -> Meta:
        self._keywords = []
        return self

    # -- validated fields ----------------------------------------------------

    @property
    def language(self) -> str | None:
        """Language tag such as ``"en"`` or ``"de-DE"``."""
        return self._language

    @language.setter
    def language(self, value: str | None) -> None:
        if value is None or (isinstance(value, str) and _LANGUAGE_RE.match(value)):
            self._language = value

    @property
    def editing_cycles(self) -> int:
        return self._editing_cycles

    @editing_cycles.setter
    def editing_cycles(self, value: int) -> None:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
            self._editing_cycles = value

    def __repr__(self) -> str:
        return f"Meta(title={self.title!r}, creator={self.creator!r})"
