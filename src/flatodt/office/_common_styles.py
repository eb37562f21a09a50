"""Registry of user-named styles."""

from __future__ import annotations

from typing import TypeVar

from loguru import logger

from flatodt.errors import StyleConflictError
from flatodt.style import ListStyle, ParagraphStyle, Style

_S = TypeVar("_S", bound=Style)


class CommonStyles:
    """Named styles keyed by display name.

    Identity is the name, not the content: two differently named but
    identical styles remain two declarations.
    """

    def __init__(self) -> None:
        self._styles: dict[str, Style] = {}

    def create_paragraph_style(self, display_name: str) -> ParagraphStyle:
        """Return the paragraph style named ``display_name``, creating it if needed."""
        return self._create(display_name, ParagraphStyle)

    def create_list_style(self, display_name: str) -> ListStyle:
        """Return the list style named ``display_name``, creating it if needed."""
        return self._create(display_name, ListStyle)

    def _create(self, display_name: str, style_cls: type[_S]) -> _S:
        existing = self._styles.get(display_name)
        if existing is not None:
            if not isinstance(existing, style_cls):
                raise StyleConflictError(
                    f"Style {display_name!r} already exists as a {type(existing).__name__}"
                )
            return existing

        style = style_cls(display_name)
        self._styles[display_name] = style
        logger.debug("Created common {} style {!r}", style.family.value, display_name)
        return style

    def get(self, display_name: str) -> Style | None:
        return self._styles.get(display_name)

    def get_name(self, display_name: str) -> str | None:
        """Escaped style name for ``display_name``, or None if unknown."""
        style = self._styles.get(display_name)
        return style.name if style is not None else None

    def get_all(self) -> list[Style]:
        """Styles in creation order."""
        return list(self._styles.values())

    def __contains__(self, display_name: object) -> bool:
        return display_name in self._styles

    def __len__(self) -> int:
        return len(self._styles)
