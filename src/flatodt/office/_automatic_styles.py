"""Content-addressed registry of anonymous styles."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from loguru import logger

from flatodt.errors import UnknownStyleError
from flatodt.style import Style, StyleFamily
from flatodt.style_hash import style_hash

# Generated names are <prefix><sequence>, numbered per family.
FAMILY_PREFIXES: dict[StyleFamily, str] = {
    StyleFamily.PARAGRAPH: "P",
    StyleFamily.TEXT: "T",
    StyleFamily.LIST: "L",
}


@dataclass(frozen=True)
class _Entry:
    hash: str
    name: str
    prefix: str
    sequence: int
    style: Style


class AutomaticStyles:
    """Anonymous styles, deduplicated by value and named per family.

    ``add`` stores a deep copy of the style. Mutating the original afterwards
    does not change the stored declaration; the mutated style simply hashes to
    a different key and must be added again.

    Example::

        styles = AutomaticStyles()
        styles.add(style_a)            # 'P1'
        styles.add(copy_of_style_a)    # 'P1' again, no new entry
        styles.get_name(style_a)       # 'P1'
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._counters: dict[str, int] = {}

    def add(self, style: Style) -> str:
        """Register ``style`` and return its generated name.

        Adding a style equal to one already registered is a no-op that
        returns the existing name.
        """
        key = style_hash(style)
        entry = self._entries.get(key)
        if entry is not None:
            return entry.name

        prefix = FAMILY_PREFIXES[style.family]
        sequence = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = sequence
        entry = _Entry(
            hash=key,
            name=f"{prefix}{sequence}",
            prefix=prefix,
            sequence=sequence,
            style=copy.deepcopy(style),
        )
        self._entries[key] = entry
        logger.debug("Registered automatic {} style {}", style.family.value, entry.name)
        return entry.name

    def get_name(self, style: Style) -> str:
        """Return the generated name of a registered style.

        Raises:
            UnknownStyleError: If no equal style was added.
        """
        entry = self._entries.get(style_hash(style))
        if entry is None:
            raise UnknownStyleError(f"Unknown style {style!r}; add() it before get_name()")
        return entry.name

    def get_all(self) -> list[Style]:
        """Registered style snapshots in name order (P2 before P10)."""
        entries = sorted(self._entries.values(), key=lambda e: (e.prefix, e.sequence))
        return [e.style for e in entries]

    def items(self) -> list[tuple[str, Style]]:
        """``(name, style)`` pairs in name order."""
        entries = sorted(self._entries.values(), key=lambda e: (e.prefix, e.sequence))
        return [(e.name, e.style) for e in entries]

    def __contains__(self, style: object) -> bool:
        return isinstance(style, Style) and style_hash(style) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
