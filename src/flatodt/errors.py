"""Exceptions raised by flatodt.

Cosmetic input (a negative font size, a malformed language tag, ...) never
raises; setters keep the previous value instead. The classes below cover
programmer errors and I/O failures only.
"""

from __future__ import annotations


class FlatOdtError(Exception):
    """Base class for flatodt errors."""

    pass


class UnknownStyleError(FlatOdtError, KeyError):
    """A style name was requested for a style that was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class StyleConflictError(FlatOdtError):
    """A common style name is already taken by a style of another kind."""

    pass


class ImageReadError(FlatOdtError):
    """An image could not be read while embedding it."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read image {path!r}: {reason}")


class DocumentWriteError(FlatOdtError):
    """The serialized document could not be written to disk."""

    pass


class OutlineError(FlatOdtError):
    """A JSON document outline is unreadable or invalid."""

    pass
