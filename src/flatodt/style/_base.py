"""Shared machinery for style value objects.

Value objects compare and hash by their *canonical items*: an ordered list of
``(field, text)`` pairs covering every semantically relevant field. Fields
declared with :class:`Checked` are picked up automatically in declaration
order, so a new property can't be left out of the deduplication key.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from ._color import Color

_PERCENT_RE = re.compile(r"^-?([0-9]+(\.[0-9]*)?|\.[0-9]+)%$")


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_non_negative_number(value: Any) -> bool:
    return is_number(value) and value >= 0


def is_positive_number(value: Any) -> bool:
    return is_number(value) and value > 0


def is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_percent(value: Any) -> bool:
    """Check for a percentage string such as ``"150%"`` or ``".5%"``."""
    return isinstance(value, str) and _PERCENT_RE.match(value) is not None


def optional(check: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Accept None in addition to whatever ``check`` accepts."""
    return lambda value: value is None or check(value)


def is_color(value: Any) -> bool:
    return isinstance(value, Color)


# ---------------------------------------------------------------------------
# Canonical form
# ---------------------------------------------------------------------------


def canonical_value(value: Any) -> str:
    """Render a field value in the stable textual form used for hashing."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if is_number(value):
        # 5 and 5.0 describe the same length
        return repr(float(value))
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, ValueObject):
        return repr(value.canonical_items())
    if isinstance(value, str):
        # quoted: "" stays distinct from None and separators in values are inert
        return repr(value)
    return str(value)


class Checked:
    """Descriptor for a property whose setter silently rejects bad input.

    ``convert`` runs first (a ``ValueError`` or ``TypeError`` from it counts as
    rejection), then ``accept`` decides. A rejected value leaves the previous
    one in place.
    """

    def __init__(
        self,
        default: Any,
        accept: Callable[[Any], bool] | None = None,
        convert: Callable[[Any], Any] | None = None,
    ) -> None:
        self.default = default
        self.accept = accept
        self.convert = convert
        self.name = ""
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._attr = f"_{name}"

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj.__dict__.get(self._attr, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        if self.convert is not None and value is not None:
            try:
                value = self.convert(value)
            except (ValueError, TypeError):
                return
        if self.accept is not None and not self.accept(value):
            return
        obj.__dict__[self._attr] = value


def enum_field(enum_cls: type[Enum], default: Enum) -> Checked:
    """A non-optional enum property; strings are coerced to members."""
    return Checked(default, accept=lambda v: isinstance(v, enum_cls), convert=enum_cls)


def checked_fields(cls: type) -> list[Checked]:
    """All :class:`Checked` descriptors of ``cls`` in declaration order."""
    fields: list[Checked] = []
    seen: set[str] = set()
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, Checked) and name not in seen:
                seen.add(name)
                fields.append(attr)
    return fields


# ---------------------------------------------------------------------------
# Base classes
# ---------------------------------------------------------------------------


class ValueObject:
    """A mutable record compared by value."""

    __hash__ = None  # type: ignore[assignment]

    def canonical_items(self) -> list[tuple[str, str]]:
        return [
            (field.name, canonical_value(getattr(self, field.name)))
            for field in checked_fields(type(self))
        ]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.canonical_items() == other.canonical_items()  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        changed = ", ".join(
            f"{field.name}={getattr(self, field.name)!r}"
            for field in checked_fields(type(self))
            if getattr(self, field.name) != field.default
        )
        return f"{type(self).__name__}({changed})"


class PropertyBag(ValueObject):
    """A value object where every field has a default."""

    def is_default(self) -> bool:
        """True if no property differs from its default."""
        return self.canonical_items() == type(self)().canonical_items()
