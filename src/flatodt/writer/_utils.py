"""XML helpers shared by the writers."""

from __future__ import annotations

from decimal import Decimal
from xml.etree.ElementTree import Element, tostring

# Elements whose text is significant; pretty-printing must not touch them.
_MIXED_CONTENT = frozenset({"text:p", "text:h", "office:binary-data"})

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def format_number(value: float) -> str:
    """Render a number in fixed notation, without a trailing ``.0``.

    ``repr`` gives the shortest round-tripping digits; ``Decimal`` lays them
    out without an exponent (``1e-05`` becomes ``0.00001``).
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


def mm(value: float) -> str:
    return f"{format_number(value)}mm"


def pt(value: float) -> str:
    return f"{format_number(value)}pt"


def _indent(elem: Element, level: int = 0, space: str = "  ") -> None:
    """Like ``xml.etree.ElementTree.indent`` but leaves mixed content alone."""
    if elem.tag in _MIXED_CONTENT or len(elem) == 0:
        return
    child_indent = "\n" + space * (level + 1)
    if not elem.text or not elem.text.strip():
        elem.text = child_indent
    child = None
    for child in elem:
        _indent(child, level + 1, space)
        if not child.tail or not child.tail.strip():
            child.tail = child_indent
    if child is not None and not child.tail.strip():
        child.tail = "\n" + space * level


def element_to_string(elem: Element, pretty: bool = True) -> str:
    """Convert Element to an XML string with declaration.

    Pretty-printing indents structural elements only; paragraph content is
    written exactly as built so no whitespace leaks into the text.
    """
    if pretty:
        _indent(elem)
    xml_str = tostring(elem, encoding="unicode")
    return XML_DECLARATION + xml_str + "\n"
