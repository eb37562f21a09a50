"""Write ``office:meta``."""

from __future__ import annotations

from datetime import datetime
from xml.etree.ElementTree import Element, SubElement

from flatodt.meta import Meta


def _iso(value: datetime) -> str:
    return value.replace(microsecond=0).isoformat()


def _add(parent: Element, tag: str, text: str | None) -> None:
    if text:
        SubElement(parent, tag).text = text


def write_meta(meta: Meta, root: Element) -> Element:
    """Append ``office:meta`` to ``root``; unset fields are skipped."""
    elem = SubElement(root, "office:meta")

    _add(elem, "meta:generator", meta.generator)
    _add(elem, "dc:title", meta.title)
    _add(elem, "dc:description", meta.description)
    _add(elem, "dc:subject", meta.subject)
    for keyword in meta.keywords:
        _add(elem, "meta:keyword", keyword)
    _add(elem, "meta:initial-creator", meta.initial_creator)
    _add(elem, "dc:creator", meta.creator)
    _add(elem, "meta:printed-by", meta.printed_by)
    if meta.creation_date is not None:
        _add(elem, "meta:creation-date", _iso(meta.creation_date))
    if meta.date is not None:
        _add(elem, "dc:date", _iso(meta.date))
    if meta.print_date is not None:
        _add(elem, "meta:print-date", _iso(meta.print_date))
    _add(elem, "dc:language", meta.language)
    _add(elem, "meta:editing-cycles", str(meta.editing_cycles))

    return elem
