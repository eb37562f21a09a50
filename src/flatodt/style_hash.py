"""Generate stable, content-based style keys.

Two styles get the same key iff they have the same family, class and
canonical items. Object identity never participates, so independently built
but equal styles collapse to one declaration.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flatodt.style import Style


def canonical_form(style: Style) -> str:
    """JSON array of ``[key, value]`` pairs, family first."""
    pairs = [["family", style.family.value]]
    pairs.extend([key, value] for key, value in style.canonical_items())
    return json.dumps(pairs, ensure_ascii=False)


def style_hash(style: Style) -> str:
    """MD5 hex digest of :func:`canonical_form` (not for crypto, just dedup)."""
    return hashlib.md5(canonical_form(style).encode("utf-8")).hexdigest()
