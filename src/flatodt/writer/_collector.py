"""Register anonymous styles found in a document tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flatodt.text import List, OdfElement, Paragraph

if TYPE_CHECKING:
    from flatodt.office import AutomaticStyles


def collect_styles(root: OdfElement, automatic_styles: AutomaticStyles) -> AutomaticStyles:
    """Add every customized anonymous style under ``root`` to the registry.

    Pre-order traversal, the same order the body writer uses, so generated
    names are assigned first-seen. Elements that only reference a common
    style by name are skipped; default styles are never declared. Lists
    without items are not written, so their styles are not declared either.
    """
    if isinstance(root, List) and root.size() == 0:
        return automatic_styles
    if isinstance(root, Paragraph | List):
        style = root.style
        if style is not None and not style.is_default():
            automatic_styles.add(style)

    for child in root.children:
        collect_styles(child, automatic_styles)
    return automatic_styles
