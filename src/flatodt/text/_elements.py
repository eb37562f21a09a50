"""Document tree nodes.

The tree is parent-owned: each node keeps an ordered list of children and a
child belongs to exactly one parent. The set of node kinds is closed; writers
dispatch on the concrete class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flatodt.style import AnchorType

if TYPE_CHECKING:
    from flatodt.style import ListStyle, ParagraphStyle


class OdfElement:
    """Base node: an ordered list of owned children."""

    def __init__(self) -> None:
        self._children: list[OdfElement] = []
        self._parent: OdfElement | None = None

    @property
    def children(self) -> list[OdfElement]:
        """Child nodes in document order (a copy)."""
        return list(self._children)

    @property
    def parent(self) -> OdfElement | None:
        return self._parent

    def _adopt(self, child: OdfElement) -> None:
        if child._parent is not None:
            raise ValueError(f"{child!r} already belongs to {child._parent!r}")
        node: OdfElement | None = self
        while node is not None:
            if node is child:
                raise ValueError("An element cannot contain itself")
            node = node._parent
        child._parent = self

    def _append(self, child: OdfElement) -> None:
        self._adopt(child)
        self._children.append(child)

    def _insert(self, position: int, child: OdfElement) -> None:
        self._adopt(child)
        self._children.insert(position, child)

    def _remove_at(self, index: int) -> OdfElement:
        child = self._children.pop(index)
        child._parent = None
        return child

    def _clear(self) -> None:
        for child in self._children:
            child._parent = None
        self._children = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={len(self._children)})"


# ---------------------------------------------------------------------------
# Inline content
# ---------------------------------------------------------------------------


class TextRun(OdfElement):
    """Raw text; whitespace is encoded on output."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"


class Hyperlink(TextRun):
    """A text run linking to ``uri``."""

    def __init__(self, text: str, uri: str) -> None:
        super().__init__(text)
        self._uri = uri

    @property
    def uri(self) -> str:
        return self._uri

    @uri.setter
    def uri(self, value: str) -> None:
        # blank targets are ignored
        if isinstance(value, str) and value.strip():
            self._uri = value


class Image(OdfElement):
    """An embedded image, written as a frame holding base64 data.

    ``width`` and ``height`` are in millimetres; non-positive values are
    ignored.
    """

    def __init__(self, path: str) -> None:
        super().__init__()
        self._path = path
        self._anchor_type = AnchorType.PARAGRAPH
        self._width: float | None = None
        self._height: float | None = None

    @property
    def path(self) -> str:
        return self._path

    @property
    def anchor_type(self) -> AnchorType:
        return self._anchor_type

    @anchor_type.setter
    def anchor_type(self, value: AnchorType | str) -> None:
        try:
            self._anchor_type = AnchorType(value)
        except ValueError:
            pass

    @property
    def width(self) -> float | None:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        if _is_positive_length(value):
            self._width = value

    @property
    def height(self) -> float | None:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if _is_positive_length(value):
            self._height = value

    def set_size(self, width: float, height: float) -> Image:
        self.width = width
        self.height = height
        return self

    def __repr__(self) -> str:
        return f"Image({self._path!r})"


def _is_positive_length(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and value > 0


# ---------------------------------------------------------------------------
# Block content
# ---------------------------------------------------------------------------


class Paragraph(OdfElement):
    """A paragraph of text runs, hyperlinks and images.

    ``style`` is an anonymous style declared automatically; ``style_name``
    references a common style by display name. When both are set, the
    anonymous style wins.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.style: ParagraphStyle | None = None
        self.style_name: str | None = None
        if text:
            self.add_text(text)

    def add_text(self, text: str) -> Paragraph:
        """Append text, merging into a trailing plain text run."""
        if self._children and type(self._children[-1]) is TextRun:
            last = self._children[-1]
            last.text += text  # type: ignore[attr-defined]
        else:
            self._append(TextRun(text))
        return self

    @property
    def text(self) -> str:
        """Concatenated plain text runs (hyperlinks and images excluded)."""
        return "".join(c.text for c in self._children if type(c) is TextRun)  # type: ignore[attr-defined]

    @text.setter
    def text(self, value: str) -> None:
        self._clear()
        if value:
            self.add_text(value)

    def add_hyperlink(self, text: str, uri: str) -> Hyperlink:
        hyperlink = Hyperlink(text, uri)
        self._append(hyperlink)
        return hyperlink

    def add_image(self, path: str) -> Image:
        image = Image(path)
        self._append(image)
        return image


class Heading(Paragraph):
    """A paragraph with an outline level (1 and up)."""

    def __init__(self, text: str = "", level: int = 1) -> None:
        super().__init__(text)
        self._level = 1
        self.level = level

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        try:
            self._level = max(1, int(value))
        except (TypeError, ValueError):
            pass


class _BlockContainer(OdfElement):
    """Shared builder methods for containers of block content."""

    def add_heading(self, text: str = "", level: int = 1) -> Heading:
        heading = Heading(text, level)
        self._append(heading)
        return heading

    def add_paragraph(self, text: str = "") -> Paragraph:
        paragraph = Paragraph(text)
        self._append(paragraph)
        return paragraph

    def add_list(self) -> List:
        lst = List()
        self._append(lst)
        return lst


class ListItem(_BlockContainer):
    """An item of a list; holds headings, paragraphs and nested lists."""


class List(OdfElement):
    """An ordered list of items. Lists without items are not written."""

    def __init__(self) -> None:
        super().__init__()
        self.style: ListStyle | None = None
        self.style_name: str | None = None

    def add_item(self, item: ListItem | None = None) -> ListItem:
        item = item if item is not None else ListItem()
        self._append(item)
        return item

    def insert_item(self, position: int, item: ListItem) -> ListItem:
        """Insert ``item`` at ``position``.

        Negative positions insert at the front; positions past the end append.
        An item that already belongs to a list raises ValueError.
        """
        self._insert(max(0, position), item)
        return item

    def get_item(self, index: int) -> ListItem | None:
        if 0 <= index < len(self._children):
            return self._children[index]  # type: ignore[return-value]
        return None

    def get_items(self) -> list[ListItem]:
        return list(self._children)  # type: ignore[arg-type]

    def remove_item_at(self, index: int) -> ListItem | None:
        """Remove and return the item at ``index``; None if out of range."""
        if 0 <= index < len(self._children):
            return self._remove_at(index)  # type: ignore[return-value]
        return None

    def clear(self) -> None:
        self._clear()

    def size(self) -> int:
        return len(self._children)

    def __len__(self) -> int:
        return len(self._children)


class TextBody(_BlockContainer):
    """The document body."""
