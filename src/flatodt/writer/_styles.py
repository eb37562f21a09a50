"""Write style declarations (``office:styles`` / ``office:automatic-styles``).

Each property is written only when it differs from its default, and in the
order the schema declares the attributes.
"""

from __future__ import annotations

from xml.etree.ElementTree import Element, SubElement

from flatodt.office import AutomaticStyles, CommonStyles
from flatodt.style import (
    DEFAULT_FONT_SIZE,
    BulletListLevelStyle,
    Color,
    FontVariant,
    HorizontalAlignment,
    HorizontalAlignmentLastLine,
    LineWidth,
    ListStyle,
    PageBreak,
    ParagraphProperties,
    ParagraphStyle,
    Style,
    TabStopLeaderStyle,
    TabStopType,
    TextLine,
    TextProperties,
    TextTransformation,
    VerticalAlignment,
)

from ._utils import mm, pt

_SIDES = ("top", "bottom", "left", "right")


def write_styles(
    styles: CommonStyles | AutomaticStyles,
    root: Element,
) -> Element | None:
    """Append the style container for ``styles`` to ``root``.

    Common styles go to ``office:styles``, anonymous ones to
    ``office:automatic-styles``. Nothing is written for an empty registry.
    """
    if isinstance(styles, AutomaticStyles):
        named = styles.items()
        tag = "office:automatic-styles"
    else:
        named = [(s.name, s) for s in styles.get_all()]
        tag = "office:styles"

    if not named:
        return None

    container = SubElement(root, tag)
    for name, style in named:
        write_style(style, name, container)
    return container


def write_style(style: Style, name: str, parent: Element) -> Element:
    """Write one style declaration under ``parent``."""
    if isinstance(style, ParagraphStyle):
        return _write_paragraph_style(style, name, parent)
    if isinstance(style, ListStyle):
        return _write_list_style(style, name, parent)
    raise TypeError(f"Unsupported style type: {type(style).__name__}")


def _set_names(style: Style, name: str, elem: Element) -> None:
    elem.set("style:name", name)
    if style.display_name is not None:
        elem.set("style:display-name", style.display_name)


# ---------------------------------------------------------------------------
# Paragraph styles
# ---------------------------------------------------------------------------


def _write_paragraph_style(style: ParagraphStyle, name: str, parent: Element) -> Element:
    elem = SubElement(parent, "style:style")
    _set_names(style, name, elem)
    elem.set("style:family", style.family.value)
    if style.class_name is not None:
        elem.set("style:class", style.class_name)

    if not style.paragraph_properties.is_default():
        write_paragraph_properties(style.paragraph_properties, elem)
    if not style.text_properties.is_default():
        write_text_properties(style.text_properties, elem)
    return elem


def write_paragraph_properties(props: ParagraphProperties, parent: Element) -> Element:
    """Write ``style:paragraph-properties``; only non-default values appear."""
    elem = SubElement(parent, "style:paragraph-properties")

    line_height = props.line_height
    if isinstance(line_height, str):
        elem.set("fo:line-height", line_height)
    elif line_height is not None:
        elem.set("fo:line-height", mm(line_height))
    if props.line_height_at_least is not None:
        elem.set("style:line-height-at-least", mm(props.line_height_at_least))
    if props.line_spacing is not None:
        elem.set("style:line-spacing", mm(props.line_spacing))

    alignment = props.horizontal_alignment
    if alignment != HorizontalAlignment.DEFAULT:
        elem.set("fo:text-align", alignment.value)
    last_line = props.horizontal_alignment_last_line
    if (
        alignment == HorizontalAlignment.JUSTIFY
        and last_line != HorizontalAlignmentLastLine.DEFAULT
    ):
        elem.set("fo:text-align-last", last_line.value)

    if props.keep_together:
        elem.set("fo:keep-together", "always")
    if props.widows is not None:
        elem.set("fo:widows", str(props.widows))
    if props.orphans is not None:
        elem.set("fo:orphans", str(props.orphans))

    for attr, value in (
        ("fo:margin-left", props.margin_left),
        ("fo:margin-right", props.margin_right),
        ("fo:text-indent", props.text_indent),
        ("fo:margin-top", props.margin_top),
        ("fo:margin-bottom", props.margin_bottom),
    ):
        if value != 0:
            elem.set(attr, mm(value))

    if props.page_break == PageBreak.BEFORE:
        elem.set("fo:break-before", "page")
    elif props.page_break == PageBreak.AFTER:
        elem.set("fo:break-after", "page")

    if props.background_color is not None:
        elem.set("fo:background-color", props.background_color.to_hex())

    for side in _SIDES:
        border = getattr(props, f"border_{side}")
        if border is not None and border.is_visible:
            elem.set(
                f"fo:border-{side}",
                f"{mm(border.width)} {border.style.value} {border.color.to_hex()}",
            )

    for side in _SIDES:
        padding = getattr(props, f"padding_{side}")
        if padding is not None:
            elem.set(f"fo:padding-{side}", mm(padding))

    if props.keep_with_next:
        elem.set("fo:keep-with-next", "always")
    if props.vertical_alignment != VerticalAlignment.DEFAULT:
        elem.set("style:vertical-align", props.vertical_alignment.value)

    tab_stops = props.tab_stops
    if tab_stops:
        tab_stops_elem = SubElement(elem, "style:tab-stops")
        for tab_stop in tab_stops:
            tab_elem = SubElement(tab_stops_elem, "style:tab-stop")
            tab_elem.set("style:position", mm(tab_stop.position))
            # a char stop without a char cannot be declared; it falls back to left
            if tab_stop.type == TabStopType.CHAR and tab_stop.char is not None:
                tab_elem.set("style:type", tab_stop.type.value)
                tab_elem.set("style:char", tab_stop.char)
            elif tab_stop.type not in (TabStopType.LEFT, TabStopType.CHAR):
                tab_elem.set("style:type", tab_stop.type.value)
            if tab_stop.leader_style != TabStopLeaderStyle.NONE:
                tab_elem.set("style:leader-style", tab_stop.leader_style.value)
            if tab_stop.leader_color is not None:
                tab_elem.set("style:leader-color", tab_stop.leader_color.to_hex())

    return elem


# ---------------------------------------------------------------------------
# Text properties
# ---------------------------------------------------------------------------


def _line_color(color: str | Color) -> str:
    return color.to_hex() if isinstance(color, Color) else color


def _line_width(width: LineWidth | float) -> str:
    return width.value if isinstance(width, LineWidth) else pt(width)


def _set_text_line(elem: Element, kind: str, line: TextLine) -> None:
    """Write ``style:text-<kind>-*`` attributes (kind is underline or overline)."""
    elem.set(f"style:text-{kind}-type", line.type.value)
    elem.set(f"style:text-{kind}-style", line.style.value)
    elem.set(f"style:text-{kind}-width", _line_width(line.width))
    elem.set(f"style:text-{kind}-color", _line_color(line.color))
    elem.set(f"style:text-{kind}-mode", line.mode.value)


def write_text_properties(props: TextProperties, parent: Element) -> Element:
    """Write ``style:text-properties``; only non-default values appear."""
    elem = SubElement(parent, "style:text-properties")

    if props.font_variant != FontVariant.NORMAL:
        elem.set("fo:font-variant", props.font_variant.value)
    if props.text_transformation != TextTransformation.NONE:
        elem.set("fo:text-transform", props.text_transformation.value)
    if props.color is not None:
        elem.set("fo:color", props.color.to_hex())
    if props.font_name is not None:
        elem.set("style:font-name", props.font_name)
    if props.font_size != DEFAULT_FONT_SIZE:
        elem.set("fo:font-size", pt(props.font_size))

    font_style = props.typeface.font_style
    if font_style is not None:
        elem.set("fo:font-style", font_style)
    if props.underline is not None:
        _set_text_line(elem, "underline", props.underline)
    if props.typeface.is_bold:
        elem.set("fo:font-weight", "bold")
    if props.background_color is not None:
        elem.set("fo:background-color", props.background_color.to_hex())
    if props.overline is not None:
        _set_text_line(elem, "overline", props.overline)

    return elem


# ---------------------------------------------------------------------------
# List styles
# ---------------------------------------------------------------------------


def _write_list_style(style: ListStyle, name: str, parent: Element) -> Element:
    elem = SubElement(parent, "text:list-style")
    _set_names(style, name, elem)
    if style.consecutive_numbering:
        elem.set("text:consecutive-numbering", "true")
    for level_style in style.list_level_styles:
        _write_bullet_level(level_style, elem)
    return elem


def _write_bullet_level(level_style: BulletListLevelStyle, parent: Element) -> Element:
    elem = SubElement(parent, "text:list-level-style-bullet")
    elem.set("text:level", str(level_style.level))
    elem.set("text:bullet-char", level_style.bullet_char)
    if level_style.number_prefix is not None:
        elem.set("style:num-prefix", level_style.number_prefix)
    if level_style.number_suffix is not None:
        elem.set("style:num-suffix", level_style.number_suffix)
    if level_style.relative_bullet_size is not None:
        elem.set("text:bullet-relative-size", level_style.relative_bullet_size)

    props = level_style.list_level_properties
    props_elem = SubElement(elem, "style:list-level-properties")
    props_elem.set("text:list-level-position-and-space-mode", props.position_and_space_mode)

    alignment = SubElement(props_elem, "style:list-level-label-alignment")
    alignment.set("text:label-followed-by", props.label_followed_by.value)
    if props.list_tab_stop_position is not None:
        alignment.set("text:list-tab-stop-position", mm(props.list_tab_stop_position))
    if props.text_indent is not None:
        alignment.set("fo:text-indent", mm(props.text_indent))
    if props.margin_left is not None:
        alignment.set("fo:margin-left", mm(props.margin_left))
    return elem
