"""Tests for the automatic, common and font-face registries."""

from __future__ import annotations

import json

import pytest

from flatodt.errors import StyleConflictError, UnknownStyleError
from flatodt.office import AutomaticStyles, CommonStyles, FontFaceDeclarations
from flatodt.style import (
    HorizontalAlignment,
    ListStyle,
    ParagraphStyle,
    TabStop,
    TabStopType,
)
from flatodt.style_hash import canonical_form, style_hash


def _make_paragraph_style(font_size: float = 12, **paragraph: object) -> ParagraphStyle:
    style = ParagraphStyle()
    style.text_properties.font_size = font_size
    for key, value in paragraph.items():
        setattr(style.paragraph_properties, key, value)
    return style


def _make_list_style(bullet: str = "-") -> ListStyle:
    style = ListStyle()
    style.create_bullet_list_level_style(1).bullet_char = bullet
    return style


class TestStyleHash:
    """Tests for style_hash."""

    def test_equal_styles_hash_equal(self) -> None:
        a = _make_paragraph_style(14, margin_left=5)
        b = _make_paragraph_style(14, margin_left=5.0)
        assert style_hash(a) == style_hash(b)

    def test_any_field_changes_hash(self) -> None:
        base = _make_paragraph_style(14)
        other = _make_paragraph_style(14)
        other.paragraph_properties.keep_with_next = True
        assert style_hash(base) != style_hash(other)

    def test_class_changes_hash(self) -> None:
        a = _make_paragraph_style(14)
        b = _make_paragraph_style(14)
        b.class_name = "text"
        assert style_hash(a) != style_hash(b)

    def test_family_is_part_of_canonical_form(self) -> None:
        assert json.loads(canonical_form(ParagraphStyle()))[0] == ["family", "paragraph"]
        assert json.loads(canonical_form(ListStyle()))[0] == ["family", "list"]

    def test_separators_in_values_cannot_forge_another_style(self) -> None:
        a = ParagraphStyle()
        a.text_properties.font_name = "Serif\ntext.font_size=12"
        b = ParagraphStyle()
        b.text_properties.font_name = "Serif"
        b.text_properties.font_size = 12
        assert a != b
        assert style_hash(a) != style_hash(b)

    def test_separators_in_list_affixes_get_distinct_names(self) -> None:
        a = ListStyle()
        a.create_bullet_list_level_style(1).number_prefix = "a;number_suffix=b"
        b = ListStyle()
        level = b.create_bullet_list_level_style(1)
        level.number_prefix = "a"
        level.number_suffix = "b;number_suffix="

        styles = AutomaticStyles()

        assert a != b
        assert style_hash(a) != style_hash(b)
        assert styles.add(a) == "L1"
        assert styles.add(b) == "L2"

    def test_empty_affix_differs_from_unset(self) -> None:
        a = ListStyle()
        a.create_bullet_list_level_style(1).number_suffix = ""
        b = ListStyle()
        b.create_bullet_list_level_style(1)
        assert a != b

    def test_hash_is_hex_md5(self) -> None:
        digest = style_hash(ParagraphStyle())
        assert len(digest) == 32
        int(digest, 16)


class TestAutomaticStyles:
    """Tests for AutomaticStyles."""

    def test_names_are_sequential_per_family(self) -> None:
        styles = AutomaticStyles()
        assert styles.add(_make_paragraph_style(10)) == "P1"
        assert styles.add(_make_list_style("-")) == "L1"
        assert styles.add(_make_paragraph_style(11)) == "P2"
        assert styles.add(_make_list_style("*")) == "L2"

    def test_equal_styles_are_deduplicated(self) -> None:
        styles = AutomaticStyles()
        s1 = _make_paragraph_style(14, horizontal_alignment=HorizontalAlignment.CENTER)
        s2 = _make_paragraph_style(14, horizontal_alignment=HorizontalAlignment.CENTER)
        styles.add(s1)
        styles.add(s2)
        assert len(styles) == 1
        assert styles.get_name(s1) == styles.get_name(s2) == "P1"
        assert len(styles.get_all()) == 1

    def test_readding_keeps_first_name(self) -> None:
        styles = AutomaticStyles()
        a = _make_paragraph_style(10)
        styles.add(a)
        styles.add(_make_paragraph_style(20))
        assert styles.add(a) == "P1"

    def test_get_name_of_unknown_style_raises(self) -> None:
        styles = AutomaticStyles()
        styles.add(_make_paragraph_style(10))
        with pytest.raises(UnknownStyleError, match="add\\(\\) it before get_name"):
            styles.get_name(_make_paragraph_style(99))

    def test_unknown_style_error_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            AutomaticStyles().get_name(ParagraphStyle())

    def test_get_all_is_in_name_order(self) -> None:
        styles = AutomaticStyles()
        created = [_make_paragraph_style(size) for size in range(1, 12)]
        for style in created:
            styles.add(style)
        names = [name for name, _ in styles.items()]
        assert names == [f"P{i}" for i in range(1, 12)]
        assert [s.text_properties.font_size for s in styles.get_all()] == list(range(1, 12))

    def test_list_styles_sort_before_paragraph_styles(self) -> None:
        styles = AutomaticStyles()
        styles.add(_make_paragraph_style(10))
        styles.add(_make_list_style())
        assert [name for name, _ in styles.items()] == ["L1", "P1"]

    def test_registry_stores_a_snapshot(self) -> None:
        styles = AutomaticStyles()
        style = _make_paragraph_style(14)
        styles.add(style)

        style.text_properties.font_size = 30

        assert styles.get_all()[0].text_properties.font_size == 14
        with pytest.raises(UnknownStyleError):
            styles.get_name(style)
        assert styles.add(style) == "P2"

    def test_contains_by_value(self) -> None:
        styles = AutomaticStyles()
        styles.add(_make_paragraph_style(14))
        assert _make_paragraph_style(14) in styles
        assert _make_paragraph_style(15) not in styles
        assert "P1" not in styles

    def test_tab_stops_participate_in_dedup(self) -> None:
        styles = AutomaticStyles()
        a = ParagraphStyle()
        a.paragraph_properties.add_tab_stop(TabStop(20, TabStopType.LEFT))
        b = ParagraphStyle()
        b.paragraph_properties.add_tab_stop(TabStop(20, TabStopType.CENTER))
        assert styles.add(a) != styles.add(b)


class TestCommonStyles:
    """Tests for CommonStyles."""

    def test_create_is_idempotent(self) -> None:
        styles = CommonStyles()
        first = styles.create_paragraph_style("Quote")
        second = styles.create_paragraph_style("Quote")
        assert first is second
        assert len(styles) == 1

    def test_get_returns_none_for_unknown(self) -> None:
        assert CommonStyles().get("Missing") is None

    def test_get_name_is_escaped(self) -> None:
        styles = CommonStyles()
        styles.create_paragraph_style("Text body")
        assert styles.get_name("Text body") == "Text_20_body"
        assert styles.get_name("Unknown") is None

    def test_identical_styles_with_different_names_stay_separate(self) -> None:
        styles = CommonStyles()
        styles.create_paragraph_style("A")
        styles.create_paragraph_style("B")
        assert len(styles.get_all()) == 2

    def test_get_all_keeps_creation_order(self) -> None:
        styles = CommonStyles()
        for name in ("Zeta", "Alpha", "Mid"):
            styles.create_paragraph_style(name)
        assert [s.display_name for s in styles.get_all()] == ["Zeta", "Alpha", "Mid"]

    def test_list_style_creation(self) -> None:
        styles = CommonStyles()
        style = styles.create_list_style("Bullets")
        assert isinstance(style, ListStyle)
        assert styles.create_list_style("Bullets") is style

    def test_name_taken_by_other_kind_raises(self) -> None:
        styles = CommonStyles()
        styles.create_paragraph_style("Contents")
        with pytest.raises(StyleConflictError, match="Contents"):
            styles.create_list_style("Contents")


class TestFontFaceDeclarations:
    """Tests for FontFaceDeclarations."""

    def test_create_returns_existing(self) -> None:
        fonts = FontFaceDeclarations()
        first = fonts.create("Serif", "Liberation Serif")
        second = fonts.create("Serif", "Other")
        assert first is second
        assert second.font_family == "Liberation Serif"

    def test_get_all_in_insertion_order(self) -> None:
        fonts = FontFaceDeclarations()
        fonts.create("B")
        fonts.create("A")
        assert [f.name for f in fonts.get_all()] == ["B", "A"]
        assert fonts.get("A") is not None
        assert fonts.get("C") is None
