"""Tests for TextDocument, the JSON outline builder and the plain text converter."""

from __future__ import annotations

import json
from pathlib import Path
from xml.etree.ElementTree import fromstring

import pytest

from flatodt.config import Settings, get_settings
from flatodt.document import TextDocument
from flatodt.errors import DocumentWriteError, ImageReadError, OutlineError
from flatodt.outline import (
    DocumentOutline,
    FormatOutline,
    ListBlock,
    apply_format,
    build_document,
    load_outline,
)
from flatodt.plaintext import text_to_document
from flatodt.style import (
    AnchorType,
    Color,
    HorizontalAlignment,
    ParagraphStyle,
    Typeface,
)
from flatodt.text import Heading, Hyperlink, Image, List, Paragraph
from flatodt.writer import NAMESPACES


def _write_outline(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "outline.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestTextDocument:
    """Tests for TextDocument."""

    def test_meta_defaults_come_from_settings(self, document: TextDocument) -> None:
        assert document.meta.initial_creator == "Test Author"
        assert document.meta.generator == "flatodt/test"

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FLATODT_INITIAL_CREATOR", "Env Author")
        monkeypatch.setenv("FLATODT_PRETTY_PRINT", "false")
        settings = Settings(_env_file=None)
        assert settings.initial_creator == "Env Author"
        assert settings.pretty_print is False

    def test_log_level_is_normalized(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_default_settings_are_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_save_writes_utf8(self, document: TextDocument, tmp_path: Path) -> None:
        document.meta.title = "Grüße"
        document.body.add_paragraph("naïve café")

        target = document.save(tmp_path / "out.fodt")

        assert target == tmp_path / "out.fodt"
        content = target.read_text(encoding="utf-8")
        assert content.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        root = fromstring(content)
        paragraph = root.find("office:body/office:text/text:p", NAMESPACES)
        assert paragraph is not None
        assert paragraph.text == "naïve café"

    def test_save_accepts_string_path(self, document: TextDocument, tmp_path: Path) -> None:
        target = document.save(str(tmp_path / "out.fodt"))
        assert target.exists()

    def test_save_to_missing_directory_raises(
        self, document: TextDocument, tmp_path: Path
    ) -> None:
        with pytest.raises(DocumentWriteError, match="Cannot write"):
            document.save(tmp_path / "missing" / "out.fodt")

    def test_failed_image_leaves_no_file(self, document: TextDocument, tmp_path: Path) -> None:
        document.body.add_paragraph().add_image(str(tmp_path / "nope.png"))
        target = tmp_path / "out.fodt"

        with pytest.raises(ImageReadError):
            document.save(target)
        assert not target.exists()

    def test_compact_output(self) -> None:
        settings = Settings(_env_file=None, pretty_print=False)
        document = TextDocument(settings)
        document.body.add_paragraph("x")
        xml = document.to_xml_string()
        # declaration line plus the document on a single line
        assert xml.count("\n") == 2


class TestLoadOutline:
    """Tests for load_outline."""

    def test_valid_outline(self, tmp_path: Path) -> None:
        path = _write_outline(
            tmp_path,
            {
                "meta": {"title": "Notes"},
                "body": [
                    {"type": "heading", "text": "Notes"},
                    {"type": "list", "items": ["a", {"type": "list", "items": ["a.1"]}]},
                ],
            },
        )

        outline = load_outline(path)

        assert outline.meta.title == "Notes"
        nested = outline.body[1]
        assert isinstance(nested, ListBlock)
        assert isinstance(nested.items[1], ListBlock)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OutlineError, match="Cannot read"):
            load_outline(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "outline.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(OutlineError, match="not valid JSON"):
            load_outline(path)

    def test_unknown_block_type(self, tmp_path: Path) -> None:
        path = _write_outline(tmp_path, {"body": [{"type": "table"}]})
        with pytest.raises(OutlineError, match="not a valid document outline"):
            load_outline(path)

    def test_unknown_field_is_rejected(self, tmp_path: Path) -> None:
        path = _write_outline(tmp_path, {"body": [{"type": "paragraph", "txt": "typo"}]})
        with pytest.raises(OutlineError):
            load_outline(path)


class TestBuildDocument:
    """Tests for build_document."""

    def test_meta_fonts_and_styles(self, settings: Settings) -> None:
        outline = DocumentOutline.model_validate(
            {
                "meta": {"title": "T", "keywords": ["a", "b", "a"], "language": "de-DE"},
                "fonts": [{"name": "Mono", "family": "DejaVu Sans Mono", "pitch": "fixed"}],
                "styles": [{"name": "Quote", "align": "center", "typeface": "italic"}],
            }
        )

        document = build_document(outline, settings=settings)

        assert document.meta.title == "T"
        assert document.meta.keywords == ["a", "b"]
        assert document.meta.language == "de-DE"
        font = document.font_faces.get("Mono")
        assert font is not None
        assert font.font_family == "DejaVu Sans Mono"
        quote = document.common_styles.get("Quote")
        assert isinstance(quote, ParagraphStyle)
        assert quote.paragraph_properties.horizontal_alignment == HorizontalAlignment.CENTER
        assert quote.text_properties.typeface == Typeface.ITALIC

    def test_body_blocks(self, settings: Settings, tmp_path: Path) -> None:
        outline = DocumentOutline.model_validate(
            {
                "body": [
                    {"type": "heading", "text": "Intro", "level": 2},
                    {
                        "type": "paragraph",
                        "text": "See ",
                        "links": [{"text": "docs", "uri": "https://example.org"}],
                        "format": {"font_size": 14, "color": "#336699"},
                    },
                    {"type": "paragraph", "text": "Quoted", "style": "Quote"},
                    {"type": "image", "path": "logo.png", "width": 40, "anchor": "as-char"},
                ]
            }
        )

        document = build_document(outline, base_dir=tmp_path, settings=settings)
        heading, linked, quoted, holder = document.body.children

        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert isinstance(linked, Paragraph)
        assert [type(c) for c in linked.children][-1] is Hyperlink
        assert linked.style is not None
        assert linked.style.text_properties.font_size == 14
        assert linked.style.text_properties.color == Color(0x33, 0x66, 0x99)
        assert isinstance(quoted, Paragraph)
        assert quoted.style_name == "Quote"
        assert quoted.style is None
        image = holder.children[0]
        assert isinstance(image, Image)
        assert image.path == str(tmp_path / "logo.png")
        assert image.width == 40
        assert image.height is None
        assert image.anchor_type == AnchorType.AS_CHAR

    def test_nested_list_attaches_to_previous_item(self, settings: Settings) -> None:
        outline = DocumentOutline.model_validate(
            {
                "body": [
                    {
                        "type": "list",
                        "items": ["one", "two", {"type": "list", "items": ["two.a"]}],
                    }
                ]
            }
        )

        document = build_document(outline, settings=settings)
        lst = document.body.children[0]

        assert isinstance(lst, List)
        assert lst.size() == 2
        second = lst.get_item(1)
        assert second is not None
        assert [type(c) for c in second.children] == [Paragraph, List]

    def test_invalid_color_raises(self, settings: Settings) -> None:
        outline = DocumentOutline.model_validate(
            {"body": [{"type": "paragraph", "format": {"color": "teal"}}]}
        )
        with pytest.raises(OutlineError, match="teal"):
            build_document(outline, settings=settings)

    def test_apply_format_resets_to_outline_values(self) -> None:
        style = ParagraphStyle()
        style.text_properties.font_name = "Old"
        apply_format(style, FormatOutline(underline=True, margin_left=5))

        assert style.text_properties.font_name is None
        assert style.text_properties.underline is not None
        assert style.paragraph_properties.margin_left == 5

    def test_equal_formats_share_one_automatic_style(self, settings: Settings) -> None:
        fmt = {"align": "right"}
        outline = DocumentOutline.model_validate(
            {
                "body": [
                    {"type": "paragraph", "text": "a", "format": fmt},
                    {"type": "paragraph", "text": "b", "format": fmt},
                ]
            }
        )
        xml = build_document(outline, settings=settings).to_xml_string()
        assert xml.count('style:name="P1"') == 1
        assert xml.count('text:style-name="P1"') == 2
        assert "P2" not in xml


class TestTextToDocument:
    """Tests for text_to_document."""

    def test_blocks(self, settings: Settings) -> None:
        text = "# Title\n\nFirst line\nsecond line\n\n- one\n* two\n\n## Sub\nTail"

        document = text_to_document(text, title="Doc", settings=settings)
        heading, paragraph, lst, sub, tail = document.body.children

        assert document.meta.title == "Doc"
        assert isinstance(heading, Heading)
        assert (heading.text, heading.level) == ("Title", 1)
        assert isinstance(paragraph, Paragraph)
        assert paragraph.text == "First line\nsecond line"
        assert isinstance(lst, List)
        assert lst.size() == 2
        assert isinstance(sub, Heading)
        assert sub.level == 2
        assert isinstance(tail, Paragraph)
        assert tail.text == "Tail"

    def test_text_after_list_ends_the_list(self, settings: Settings) -> None:
        document = text_to_document("- a\nplain\n- b", settings=settings)
        kinds = [type(c) for c in document.body.children]
        assert kinds == [List, Paragraph, List]

    def test_crlf_input(self, settings: Settings) -> None:
        document = text_to_document("a\r\nb\r\n\r\nc", settings=settings)
        texts = [c.text for c in document.body.children if isinstance(c, Paragraph)]
        assert texts == ["a\nb", "c"]

    def test_line_breaks_are_serialized(self, settings: Settings) -> None:
        xml = text_to_document("a\nb", settings=settings).to_xml_string()
        assert "<text:p>a<text:line-break />b</text:p>" in xml

    def test_empty_input(self, settings: Settings) -> None:
        assert text_to_document("", settings=settings).body.children == []
