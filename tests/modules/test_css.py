# tests/modules/test_css.py
from unittest.mock import MagicMock

import pytest

from html_inspector.dom.document import Document
from html_inspector.modules import css as css_module
from html_inspector.modules.css import CSSModule, get_classes_from_css, get_selectors


def test_get_selectors_skips_declarations_and_descends_into_media():
    css_text = """
        /* .commented { } */
        @import url("other.css");
        @charset "utf-8";
        .foo, .bar > .baz { margin: 0.5em; }
        @media (min-width: 10em) { .wide { display: block } }
        @font-face { font-family: X; src: url(x.woff); }
    """
    assert get_selectors(css_text) == [".foo, .bar > .baz", ".wide"]


def test_get_classes_from_css():
    """Geen valse classes uit decimalen in declaraties."""
    classes = get_classes_from_css(".foo{margin:.5em} a.Bar:hover, .js-hook .x_y{color:red}")
    assert classes == ["foo", "Bar", "js-hook", "x_y"]


def test_inline_styles_are_collected():
    document = Document.from_html(
        "<html><head><style>.b{} .a .b{}</style></head>"
        "<body><style>@media print{.c{}}</style></body></html>"
    )
    assert CSSModule().get_class_selectors(document) == ["a", "b", "c"]


def test_same_origin_linked_and_imported_sheets(tmp_path):
    (tmp_path / "base.css").write_text('@import "extra.css";\n.base{}', encoding="utf-8")
    (tmp_path / "extra.css").write_text(".extra{}", encoding="utf-8")
    page = tmp_path / "page.html"
    page.write_text(
        '<html><head><link rel="stylesheet" href="base.css">'
        '<link rel="icon" href="favicon.css"></head><body></body></html>',
        encoding="utf-8"
    )

    document = Document.from_path(page)
    assert CSSModule().get_class_selectors(document) == ["base", "extra"]


def test_cross_origin_sheets_are_skipped(tmp_path, monkeypatch):
    """Cross-origin stylesheets worden nooit opgehaald."""
    fake_get = MagicMock()
    monkeypatch.setattr(css_module.requests, "get", fake_get)
    page = tmp_path / "page.html"
    page.write_text(
        '<html><head><link rel="stylesheet" href="https://cdn.example.com/x.css">'
        '<style>.local{}</style></head></html>',
        encoding="utf-8"
    )

    assert CSSModule().get_class_selectors(Document.from_path(page)) == ["local"]
    fake_get.assert_not_called()


def test_same_origin_http_sheet(monkeypatch):
    response = MagicMock()
    response.text = ".remote{}"
    fake_get = MagicMock(return_value=response)
    monkeypatch.setattr(css_module.requests, "get", fake_get)

    document = Document.from_html(
        '<html><head><link rel="stylesheet" href="/css/site.css"></head></html>',
        url="https://example.com/page.html"
    )

    assert CSSModule(timeout=3).get_class_selectors(document) == ["remote"]
    fake_get.assert_called_once_with("https://example.com/css/site.css", timeout=3)


def test_missing_sheet_is_skipped(tmp_path):
    page = tmp_path / "page.html"
    page.write_text('<link rel="stylesheet" href="missing.css"><style>.ok{}</style>', encoding="utf-8")
    assert CSSModule().get_class_selectors(Document.from_path(page)) == ["ok"]


def test_get_selectors_ignores_braces_in_strings():
    """Accolades binnen strings openen of sluiten geen blok."""
    css_text = """
        .quote::before { content: "{"; }
        .after { content: '}' }
        a[title="{x}"] .linked { color: red }
        .escaped { content: "\\"{"; }
        .last { }
    """
    assert get_selectors(css_text) == [
        ".quote::before", ".after", 'a[title="{x}"] .linked', ".escaped", ".last"
    ]
