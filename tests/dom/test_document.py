# tests/dom/test_document.py
from unittest.mock import MagicMock

import pytest
import requests

from html_inspector.dom import document as document_module
from html_inspector.dom.document import Document
from html_inspector.exceptions import DocumentLoadError

HTML = """
<html>
  <head><title>Test</title></head>
  <body>
    <div id="main" CLASS="a b a" data-x="1">
      <p>one</p>
      <span><em>two</em></span>
    </div>
    <footer></footer>
  </body>
</html>
"""


@pytest.fixture
def document():
    return Document.from_html(HTML)


def test_root_is_html_element(document):
    """Test of de root het <html> element is."""
    assert document.root.tag_name == "html"
    assert document.root.parent is None


def test_node_identity_is_stable(document):
    """Dezelfde tag moet altijd hetzelfde node-object opleveren."""
    first = document.select("#main")[0]
    second = document.select("div")[0]
    assert first is second


def test_attributes_keep_source_order_and_lowercase_names(document):
    """Attribuutnamen zijn lowercase en staan in bronvolgorde."""
    div = document.select("#main")[0]
    assert div.attributes == [("id", "main"), ("class", "a b a"), ("data-x", "1")]
    assert div.get_attribute("DATA-X") == "1"
    assert div.has_attribute("id")
    assert not div.has_attribute("title")


def test_class_names_keep_duplicates(document):
    """Dubbele classes op één element blijven behouden."""
    div = document.select("#main")[0]
    assert div.class_names == ["a", "b", "a"]
    assert div.has_class("b")
    assert div.id == "main"


def test_descendants_in_document_order(document):
    """Afstammelingen komen in documentvolgorde (ouder voor kinderen)."""
    body = document.select("body")[0]
    assert [node.tag_name for node in body.descendants()] == ["div", "p", "span", "em", "footer"]


def test_ancestors_and_closest(document):
    em = document.select("em")[0]
    assert [node.tag_name for node in em.ancestors()] == ["span", "div", "body", "html"]
    assert em.closest("div").id == "main"
    assert em.closest("em") is em
    assert em.closest("head") is None


def test_all_nodes_matches_indices(document):
    nodes = document.all_nodes()
    assert [node.index for node in nodes] == list(range(len(nodes)))
    assert nodes[0] is document.root


def test_invalid_selector_resolves_to_nothing(document):
    """Een ongeldige selector geeft een lege lijst in plaats van een fout."""
    assert document.select("div[") == []


def test_from_path_missing_file_raises(tmp_path):
    with pytest.raises(DocumentLoadError):
        Document.from_path(tmp_path / "missing.html")


def test_from_path_sets_file_url(tmp_path):
    page = tmp_path / "page.html"
    page.write_text("<html><body></body></html>", encoding="utf-8")
    document = Document.from_path(page)
    assert document.url.startswith("file://")
    assert document.path == page.resolve()


def test_top_level_nodes_without_html_element():
    """Zonder <html> zijn alle elementen op het hoogste niveau roots."""
    document = Document.from_html("<!DOCTYPE html><title>x</title><p><em>a</em></p><img src='a.png'>")
    assert [node.tag_name for node in document.top_level_nodes()] == ["title", "p", "img"]
    assert document.root.tag_name == "title"
    assert document.select("html") == []


def test_top_level_nodes_with_html_element(document):
    assert document.top_level_nodes() == [document.root]


def test_load_routes_http_locations_to_requests(monkeypatch):
    response = MagicMock()
    response.text = "<html><body><p id='x'></p></body></html>"
    response.url = "https://example.com/final.html"
    fake_get = MagicMock(return_value=response)
    monkeypatch.setattr(document_module.requests, "get", fake_get)

    document = Document.load("http://example.com/page.html")

    fake_get.assert_called_once_with("http://example.com/page.html", timeout=10.0)
    response.raise_for_status.assert_called_once_with()
    assert document.url == "https://example.com/final.html"
    assert document.select("#x")[0].tag_name == "p"


def test_load_routes_other_locations_to_files(tmp_path, monkeypatch):
    fake_get = MagicMock()
    monkeypatch.setattr(document_module.requests, "get", fake_get)
    page = tmp_path / "page.html"
    page.write_text("<p></p>", encoding="utf-8")

    assert Document.load(str(page)).path == page.resolve()
    fake_get.assert_not_called()


def test_from_url_request_error_raises_load_error(monkeypatch):
    """Een netwerkfout wordt een DocumentLoadError."""
    fake_get = MagicMock(side_effect=requests.ConnectionError("refused"))
    monkeypatch.setattr(document_module.requests, "get", fake_get)

    with pytest.raises(DocumentLoadError, match="Unable to open location 'http://example.invalid/'"):
        Document.from_url("http://example.invalid/")


def test_from_url_http_error_raises_load_error(monkeypatch):
    response = MagicMock()
    response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
    monkeypatch.setattr(document_module.requests, "get", MagicMock(return_value=response))

    with pytest.raises(DocumentLoadError):
        Document.from_url("https://example.com/missing.html")
