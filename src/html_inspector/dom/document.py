# src/html_inspector/dom/document.py
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

import requests
from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from soupsieve import SelectorSyntaxError

from ..exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class DocumentNode:
    """
    Read-only handle to one element of an inspected document.

    Nodes are created once by their Document, so two lookups of the same
    element always return the same object.
    """

    def __init__(self, tag: Tag, parent: Optional['DocumentNode'], document: 'Document', index: int):
        self._tag = tag
        self.document = document
        self.parent = parent
        self.children: List['DocumentNode'] = []
        self.index = index  # position in document order

        self.tag_name: str = tag.name.lower()
        self.attributes: List[Tuple[str, str]] = [
            (name.lower(), value if isinstance(value, str) else " ".join(value))
            for name, value in tag.attrs.items()
        ]

    def __repr__(self) -> str:
        attrs = "".join(f' {name}="{value}"' for name, value in self.attributes)
        return f"<{self.tag_name}{attrs}>"

    @property
    def tag(self) -> Tag:
        """The underlying BeautifulSoup tag."""
        return self._tag

    @property
    def id(self) -> Optional[str]:
        return self.get_attribute("id")

    @property
    def class_names(self) -> List[str]:
        """Class names in source order. Duplicates are kept."""
        value = self.get_attribute("class")
        return value.split() if value else []

    @property
    def text(self) -> str:
        """Raw text content, including the contents of <style> and <script> elements."""
        return "".join(
            str(s) for s in self._tag.descendants
            if isinstance(s, NavigableString) and not isinstance(s, Comment)
        )

    def get_attribute(self, name: str) -> Optional[str]:
        name = name.lower()
        for attr_name, value in self.attributes:
            if attr_name == name:
                return value
        return None

    def has_attribute(self, name: str) -> bool:
        return self.get_attribute(name) is not None

    def has_class(self, name: str) -> bool:
        return name in self.class_names

    def ancestors(self) -> Iterator['DocumentNode']:
        """Yields the parent chain, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def closest(self, tag_name: str) -> Optional['DocumentNode']:
        """Returns this node or the nearest ancestor with the given tag name."""
        if self.tag_name == tag_name:
            return self
        for node in self.ancestors():
            if node.tag_name == tag_name:
                return node
        return None

    def descendants(self) -> Iterator['DocumentNode']:
        """Yields every descendant in document order (depth-first, parent before children)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class Document:
    """
    Parsed HTML document exposing its elements as DocumentNode objects.

    Attribute values are kept as written (no multi-valued attribute
    splitting), attribute names are lower-cased by the parser.
    """

    def __init__(self, soup: BeautifulSoup, url: Optional[str] = None, path: Optional[Path] = None):
        self.soup = soup
        self.url = url
        self.path = path

        self._nodes: Dict[int, DocumentNode] = {}
        self._order: List[DocumentNode] = []
        self._build()

    # --- Construction ---

    @classmethod
    def from_html(cls, html: str, url: Optional[str] = None, path: Optional[Path] = None) -> 'Document':
        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = (html or "").replace('\ufeff', '')
        soup = BeautifulSoup(clean_html, 'html.parser', multi_valued_attributes=None)
        return cls(soup, url=url, path=path)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'Document':
        path = Path(path)
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DocumentLoadError(f"Unable to open location '{path}': {e}") from e
        return cls.from_html(html, url=path.resolve().as_uri(), path=path.resolve())

    @classmethod
    def from_url(cls, url: str, timeout: float = 10.0) -> 'Document':
        try:
            resp = requests.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise DocumentLoadError(f"Unable to open location '{url}': {e}") from e
        return cls.from_html(resp.text, url=resp.url or url)

    @classmethod
    def load(cls, location: str) -> 'Document':
        """Loads a document from an http(s) URL or a local file path."""
        if location.startswith(("http://", "https://")):
            return cls.from_url(location)
        return cls.from_path(location)

    def _build(self) -> None:
        # find_all yields tags in document order, so parents are always seen first
        for tag in self.soup.find_all(True):
            parent = self._nodes.get(id(tag.parent))
            node = DocumentNode(tag, parent, self, len(self._order))
            if parent is not None:
                parent.children.append(node)
            self._nodes[id(tag)] = node
            self._order.append(node)
        logger.debug("Document built with %d elements", len(self._order))

    # --- Queries ---

    @property
    def root(self) -> Optional[DocumentNode]:
        """The <html> element, or the first element when the markup has none."""
        html = self.soup.find('html')
        if html is not None:
            return self.node_for(html)
        return self._order[0] if self._order else None

    def top_level_nodes(self) -> List[DocumentNode]:
        """Elements without a parent element, in document order."""
        return [node for node in self._order if node.parent is None]

    def node_for(self, tag: Tag) -> Optional[DocumentNode]:
        return self._nodes.get(id(tag))

    def all_nodes(self) -> List[DocumentNode]:
        return list(self._order)

    def select(self, selector: str) -> List[DocumentNode]:
        """
        Resolves a CSS selector to nodes in document order.

        An invalid selector resolves to nothing rather than raising.
        """
        try:
            tags = self.soup.select(selector)
        except (SelectorSyntaxError, ValueError) as e:
            logger.warning("Invalid root selector '%s': %s", selector, e)
            return []
        nodes = [self.node_for(tag) for tag in tags]
        return [node for node in nodes if node is not None]
