# src/html_inspector/modules/css.py
import logging
import re
from pathlib import Path
from typing import List, Optional, Set
from urllib.parse import unquote, urljoin, urlparse

import requests

from ..dom.document import Document

logger = logging.getLogger(__name__)

RE_CLASS_SELECTOR = re.compile(r"\.[a-z0-9_\-]+", re.IGNORECASE)
RE_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
RE_IMPORT = re.compile(r"""@import\s+(?:url\(\s*)?["']?([^"')\s;]+)["']?\s*\)?[^;]*;""", re.IGNORECASE)

# At-rules whose block contains further rules rather than declarations
GROUPING_AT_RULES = ("@media", "@supports", "@document", "@-moz-document", "@layer", "@container")


def _same_origin(url: str, base_url: Optional[str]) -> bool:
    if not base_url:
        return False
    target, base = urlparse(url), urlparse(base_url)
    if target.scheme == "file" and base.scheme == "file":
        return True
    return (target.scheme, target.netloc) == (base.scheme, base.netloc)


def _string_end(text: str, start: int) -> int:
    """Index just past the quoted string opening at `start` (escapes honoured)."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return i


def get_selectors(css_text: str) -> List[str]:
    """
    Returns the selector text of every style rule in a stylesheet.

    Declaration blocks are skipped; grouping at-rules such as @media are
    descended into, other at-rules (@font-face, @keyframes, ...) are ignored.
    Braces inside quoted strings do not open or close blocks.
    """
    text = RE_COMMENT.sub("", css_text)
    selectors: List[str] = []
    prelude = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "{":
            head = "".join(prelude).strip()
            prelude = []
            if head.lower().startswith(GROUPING_AT_RULES):
                i += 1
                continue
            if head and not head.startswith("@"):
                selectors.append(head)
            # Skip the whole block, nested braces included
            depth = 1
            i += 1
            while i < len(text) and depth:
                if text[i] in "\"'":
                    i = _string_end(text, i)
                    continue
                if text[i] == "{":
                    depth += 1
                elif text[i] == "}":
                    depth -= 1
                i += 1
            continue
        if char in "\"'":
            end = _string_end(text, i)
            prelude.append(text[i:end])
            i = end
            continue
        if char == "}":
            # End of a grouping at-rule
            prelude = []
        elif char == ";":
            # Statement at-rules (@import, @charset) end here
            prelude = []
        else:
            prelude.append(char)
        i += 1
    return selectors


def get_classes_from_css(css_text: str) -> List[str]:
    """Extracts class names (without the dot) from every selector of a stylesheet."""
    classes = []
    for selector in get_selectors(css_text):
        classes.extend(match[1:] for match in RE_CLASS_SELECTOR.findall(selector))
    return classes


class CSSModule:
    """
    Stylesheet class extractor.

    Collects every class selector referenced by the document's same-origin
    stylesheets: inline <style> elements and <link rel="stylesheet"> files,
    following @import rules. Cross-origin sheets are skipped because their
    rules are not available to the page either.
    """

    style_sheets = 'link[rel="stylesheet"], style'

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def get_class_selectors(self, document: Document) -> List[str]:
        """
        Returns the sorted, unique class names used in the document's stylesheets.

        Args:
            document (Document): The inspected document.
        """
        classes: List[str] = []
        seen: Set[str] = set()

        for node in document.select(self.style_sheets):
            if node.tag_name == "style":
                classes.extend(self._classes_from_text(node.text, document.url, seen))
                continue

            href = node.get_attribute("href")
            if not href:
                continue
            url = urljoin(document.url or "", href)
            classes.extend(self._classes_from_url(url, document.url, seen))

        return sorted(set(classes))

    def _classes_from_text(self, css_text: str, base_url: Optional[str], seen: Set[str]) -> List[str]:
        classes = get_classes_from_css(css_text)
        for href in RE_IMPORT.findall(RE_COMMENT.sub("", css_text)):
            url = urljoin(base_url or "", href)
            classes.extend(self._classes_from_url(url, base_url, seen))
        return classes

    def _classes_from_url(self, url: str, origin: Optional[str], seen: Set[str]) -> List[str]:
        if url in seen:
            return []
        seen.add(url)

        if not _same_origin(url, origin):
            logger.debug("Skipping cross-origin stylesheet %s", url)
            return []

        css_text = self._fetch(url)
        if css_text is None:
            return []
        return self._classes_from_text(css_text, url, seen)

    def _fetch(self, url: str) -> Optional[str]:
        parsed = urlparse(url)
        try:
            if parsed.scheme == "file":
                return Path(unquote(parsed.path)).read_text(encoding="utf-8", errors="replace")
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.text
        except (OSError, requests.RequestException) as e:
            logger.warning("Could not load stylesheet %s: %s", url, e)
            return None
