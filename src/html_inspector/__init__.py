"""
html_inspector: a static-analysis engine for rendered HTML.

Rules subscribe to events published while the document tree is walked
(element, id, class, attribute) and report diagnostics.

    from html_inspector import Document, HTMLInspector

    inspector = HTMLInspector.with_defaults()
    inspector.inspect({
        "document": Document.from_html(html),
        "on_complete": lambda errors: print([e.format() for e in errors]),
    })
"""
from typing import List, Optional

from .core.inspector import HTMLInspector, InspectConfig
from .core.registry import ModuleRegistry, RuleDefinition, RuleRegistry
from .core.reporter import Diagnostic
from .dom.document import Document, DocumentNode

__version__ = "0.1.0"


def inspect_html(html: str, use_rules: Optional[List[str]] = None, dom_root: str = "html") -> List[Diagnostic]:
    """Inspects an HTML string with the built-in rules and returns the diagnostics."""
    results: List[Diagnostic] = []
    inspector = HTMLInspector.with_defaults(Document.from_html(html))
    inspector.inspect({"use_rules": use_rules, "dom_root": dom_root, "on_complete": results.extend})
    return results


__all__ = [
    "HTMLInspector",
    "InspectConfig",
    "ModuleRegistry",
    "RuleDefinition",
    "RuleRegistry",
    "Diagnostic",
    "Document",
    "DocumentNode",
    "inspect_html",
]
