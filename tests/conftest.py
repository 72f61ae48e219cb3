# tests/conftest.py
from typing import List

import pytest

from html_inspector import Document, HTMLInspector
from html_inspector.core.reporter import Diagnostic


@pytest.fixture
def run_rules():
    """
    Levert een helper die HTML inspecteert met de ingebouwde regels
    en de diagnostics teruggeeft.
    """
    def _run(html: str, rules: List[str] = None, inspector: HTMLInspector = None) -> List[Diagnostic]:
        inspector = inspector or HTMLInspector.with_defaults()
        results: List[Diagnostic] = []
        inspector.inspect({
            "document": Document.from_html(html),
            "use_rules": rules,
            "on_complete": results.extend,
        })
        return results

    return _run
