# src/html_inspector/rules/duplicate_ids.py
from typing import Dict, List

from ..core.registry import RuleDefinition
from ..dom.document import DocumentNode


def duplicate_ids(listener, reporter, config, modules):
    """
    Rule: an id may only appear once in the document.
    Reported once per id after traversal, with every offending element as context.
    """
    elements: Dict[str, List[DocumentNode]] = {}

    def on_id(node, name):
        elements.setdefault(name, []).append(node)

    def on_after_inspect(root):
        for name, offenders in elements.items():
            if len(offenders) > 1:
                reporter.warn(
                    "duplicate-ids",
                    f"The id '{name}' appears more than once in the document.",
                    offenders
                )

    listener.on("id", on_id)
    listener.on("after-inspect", on_after_inspect)


DEFINITION = RuleDefinition(name="duplicate-ids", fn=duplicate_ids)
