# src/html_inspector/rules/unique_elements.py
from typing import Dict, List

from ..core.registry import RuleDefinition
from ..dom.document import DocumentNode


def unique_elements(listener, reporter, config, modules):
    elements = list(config.get("elements", []))

    # keys are the elements that must be unique
    found: Dict[str, List[DocumentNode]] = {name: [] for name in elements}

    def on_element(node, name):
        if name in found:
            found[name].append(node)

    def on_after_inspect(root):
        for name in elements:
            if len(found[name]) > 1:
                reporter.warn(
                    "unique-elements",
                    f"The <{name}> element may only appear once in the document.",
                    found[name]
                )

    listener.on("element", on_element)
    listener.on("after-inspect", on_after_inspect)


DEFINITION = RuleDefinition(
    name="unique-elements",
    fn=unique_elements,
    config={"elements": ["title", "main"]}
)
