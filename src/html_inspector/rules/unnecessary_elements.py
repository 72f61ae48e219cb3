# src/html_inspector/rules/unnecessary_elements.py
from ..core.registry import RuleDefinition
from ..dom.document import DocumentNode


def is_unnecessary(node: DocumentNode) -> bool:
    """A <div> or <span> without any attributes adds nothing to the document."""
    is_unsemantic = node.tag_name in ("div", "span")
    return is_unsemantic and not node.attributes


def unnecessary_elements(listener, reporter, config, modules):
    check = config.get("is_unnecessary", is_unnecessary)

    def on_element(node, name):
        if check(node):
            reporter.warn(
                "unnecessary-elements",
                "Do not use <div> or <span> elements without any attributes.",
                node
            )

    listener.on("element", on_element)


DEFINITION = RuleDefinition(
    name="unnecessary-elements",
    fn=unnecessary_elements,
    config={"is_unnecessary": is_unnecessary}
)
