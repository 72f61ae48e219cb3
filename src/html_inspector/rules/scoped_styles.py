# src/html_inspector/rules/scoped_styles.py
from ..core.registry import RuleDefinition


def scoped_styles(listener, reporter, config, modules):

    def on_element(node, name):
        if name != "style":
            return
        is_outside_head = node.closest("head") is None
        if is_outside_head and not node.has_attribute("scoped"):
            reporter.warn(
                "scoped-styles",
                "<style> elements outside of <head> must declare the 'scoped' attribute.",
                node
            )

    listener.on("element", on_element)


DEFINITION = RuleDefinition(name="scoped-styles", fn=scoped_styles)
