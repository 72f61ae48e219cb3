# src/html_inspector/rules/validate_elements.py
from ..core.registry import RuleDefinition


def validate_elements(listener, reporter, config, modules):
    validation = modules["validation"]

    def on_element(node, name):
        if validation.is_element_obsolete(name):
            reporter.warn(
                "validate-elements",
                f"The <{name}> element is obsolete and should not be used.",
                node
            )
        elif not validation.is_element_valid(name):
            reporter.warn(
                "validate-elements",
                f"The <{name}> element is not a valid HTML element.",
                node
            )

    listener.on("element", on_element)


DEFINITION = RuleDefinition(name="validate-elements", fn=validate_elements)
