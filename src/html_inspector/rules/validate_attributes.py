# src/html_inspector/rules/validate_attributes.py
from ..core.registry import RuleDefinition


def validate_attributes(listener, reporter, config, modules):
    validation = modules["validation"]

    def on_element(node, name):
        for attr in validation.get_required_attributes_for_element(name):
            if not node.has_attribute(attr):
                reporter.warn(
                    "validate-attributes",
                    f"The '{attr}' attribute is required for <{name}> elements.",
                    node
                )

    def on_attribute(node, name, value):
        element = node.tag_name
        # obsolete attributes are reported once, never also as invalid
        if validation.is_attribute_obsolete_for_element(name, element):
            reporter.warn(
                "validate-attributes",
                f"The '{name}' attribute is no longer valid on the <{element}> element and should not be used.",
                node
            )
        elif not validation.is_attribute_valid_for_element(name, element):
            reporter.warn(
                "validate-attributes",
                f"'{name}' is not a valid attribute of the <{element}> element.",
                node
            )

    listener.on("element", on_element)
    listener.on("attribute", on_attribute)


DEFINITION = RuleDefinition(name="validate-attributes", fn=validate_attributes)
