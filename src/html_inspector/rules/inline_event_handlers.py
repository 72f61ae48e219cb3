# src/html_inspector/rules/inline_event_handlers.py
from ..core.registry import RuleDefinition


def inline_event_handlers(listener, reporter, config, modules):

    def on_attribute(node, name, value):
        if name.startswith("on"):
            reporter.warn(
                "inline-event-handlers",
                f"An '{name}' attribute was found in the HTML. Use external scripts for event binding instead.",
                node
            )

    listener.on("attribute", on_attribute)


DEFINITION = RuleDefinition(name="inline-event-handlers", fn=inline_event_handlers)
