# src/html_inspector/rules/unused_classes.py
import logging
import re
from typing import Optional, Set

from ..core.registry import RuleDefinition

logger = logging.getLogger(__name__)


def unused_classes(listener, reporter, config, modules):
    """
    Rule: every class used in the markup should be styled by some stylesheet.
    Classes matching the `whitelist` pattern (JS hooks, feature flags, ...) are ignored.
    """
    css = modules.get("css")
    whitelist = config.get("whitelist")
    if isinstance(whitelist, str):
        whitelist = re.compile(whitelist)

    if css is None:
        logger.warning("The 'css' module is not registered; unused-classes is disabled.")
        return

    # Stylesheets are read once per run, on the first class event
    classes: Optional[Set[str]] = None

    def on_class(node, name):
        nonlocal classes
        if classes is None:
            classes = set(css.get_class_selectors(node.document))
        if whitelist is not None and whitelist.search(name):
            return
        if name not in classes:
            reporter.warn(
                "unused-classes",
                f"The class '{name}' is used in the HTML but not found in any stylesheet.",
                node
            )

    listener.on("class", on_class)


DEFINITION = RuleDefinition(
    name="unused-classes",
    fn=unused_classes,
    config={"whitelist": re.compile(r"^js\-|^supports\-|^language\-|^lang\-")}
)
