# src/html_inspector/rules/bem_conventions.py
import re
from typing import Any, Dict, Optional, Pattern

from ..core.registry import RuleDefinition

# ============================================================
# BEM naming conventions, named after the projects using them.
#
# suit: https://github.com/necolas/suit
#   BlockName, BlockName--modifierName, BlockName-elementName,
#   BlockName-elementName--modifierName
#
# inuit: http://inuitcss.com/
#   block-name, block-name--modifier-name, block-name__element-name,
#   block-name__element-name--modifier-name
#
# yandex: http://bem.info/
#   block-name, block-name__element-name, block-name_modifier_name,
#   block-name__element-name_modifier_name
# ============================================================

METHODOLOGIES: Dict[str, Dict[str, Pattern[str]]] = {
    "suit": {
        "modifier": re.compile(r"^([A-Z][a-zA-Z]*(?:\-[a-zA-Z]+)?)\-\-[a-zA-Z]+$"),
        "element": re.compile(r"^([A-Z][a-zA-Z]*)\-[a-zA-Z]+$"),
    },
    "inuit": {
        "modifier": re.compile(r"^((?:[a-z]+\-)*[a-z]+(?:__(?:[a-z]+\-)*[a-z]+)?)\-\-(?:[a-z]+\-)*[a-z]+$"),
        "element": re.compile(r"^((?:[a-z]+\-)*[a-z]+)__(?:[a-z]+\-)*[a-z]+$"),
    },
    "yandex": {
        "modifier": re.compile(r"^((?:[a-z]+\-)*[a-z]+(?:__(?:[a-z]+\-)*[a-z]+)?)_(?:[a-z]+_)*[a-z]+$"),
        "element": re.compile(r"^((?:[a-z]+\-)*[a-z]+)__(?:[a-z]+\-)*[a-z]+$"),
    },
}


def get_methodology(config: Dict[str, Any]) -> Dict[str, Pattern[str]]:
    """
    Resolves the configured methodology to its `modifier`/`element` patterns.

    `methodology` is either the name of a known methodology or a mapping
    with custom `modifier` and `element` patterns (strings or compiled).
    """
    methodology = config.get("methodology", "suit")
    if isinstance(methodology, str):
        return METHODOLOGIES[methodology]
    return {key: re.compile(methodology[key]) for key in ("modifier", "element")}


def get_block_name(name: str, methodology: Dict[str, Pattern[str]]) -> Optional[str]:
    for kind in ("modifier", "element"):
        match = methodology[kind].match(name)
        if match:
            return match.group(1)
    return None


def is_element(name: str, methodology: Dict[str, Pattern[str]]) -> bool:
    return bool(methodology["element"].match(name))


def is_modifier(name: str, methodology: Dict[str, Pattern[str]]) -> bool:
    return bool(methodology["modifier"].match(name))


def bem_conventions(listener, reporter, config, modules):
    methodology = get_methodology(config)

    def on_class(node, name):
        if is_element(name, methodology):
            block = get_block_name(name, methodology)
            # check the ancestors for the block class
            if not any(ancestor.has_class(block) for ancestor in node.ancestors()):
                reporter.warn(
                    "bem-conventions",
                    f"The BEM element '{name}' must be a descendent of '{block}'.",
                    node
                )
        if is_modifier(name, methodology):
            block = get_block_name(name, methodology)
            if not node.has_class(block):
                reporter.warn(
                    "bem-conventions",
                    f"The BEM modifier class '{name}' was found without the unmodified class '{block}'.",
                    node
                )

    listener.on("class", on_class)


DEFINITION = RuleDefinition(
    name="bem-conventions",
    fn=bem_conventions,
    config={"methodology": "suit"}
)
