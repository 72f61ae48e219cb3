# src/html_inspector/modules/validation/spec.py
import re
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .data import (
    ANY_ATTRIBUTE,
    ELEMENT_CATEGORIES,
    ELEMENT_DATA,
    GLOBAL_ATTRIBUTES,
    OBSOLETE_ATTRIBUTES,
    OBSOLETE_ELEMENTS,
    REQUIRED_ATTRIBUTES,
    Matcher,
    split_list,
)


def found_in(needle: str, haystack: Iterable[Matcher]) -> bool:
    """
    Checks whether a name matches any entry of a matcher list.

    Literal strings match by equality, compiled patterns by `search`.
    Entries are evaluated in list order.
    """
    for item in haystack:
        if isinstance(item, str):
            if needle == item:
                return True
        elif item.search(needle):
            return True
    return False


# --- Parsed tables (built once at import) ---

_ALLOWED_ATTRIBUTES: Dict[str, Tuple[str, ...]] = {
    name: tuple(split_list(attributes)) for name, (_, attributes) in ELEMENT_DATA.items()
}

_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    name: tuple(split_list(elements)) for name, elements in ELEMENT_CATEGORIES.items()
}

_OBSOLETE_ATTRIBUTES: Dict[str, Set[str]] = {}
for _attribute, _elements in OBSOLETE_ATTRIBUTES:
    _OBSOLETE_ATTRIBUTES.setdefault(_attribute, set()).update(split_list(_elements))

_REQUIRED_ATTRIBUTES: Dict[str, Tuple[str, ...]] = dict(REQUIRED_ATTRIBUTES)


class ValidationSpec:
    """
    Queryable model of valid HTML elements, attributes and content categories.

    The static tables are shared by every instance. Each instance carries its
    own whitelist, which is consulted before any obsolescence or validity
    check fails, so consumers can allow custom elements and framework
    attributes without touching the tables.

    Attributes:
        attribute_whitelist (List[Matcher]): Attributes that are always accepted.
            Defaults to AngularJS `ng-*` attributes.
        element_whitelist (List[Matcher]): Custom elements that are always accepted.
    """

    def __init__(
            self,
            attribute_whitelist: Optional[List[Matcher]] = None,
            element_whitelist: Optional[List[Matcher]] = None
    ):
        self.attribute_whitelist: List[Matcher] = (
            list(attribute_whitelist) if attribute_whitelist is not None
            else [re.compile(r"ng\-[a-z\-]+")]
        )
        self.element_whitelist: List[Matcher] = list(element_whitelist or [])

    @property
    def elements(self) -> List[str]:
        """Sorted list of every valid HTML element name."""
        return sorted(ELEMENT_DATA)

    # --- Whitelist ---

    def is_whitelisted_element(self, element: str) -> bool:
        return found_in(element, self.element_whitelist)

    def is_whitelisted_attribute(self, attribute: str) -> bool:
        return found_in(attribute, self.attribute_whitelist)

    @staticmethod
    def is_global_attribute(attribute: str) -> bool:
        return found_in(attribute, GLOBAL_ATTRIBUTES)

    # --- Table lookups ---

    @staticmethod
    def allowed_attributes_for_element(element: str) -> List[str]:
        """Returns the element-specific attribute list, or [] for unknown elements."""
        return list(_ALLOWED_ATTRIBUTES.get(element, ()))

    @staticmethod
    def content_model_for_element(element: str) -> str:
        entry = ELEMENT_DATA.get(element)
        return entry[0] if entry else ""

    @staticmethod
    def elements_for_category(category: str) -> List[str]:
        return list(_CATEGORIES.get(category, ()))

    @staticmethod
    def categories_for_element(element: str) -> List[str]:
        return [name for name, members in _CATEGORIES.items() if element in members]

    # --- Element checks ---

    def is_element_valid(self, element: str) -> bool:
        if self.is_whitelisted_element(element):
            return True
        return element in ELEMENT_DATA

    def is_element_obsolete(self, element: str) -> bool:
        if self.is_whitelisted_element(element):
            return False
        return element in OBSOLETE_ELEMENTS

    # --- Attribute checks ---

    def is_attribute_valid_for_element(self, attribute: str, element: str) -> bool:
        """
        Determines whether an attribute may appear on an element.

        Global attributes and whitelisted attributes are valid everywhere.
        Some elements (like <embed>) accept any attribute.

        Args:
            attribute (str): Lower-case attribute name.
            element (str): Lower-case element name.

        Returns:
            bool: True if the attribute is allowed on the element.
        """
        if self.is_global_attribute(attribute) or self.is_whitelisted_attribute(attribute):
            return True
        allowed = _ALLOWED_ATTRIBUTES.get(element, ())
        if ANY_ATTRIBUTE in allowed:
            return True
        return attribute in allowed

    def is_attribute_obsolete_for_element(self, attribute: str, element: str) -> bool:
        # An obsolete attribute can still be whitelisted
        if self.is_whitelisted_attribute(attribute):
            return False
        return element in _OBSOLETE_ATTRIBUTES.get(attribute, ())

    @staticmethod
    def is_attribute_required_for_element(attribute: str, element: str) -> bool:
        return attribute in _REQUIRED_ATTRIBUTES.get(element, ())

    @staticmethod
    def get_required_attributes_for_element(element: str) -> List[str]:
        return list(_REQUIRED_ATTRIBUTES.get(element, ()))
