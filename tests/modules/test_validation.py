# tests/modules/test_validation.py
import re

import pytest

from html_inspector.modules.validation import ValidationSpec, found_in


@pytest.fixture
def spec():
    return ValidationSpec()


# --- Elements ---

def test_element_validity(spec):
    assert spec.is_element_valid("div")
    assert spec.is_element_valid("embed")
    assert not spec.is_element_valid("marquee")
    assert not spec.is_element_valid("my-widget")


def test_element_obsolescence(spec):
    assert spec.is_element_obsolete("marquee")
    assert spec.is_element_obsolete("center")
    assert not spec.is_element_obsolete("div")
    assert not spec.is_element_obsolete("unknown")


def test_element_whitelist_wins(spec):
    """Gewhiteliste elementen zijn geldig en nooit verouderd."""
    spec.element_whitelist.append(re.compile(r"^my-"))
    spec.element_whitelist.append("marquee")
    assert spec.is_element_valid("my-widget")
    assert spec.is_element_valid("marquee")
    assert not spec.is_element_obsolete("marquee")


def test_elements_are_sorted(spec):
    assert spec.elements == sorted(spec.elements)
    assert "a" in spec.elements


# --- Attributes ---

@pytest.mark.parametrize("attribute", ["class", "id", "role", "aria-label", "data-user-id", "onclick"])
def test_global_attributes_are_valid_everywhere(spec, attribute):
    assert spec.is_attribute_valid_for_element(attribute, "div")
    assert spec.is_attribute_valid_for_element(attribute, "not-an-element")


def test_element_specific_attributes(spec):
    assert spec.is_attribute_valid_for_element("href", "a")
    assert not spec.is_attribute_valid_for_element("href", "div")
    assert spec.is_attribute_valid_for_element("start", "ol")
    assert spec.is_attribute_valid_for_element("type", "ol")


def test_wildcard_element_accepts_any_attribute(spec):
    """<embed> accepteert elk attribuut."""
    assert spec.is_attribute_valid_for_element("whatever", "embed")


def test_default_whitelist_allows_angular_attributes(spec):
    assert spec.is_attribute_valid_for_element("ng-click", "div")


def test_obsolete_attributes(spec):
    assert spec.is_attribute_obsolete_for_element("align", "div")
    assert spec.is_attribute_obsolete_for_element("axis", "th")
    assert spec.is_attribute_obsolete_for_element("background", "tbody")
    assert not spec.is_attribute_obsolete_for_element("align", "span")
    assert not spec.is_attribute_obsolete_for_element("href", "a")


def test_whitelist_overrides_obsolescence():
    """Een attribuut op de whitelist is nooit verouderd, ook al bestaat er een regel voor."""
    spec = ValidationSpec(attribute_whitelist=["align"])
    assert ValidationSpec().is_attribute_obsolete_for_element("align", "div")
    assert not spec.is_attribute_obsolete_for_element("align", "div")


def test_required_attributes(spec):
    assert sorted(spec.get_required_attributes_for_element("img")) == ["alt", "src"]
    assert spec.get_required_attributes_for_element("textarea") == ["cols", "rows"]
    assert spec.is_attribute_required_for_element("alt", "img")
    assert not spec.is_attribute_required_for_element("title", "img")


def test_unknown_names_return_empty_results(spec):
    """Onbekende elementen of attributen leveren False of een lege lijst op."""
    assert spec.get_required_attributes_for_element("unknown") == []
    assert spec.allowed_attributes_for_element("unknown") == []
    assert spec.elements_for_category("unknown") == []
    assert spec.content_model_for_element("unknown") == ""
    assert not spec.is_attribute_required_for_element("x", "unknown")
    assert not spec.is_attribute_obsolete_for_element("x", "unknown")


# --- Categories ---

def test_categories(spec):
    assert spec.elements_for_category("heading") == ["h1", "h2", "h3", "h4", "h5", "h6"]
    assert "img" in spec.elements_for_category("embedded")
    assert "sectioning" in spec.categories_for_element("nav")
    assert "flow" in spec.categories_for_element("nav")


def test_allowed_attributes_and_content_model(spec):
    assert spec.allowed_attributes_for_element("base") == ["globals", "href", "target"]
    assert spec.content_model_for_element("audio") == "source*; transparent*"


def test_found_in_mixes_literals_and_patterns():
    haystack = ["title", re.compile(r"^data-")]
    assert found_in("title", haystack)
    assert found_in("data-x", haystack)
    assert not found_in("subtitle", haystack)
