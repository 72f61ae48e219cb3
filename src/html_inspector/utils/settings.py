# src/html_inspector/utils/settings.py
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..exceptions import SettingsError
from ..modules.validation.data import Matcher

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "settings.json"

# Whitelist entries starting with this prefix are compiled as regular expressions
REGEX_PREFIX = "re:"


def compile_matchers(values: Iterable[str]) -> List[Matcher]:
    """Turns settings strings into whitelist matchers ('re:<pattern>' or a literal name)."""
    matchers: List[Matcher] = []
    for value in values:
        if value.startswith(REGEX_PREFIX):
            matchers.append(re.compile(value[len(REGEX_PREFIX):]))
        else:
            matchers.append(value)
    return matchers


class SettingsManager:
    """
    Loads inspector settings from a JSON file and gives dotted-path access to them.

    Recognized keys:
        inspect.use_rules, inspect.dom_root
        rules.<rule-name>                  (merged into that rule's config)
        validation.element_whitelist, validation.attribute_whitelist
        logging.level, logging.modules, logging.silenced
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self._settings: Dict[str, Any] = settings or {}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'SettingsManager':
        """
        Loads settings from `path`, or from the bundled settings.json.

        A missing or malformed bundled file falls back to empty settings.
        An explicitly requested file must exist and be valid.

        Raises:
            SettingsError: If an explicit `path` cannot be read or parsed.
        """
        explicit = path is not None
        config_path = Path(path) if explicit else DEFAULT_SETTINGS_PATH

        if not config_path.exists():
            if explicit:
                raise SettingsError(f"Settings file not found: {config_path}")
            logger.warning("Settings file '%s' not found. Using empty settings.", config_path)
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            if explicit:
                raise SettingsError(f"Failed to load settings from {config_path}: {e}") from e
            logger.error("Failed to load settings from %s: %s", config_path, e, exc_info=True)
            return cls()

        if not isinstance(data, dict):
            if explicit:
                raise SettingsError(f"Settings file {config_path} must contain a JSON object.")
            logger.error("Settings file %s does not contain a JSON object.", config_path)
            return cls()

        logger.debug("Settings loaded from %s", config_path)
        return cls(data)

    def get_all(self) -> Dict[str, Any]:
        return self._settings

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value, e.g. 'validation.attribute_whitelist'.
        """
        value: Any = self._settings
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def merge(self, other: 'SettingsManager') -> 'SettingsManager':
        """Returns new settings where the sections of `other` override this one's keys."""
        merged = {key: dict(value) if isinstance(value, dict) else value for key, value in self._settings.items()}
        for key, value in other.get_all().items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key].update(value)
            else:
                merged[key] = value
        return SettingsManager(merged)

    def apply(self, inspector) -> None:
        """
        Applies these settings to an inspector: run defaults, rule config
        patches and validation whitelists.
        """
        overrides = {}
        use_rules = self.get_nested("inspect.use_rules")
        if use_rules is not None:
            overrides["use_rules"] = list(use_rules)
        dom_root = self.get_nested("inspect.dom_root")
        if dom_root:
            overrides["dom_root"] = dom_root
        if overrides:
            inspector.config = inspector.process_config(overrides)

        for name, patch in (self.get_nested("rules", {}) or {}).items():
            if name not in inspector.rules:
                logger.warning("Settings refer to unknown rule '%s'; ignored.", name)
                continue
            inspector.rules.extend(name, patch)

        if "validation" in inspector.modules:
            elements = compile_matchers(self.get_nested("validation.element_whitelist", []))
            attributes = compile_matchers(self.get_nested("validation.attribute_whitelist", []))
            if elements or attributes:
                inspector.modules.extend("validation", lambda spec: {
                    "element_whitelist": spec.element_whitelist + elements,
                    "attribute_whitelist": spec.attribute_whitelist + attributes,
                })
