# src/html_inspector/core/registry.py
import copy
import importlib
import logging
import pkgutil
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .listener import Listener
from .reporter import Reporter

logger = logging.getLogger(__name__)

# A patch is either a literal partial config or a function of the current config.
ConfigPatch = Union[Mapping[str, Any], Callable[[Any], Optional[Mapping[str, Any]]]]

# fn(listener, reporter, config, modules)
RuleFunction = Callable[[Listener, Reporter, Dict[str, Any], 'ModuleRegistry'], None]


def apply_patch(target: Any, patch: ConfigPatch) -> None:
    """
    Shallow-merges a patch into a config dict or module object.

    Callable patches receive the current value and return the mapping to
    merge (returning None merges nothing). Dicts are updated key by key,
    any other object gets its attributes set.
    """
    if callable(patch):
        patch = patch(target)
    if not patch:
        return

    if isinstance(target, dict):
        target.update(patch)
    else:
        for key, value in patch.items():
            setattr(target, key, value)


class RuleDefinition:
    """
    Declaration of a built-in rule, exposed as `DEFINITION` by each module
    in the `html_inspector.rules` package.
    """

    def __init__(self, name: str, fn: RuleFunction, config: Optional[Dict[str, Any]] = None):
        self.name = name
        self.fn = fn
        self.config = config or {}


class Rule:
    """A registered rule: its name, its (mutable) configuration and its activation function."""

    def __init__(self, name: str, fn: RuleFunction, config: Dict[str, Any]):
        self.name = name
        self.fn = fn
        self.config = config

    def __repr__(self) -> str:
        return f"Rule(name={self.name!r})"


class ModuleRegistry:
    """Named shared services (e.g. the validation knowledge base) available to rules."""

    def __init__(self):
        self._modules: Dict[str, Any] = {}

    def add(self, name: str, module: Any) -> None:
        self._modules[name] = module

    def extend(self, name: str, patch: ConfigPatch) -> None:
        apply_patch(self._modules[name], patch)

    def get(self, name: str, default: Any = None) -> Any:
        return self._modules.get(name, default)

    def names(self) -> List[str]:
        return list(self._modules)

    def __getitem__(self, name: str) -> Any:
        return self._modules[name]

    def __contains__(self, name: object) -> bool:
        return name in self._modules


class RuleRegistry:
    """
    Registry of named, configurable inspection rules.

    Rules are kept in registration order. Registering a name that already
    exists replaces the previous rule.
    """

    def __init__(self):
        self._rules: Dict[str, Rule] = {}

    def add(self, name: str, fn: RuleFunction, config: Optional[Dict[str, Any]] = None) -> None:
        if name in self._rules:
            logger.debug("Rule '%s' is already registered and will be replaced.", name)
        self._rules[name] = Rule(name, fn, config if config is not None else {})

    def add_definition(self, definition: RuleDefinition) -> None:
        # Each registry gets its own copy so extending one never leaks into another
        self.add(definition.name, definition.fn, copy.deepcopy(definition.config))

    def extend(self, name: str, patch: ConfigPatch) -> None:
        """
        Merges a patch into the configuration of a registered rule.

        Args:
            name (str): The rule name.
            patch (ConfigPatch): A mapping to shallow-merge, or a function
                receiving the current config and returning the mapping to merge.

        Raises:
            KeyError: If no rule with that name is registered.
        """
        apply_patch(self._rules[name].config, patch)

    def get(self, name: str) -> Optional[Rule]:
        return self._rules.get(name)

    def names(self) -> List[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def activate(
            self,
            use_rules: Optional[Iterable[str]],
            listener: Listener,
            reporter: Reporter,
            modules: ModuleRegistry
    ) -> List[str]:
        """
        Lets the selected rules subscribe their handlers to the listener.

        Args:
            use_rules: Rule names to activate, or None for every registered rule.
            listener: The event bus of the current run.
            reporter: The reporter of the current run.
            modules: Shared services the rules may query.

        Returns:
            List[str]: The names of the rules that were actually activated.
        """
        names = self.names() if use_rules is None else list(use_rules)
        activated = []
        for name in names:
            rule = self._rules.get(name)
            if rule is None:
                logger.debug("Skipping unknown rule '%s'", name)
                continue
            rule.fn(listener, reporter, rule.config, modules)
            activated.append(name)
        return activated

    def discover(self, package: str = "html_inspector.rules") -> None:
        """
        Registers every built-in rule found in the given package.

        Each module of the package is expected to expose a `DEFINITION`
        attribute (instance of `RuleDefinition`). Modules that fail to load
        are logged and skipped.
        """
        try:
            rules_pkg = importlib.import_module(package)
        except ImportError as e:
            logger.error(f"Could not find rules package: {e}")
            return

        for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
            full_name = f"{package}.{name}"
            try:
                module = importlib.import_module(full_name)
            except Exception as e:
                logger.error(f"Error loading rule module {name}: {e}")
                continue

            definition = getattr(module, "DEFINITION", None)
            if isinstance(definition, RuleDefinition):
                self.add_definition(definition)
                logger.debug(f"Rule loaded: {definition.name}")
