# src/html_inspector/core/inspector.py
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..dom.document import Document, DocumentNode
from .listener import Listener
from .registry import ModuleRegistry, RuleRegistry
from .reporter import Diagnostic, Reporter
from .traversal import traverse

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "html"


def log_diagnostics(errors: List[Diagnostic]) -> None:
    """Default completion callback: logs every diagnostic as a warning."""
    for error in errors:
        logger.warning("%s %s", error.message, error.context)


class InspectConfig(BaseModel):
    """
    Settings of one inspection run.

    Attributes:
        use_rules: Names of the rules to activate. None activates every registered rule.
        dom_root: CSS selector (resolved against `document`) or node to start from.
        document: The document selectors are resolved against.
        on_complete: Receives the final list of diagnostics.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    use_rules: Optional[List[str]] = None
    dom_root: Union[str, DocumentNode] = DEFAULT_ROOT
    document: Optional[Document] = None
    on_complete: Callable[[List[Diagnostic]], Any] = log_diagnostics


ConfigInput = Union[
    None, InspectConfig, Mapping[str, Any], str, DocumentNode, Document, List[str],
    Callable[[List[Diagnostic]], Any]
]


class HTMLInspector:
    """
    Inspection orchestrator.

    Holds the rule and module registries and the default run configuration.
    Every call to `inspect` gets its own Listener and Reporter, so the
    subscriptions of one run never leak into the next.
    """

    def __init__(
            self,
            rules: Optional[RuleRegistry] = None,
            modules: Optional[ModuleRegistry] = None,
            config: ConfigInput = None
    ):
        self.rules = rules if rules is not None else RuleRegistry()
        self.modules = modules if modules is not None else ModuleRegistry()
        self.config = InspectConfig()
        if config is not None:
            self.config = self.process_config(config)

    @classmethod
    def with_defaults(cls, document: Optional[Document] = None) -> 'HTMLInspector':
        """
        Creates an inspector with the built-in modules and rules registered.

        Args:
            document (Optional[Document]): Default document to inspect.
        """
        # Imported here to keep the core free of the built-in modules
        from ..modules.css import CSSModule
        from ..modules.validation import ValidationSpec

        inspector = cls()
        inspector.modules.add("validation", ValidationSpec())
        inspector.modules.add("css", CSSModule())
        inspector.rules.discover()

        if document is not None:
            inspector.config = inspector.process_config(document)

        logger.debug("Inspector ready with rules: %s", ", ".join(inspector.rules.names()))
        return inspector

    # --- Configuration ---

    def process_config(self, config: ConfigInput) -> InspectConfig:
        """
        Normalizes a configuration and merges it with the inspector defaults.

        Shorthand forms are promoted to the full shape: a selector or node
        becomes `dom_root`, a list of names becomes `use_rules`, a callable
        becomes `on_complete` and a Document becomes `document`.

        Raises:
            TypeError: If the configuration has none of the accepted shapes.
        """
        overrides: Dict[str, Any]
        if config is None:
            overrides = {}
        elif isinstance(config, InspectConfig):
            overrides = {name: getattr(config, name) for name in config.model_fields_set}
        elif isinstance(config, (str, DocumentNode)):
            overrides = {"dom_root": config}
        elif isinstance(config, Document):
            overrides = {"document": config}
        elif isinstance(config, Mapping):
            overrides = dict(config)
        elif isinstance(config, (list, tuple)):
            overrides = {"use_rules": list(config)}
        elif callable(config):
            overrides = {"on_complete": config}
        else:
            raise TypeError(f"Unsupported inspection config: {config!r}")

        values = {name: getattr(self.config, name) for name in InspectConfig.model_fields}
        values.update(overrides)
        return InspectConfig(**values)

    def _resolve_root(self, config: InspectConfig) -> List[DocumentNode]:
        if isinstance(config.dom_root, DocumentNode):
            return [config.dom_root]

        if config.document is None:
            logger.warning("No document to resolve '%s' against; nothing will be inspected.", config.dom_root)
            return []

        nodes = config.document.select(config.dom_root)
        if not nodes and config.dom_root == DEFAULT_ROOT:
            # Markup without an <html> tag: the whole document is the root
            nodes = config.document.top_level_nodes()
        if not nodes:
            logger.warning("Root selector '%s' matched no elements; nothing will be inspected.", config.dom_root)
        return nodes

    # --- Inspection ---

    def inspect(self, config: ConfigInput = None) -> None:
        """
        Runs one inspection and hands the diagnostics to `on_complete`.

        Args:
            config: A full configuration or one of its shorthand forms
                (see `process_config`).
        """
        config = self.process_config(config)

        listener = Listener()
        reporter = Reporter()

        activated = self.rules.activate(config.use_rules, listener, reporter, self.modules)
        if not activated:
            logger.warning("No rules selected for this inspection.")

        roots = self._resolve_root(config)
        visited = traverse(roots, listener)
        logger.info("Inspected %d elements with %d rules: %d diagnostics", visited, len(activated), len(reporter))

        config.on_complete(reporter.get_warnings())
