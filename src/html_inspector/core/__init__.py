from .inspector import HTMLInspector, InspectConfig
from .listener import Listener
from .registry import ModuleRegistry, RuleDefinition, RuleRegistry
from .reporter import Diagnostic, Reporter
from .traversal import traverse

__all__ = [
    "HTMLInspector",
    "InspectConfig",
    "Listener",
    "ModuleRegistry",
    "RuleDefinition",
    "RuleRegistry",
    "Diagnostic",
    "Reporter",
    "traverse",
]
