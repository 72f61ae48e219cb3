# src/html_inspector/core/reporter.py
from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict

from ..dom.document import DocumentNode


class Diagnostic(BaseModel):
    """
    A single finding reported by a rule.

    `context` is the offending node, or every offending node for findings
    that aggregate over the whole document (e.g. duplicate ids).
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    rule: str
    message: str
    context: Union[DocumentNode, List[DocumentNode], None] = None

    @property
    def nodes(self) -> List[DocumentNode]:
        """The context as a list, regardless of how it was reported."""
        if self.context is None:
            return []
        if isinstance(self.context, list):
            return list(self.context)
        return [self.context]

    def format(self) -> str:
        return f"[{self.rule}] {self.message}"


class Reporter:
    """
    Append-only collector of diagnostics for one inspection run.

    Diagnostics keep the order in which rules reported them. That order
    follows traversal for per-node findings and rule activation for
    document-wide findings; callers should not rely on it beyond that.
    """

    def __init__(self):
        self._errors: List[Diagnostic] = []

    def warn(self, rule: str, message: str, context: Any = None) -> None:
        self._errors.append(Diagnostic(rule=rule, message=message, context=context))

    def get_warnings(self) -> List[Diagnostic]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)
