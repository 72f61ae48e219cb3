# src/html_inspector/core/listener.py
import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

# --- Traversal events ---
BEFORE_INSPECT = "before-inspect"
AFTER_INSPECT = "after-inspect"
ELEMENT = "element"
ID = "id"
CLASS = "class"
ATTRIBUTE = "attribute"

EVENTS = (BEFORE_INSPECT, AFTER_INSPECT, ELEMENT, ID, CLASS, ATTRIBUTE)

Handler = Callable[..., Any]


class Listener:
    """
    Named-event publish/subscribe bus scoped to one inspection run.

    Handlers are called synchronously in subscription order with the current
    node as their first argument, followed by the event-specific arguments:

        element:        handler(node, tag_name)
        id:             handler(node, id)
        class:          handler(node, class_name)
        attribute:      handler(node, name, value)
        before-inspect: handler(root)
        after-inspect:  handler(root)

    Exceptions raised by a handler are not caught; they abort the run.
    """

    def __init__(self):
        self._events: Dict[str, List[Handler]] = {}

    def on(self, event: str, handler: Handler) -> None:
        if event not in EVENTS:
            logger.debug("Subscribing to unknown event '%s'", event)
        self._events.setdefault(event, []).append(handler)

    def off(self, event: str, handler: Handler) -> None:
        handlers = self._events.get(event)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def trigger(self, event: str, node: Any, *args: Any) -> None:
        # Copy so handlers may unsubscribe while the event is being dispatched
        for handler in list(self._events.get(event, ())):
            handler(node, *args)

    def handlers(self, event: str) -> List[Handler]:
        return list(self._events.get(event, ()))
