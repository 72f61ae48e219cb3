# src/html_inspector/core/traversal.py
import logging
from typing import Iterable, List, Optional

from ..dom.document import DocumentNode
from .listener import AFTER_INSPECT, ATTRIBUTE, BEFORE_INSPECT, CLASS, ELEMENT, ID, Listener

logger = logging.getLogger(__name__)


def collect_nodes(roots: Iterable[DocumentNode]) -> List[DocumentNode]:
    """
    Returns the roots and all of their descendants in document order.

    Nested or repeated roots are only included once.
    """
    seen = {}
    for root in roots:
        if root.index in seen:
            continue
        seen[root.index] = root
        for node in root.descendants():
            seen.setdefault(node.index, node)
    return [seen[index] for index in sorted(seen)]


def traverse(roots: List[DocumentNode], listener: Listener) -> int:
    """
    Walks the resolved subtree once and publishes the structural events.

    Order: one `before-inspect`, then per node `element`, `id` (if set),
    one `class` per class-list entry and one `attribute` per attribute,
    finally one `after-inspect`. The tree is never modified.

    Args:
        roots (List[DocumentNode]): The resolved root nodes (may be empty).
        listener (Listener): The event bus of the current run.

    Returns:
        int: The number of nodes visited.
    """
    root: Optional[DocumentNode] = roots[0] if roots else None
    nodes = collect_nodes(roots)

    listener.trigger(BEFORE_INSPECT, root)

    for node in nodes:
        listener.trigger(ELEMENT, node, node.tag_name)

        if node.id:
            listener.trigger(ID, node, node.id)

        for name in node.class_names:
            listener.trigger(CLASS, node, name)

        for name, value in node.attributes:
            listener.trigger(ATTRIBUTE, node, name, value)

    listener.trigger(AFTER_INSPECT, root)

    logger.debug("Traversal finished: %d nodes visited", len(nodes))
    return len(nodes)
