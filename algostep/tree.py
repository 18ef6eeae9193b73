"""Binary tree built from a level-order array."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """A tree node that remembers the array slot it was built from."""

    value: Any
    index: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, index={self.index})"

    def children(self) -> List[Node]:
        return [child for child in (self.left, self.right) if child is not None]

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def traverse(self) -> List[Node]:
        """All nodes of this subtree in level order."""
        nodes: List[Node] = []
        queue: Deque[Node] = deque([self])
        while queue:
            node = queue.popleft()
            nodes.append(node)
            queue.extend(node.children())
        return nodes


def _is_missing(slot: Any) -> bool:
    return slot is None


def build_binary_tree(values: Optional[Sequence[Any]]) -> Optional[Node]:
    """
    Link a level-order array into a binary tree.

    Nodes are taken from a queue in creation order and each one consumes the
    next two unconsumed slots as its left and right child. A ``None`` slot
    creates no child but is still consumed, so a missing node owns no slots
    and the values after it move up to the next present node. Slots left
    over once the queue runs dry are dropped.

    Args:
        values: Level-order array, possibly containing ``None`` holes.

    Returns:
        The root node, or None for empty input or a missing root.
    """
    if not values or _is_missing(values[0]):
        return None

    root = Node(values[0], 0)
    queue: Deque[Node] = deque([root])
    i = 1

    while queue and i < len(values):
        node = queue.popleft()

        if not _is_missing(values[i]):
            node.left = Node(values[i], i)
            queue.append(node.left)
        i += 1

        if i < len(values) and not _is_missing(values[i]):
            node.right = Node(values[i], i)
            queue.append(node.right)
        i += 1

    dropped = sum(1 for slot in values[i:] if not _is_missing(slot))
    if dropped:
        logger.debug(f"Dropped {dropped} slot(s) left after the last leaf")
    return root


def level_order_indices(root: Optional[Node]) -> List[int]:
    """Array slots of every node reachable from ``root``, in level order."""
    if root is None:
        return []
    return [node.index for node in root.traverse()]
