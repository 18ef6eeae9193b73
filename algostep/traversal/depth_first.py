"""Recursive depth-first traversal producer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional

from algostep.exceptions import InvalidTraversalOrderError
from algostep.steps import (
    BacktrackStep,
    FoundStep,
    Number,
    StackStep,
    Step,
    TraversalCompleteStep,
    VisitStep,
)
from algostep.traversal._common import tree_from_input
from algostep.tree import Node


class TraversalOrder(str, Enum):
    PREORDER = "preorder"
    INORDER = "inorder"
    POSTORDER = "postorder"

    @classmethod
    def parse(cls, order: Any) -> "TraversalOrder":
        try:
            return cls(order)
        except ValueError as e:
            choices = ", ".join(o.value for o in cls)
            raise InvalidTraversalOrderError(
                f"Unknown traversal order {order!r}. Expected one of: {choices}"
            ) from e


@dataclass
class _Walk:
    """State shared by every frame of one traversal."""

    order: TraversalOrder
    target: Optional[Number]
    path: List[int] = field(default_factory=list)
    traversal: List[Any] = field(default_factory=list)
    found: bool = False


def depth_first_search(
    values: Any,
    target: Optional[Number] = None,
    order: Any = TraversalOrder.PREORDER,
) -> Iterator[Step]:
    """
    Depth-first traversal of the tree encoded by a level-order array.

    ``order`` selects when a node is visited relative to its children. Before
    descending into a node the root-to-node path is reported as ``stack``;
    once the node's subtree is done it is reported as ``backtrack``. A match
    on ``target`` ends the walk: no further visits and no backtracking steps
    for the matched node or its ancestors.

    Raises:
        InvalidTraversalOrderError: Immediately, for an unknown ``order``.
    """
    walk = _Walk(order=TraversalOrder.parse(order), target=target)
    return _run(values, walk)


def _run(values: Any, walk: _Walk) -> Iterator[Step]:
    root, error = tree_from_input(values)
    if error is not None:
        yield error
        return

    yield from _descend(root, 0, walk)
    yield TraversalCompleteStep(
        traversal=tuple(walk.traversal),
        found=walk.found if walk.target is not None else None,
    )


def _descend(node: Optional[Node], level: int, walk: _Walk) -> Iterator[Step]:
    if node is None or walk.found:
        return

    walk.path.append(node.index)
    yield StackStep(indices=tuple(walk.path))

    if walk.order is TraversalOrder.PREORDER:
        yield from _visit(node, level, walk)
    if not walk.found:
        yield from _descend(node.left, level + 1, walk)
    if not walk.found and walk.order is TraversalOrder.INORDER:
        yield from _visit(node, level, walk)
    if not walk.found:
        yield from _descend(node.right, level + 1, walk)
    if not walk.found and walk.order is TraversalOrder.POSTORDER:
        yield from _visit(node, level, walk)

    if walk.found:
        return
    walk.path.pop()
    yield BacktrackStep(index=node.index)


def _visit(node: Node, level: int, walk: _Walk) -> Iterator[Step]:
    yield VisitStep(index=node.index, value=node.value, level=level)
    walk.traversal.append(node.value)
    if walk.target is not None and node.value == walk.target:
        walk.found = True
        yield FoundStep(index=node.index, value=node.value, target=walk.target)
