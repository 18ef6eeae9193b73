from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from algostep.steps import (
    FoundStep,
    Number,
    QueueStep,
    Step,
    TraversalCompleteStep,
    VisitStep,
)
from algostep.traversal._common import tree_from_input
from algostep.tree import Node


def breadth_first_search(
    values: Any, target: Optional[Number] = None
) -> Iterator[Step]:
    """
    Breadth-first traversal of the tree encoded by a level-order array.

    Each round reports the queue (by array slot) before dequeuing, visits the
    dequeued node and reports ``found`` if it holds the target. The traversal
    keeps going after a match; a Driver stops at the ``found`` step on its
    own. The run ends with ``complete`` carrying the visited values.
    """
    root, error = tree_from_input(values)
    if error is not None:
        yield error
        return

    queue: Deque[Tuple[Node, int]] = deque([(root, 0)])
    traversal: List[Any] = []
    found = False

    while queue:
        yield QueueStep(indices=tuple(node.index for node, _ in queue))

        node, level = queue.popleft()
        yield VisitStep(index=node.index, value=node.value, level=level)
        traversal.append(node.value)

        if target is not None and node.value == target:
            found = True
            yield FoundStep(index=node.index, value=node.value, target=target)

        for child in node.children():
            queue.append((child, level + 1))

    yield TraversalCompleteStep(
        traversal=tuple(traversal), found=found if target is not None else None
    )
