from typing import Any, Optional, Tuple

from algostep.elements import as_value_list
from algostep.exceptions import InvalidInputError
from algostep.steps import ErrorStep
from algostep.tree import Node, build_binary_tree

MISSING_ROOT = "Tree root must not be empty."


def tree_from_input(values: Any) -> Tuple[Optional[Node], Optional[ErrorStep]]:
    """Build the tree for one run, or return the step that ends the run."""
    try:
        copied = as_value_list(values)
    except InvalidInputError as e:
        return None, ErrorStep(message=str(e))

    root = build_binary_tree(copied)
    if root is None:
        return None, ErrorStep(message=MISSING_ROOT)
    return root, None
