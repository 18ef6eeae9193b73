import pytest

from algostep.exceptions import InvalidTraversalOrderError
from algostep.steps import (
    BacktrackStep,
    ErrorStep,
    FoundStep,
    QueueStep,
    StackStep,
    StepType,
    TraversalCompleteStep,
    VisitStep,
)
from algostep.traversal import TraversalOrder, breadth_first_search, depth_first_search
from conftest import collect, types_of


def visited_values(steps):
    return [s.value for s in steps if isinstance(s, VisitStep)]


# --- breadth-first ---


def test_bfs_reports_queue_before_each_visit():
    steps = collect(breadth_first_search([1, 2, 3, 4]))
    assert steps[:4] == [
        QueueStep(indices=(0,)),
        VisitStep(index=0, value=1, level=0),
        QueueStep(indices=(1, 2)),
        VisitStep(index=1, value=2, level=1),
    ]
    assert steps[4] == QueueStep(indices=(2, 3))
    assert steps[-2] == VisitStep(index=3, value=4, level=2)
    assert steps[-1] == TraversalCompleteStep(traversal=(1, 2, 3, 4), found=None)


def test_bfs_continues_after_found():
    steps = collect(breadth_first_search([1, 2, 3, 4], target=3))
    tags = types_of(steps)
    assert tags.count("found") == 1
    found_at = tags.index("found")
    assert steps[found_at] == FoundStep(index=2, value=3, target=3)
    assert steps[found_at - 1] == VisitStep(index=2, value=3, level=1)
    assert "visit" in tags[found_at:]
    assert steps[-1] == TraversalCompleteStep(traversal=(1, 2, 3, 4), found=True)


def test_bfs_missing_target_reports_not_found_in_complete():
    steps = collect(breadth_first_search([1, 2, 3], target=9))
    assert steps[-1].found is False
    assert StepType.FOUND.value not in types_of(steps)


def test_bfs_skips_missing_slots():
    steps = collect(breadth_first_search([1, None, 3, 6]))
    assert visited_values(steps) == [1, 3, 6]


def test_bfs_reaches_values_after_missing_slots():
    steps = collect(breadth_first_search([1, None, 2, 3]))
    assert visited_values(steps) == [1, 2, 3]
    assert [s.index for s in steps if s.type is StepType.VISIT] == [0, 2, 3]


@pytest.mark.parametrize("bad", [[], None, "1,2,3", [None, 1]])
def test_bfs_malformed_input(bad):
    steps = collect(breadth_first_search(bad))
    assert len(steps) == 1 and isinstance(steps[0], ErrorStep)


# --- depth-first ---


@pytest.mark.parametrize(
    "order, expected",
    [
        ("preorder", [1, 2, 3]),
        ("inorder", [2, 1, 3]),
        # Each node after both children, left first; see "Postorder" in DESIGN.md
        ("postorder", [2, 3, 1]),
    ],
)
def test_dfs_orders_on_three_node_tree(order, expected):
    steps = collect(depth_first_search([1, 2, 3], order=order))
    assert visited_values(steps) == expected
    assert steps[-1] == TraversalCompleteStep(traversal=tuple(expected), found=None)


def test_dfs_preorder_step_sequence():
    steps = collect(depth_first_search([1, 2, 3]))
    assert steps == [
        StackStep(indices=(0,)),
        VisitStep(index=0, value=1, level=0),
        StackStep(indices=(0, 1)),
        VisitStep(index=1, value=2, level=1),
        BacktrackStep(index=1),
        StackStep(indices=(0, 2)),
        VisitStep(index=2, value=3, level=1),
        BacktrackStep(index=2),
        BacktrackStep(index=0),
        TraversalCompleteStep(traversal=(1, 2, 3), found=None),
    ]


def test_dfs_larger_tree_inorder():
    #        4
    #      2   6
    #     1 3 5 7
    steps = collect(depth_first_search([4, 2, 6, 1, 3, 5, 7], order=TraversalOrder.INORDER))
    assert visited_values(steps) == [1, 2, 3, 4, 5, 6, 7]


def test_dfs_every_node_backtracks_once():
    steps = collect(depth_first_search([4, 2, 6, 1, 3, 5, 7], order="postorder"))
    backtracked = [s.index for s in steps if isinstance(s, BacktrackStep)]
    assert sorted(backtracked) == list(range(7))
    assert backtracked[-1] == 0


def test_dfs_stops_at_target_without_backtracking():
    steps = collect(depth_first_search([1, 2, 3], target=2))
    assert types_of(steps) == ["stack", "visit", "stack", "visit", "found", "complete"]
    assert steps[4] == FoundStep(index=1, value=2, target=2)
    assert steps[-1] == TraversalCompleteStep(traversal=(1, 2), found=True)


def test_dfs_missing_target():
    steps = collect(depth_first_search([1, 2, 3], target=7, order="inorder"))
    assert steps[-1] == TraversalCompleteStep(traversal=(2, 1, 3), found=False)


def test_dfs_stack_is_root_to_node_path():
    steps = collect(depth_first_search([1, 2, 3, 4]))
    stacks = [s.indices for s in steps if isinstance(s, StackStep)]
    assert stacks == [(0,), (0, 1), (0, 1, 3), (0, 2)]


def test_dfs_unknown_order_raises_immediately():
    with pytest.raises(InvalidTraversalOrderError):
        depth_first_search([1, 2, 3], order="levelorder")


def test_dfs_malformed_input():
    steps = collect(depth_first_search([]))
    assert len(steps) == 1 and isinstance(steps[0], ErrorStep)
