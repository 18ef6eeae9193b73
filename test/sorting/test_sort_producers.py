import numpy as np
import pytest

from algostep.sorting import bubble_sort, insertion_sort, merge_sort, selection_sort
from algostep.steps import (
    CompareStep,
    CompleteStep,
    ErrorStep,
    StepType,
    SwapStep,
)
from conftest import collect, replay_snapshots, types_of

SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort]


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize(
    "values",
    [
        [5, 3, 8, 1],
        [1],
        [2, 1],
        [3, 3, 1, 3],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
        [1.5, -2, 0, 7.25],
    ],
)
def test_replayed_snapshots_end_sorted(sort, values):
    steps = collect(sort(values))
    assert replay_snapshots(values, steps) == sorted(values)


@pytest.mark.parametrize("sort", SORTS)
def test_run_ends_with_single_complete(sort):
    steps = collect(sort([4, 2, 3]))
    terminal = [s for s in steps if s.is_terminal]
    assert terminal == [steps[-1]]
    assert isinstance(steps[-1], CompleteStep)
    assert steps[-1].indices == (0, 2)
    assert steps[-1].array == (2, 3, 4)


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("bad", [[], None, "5,3", 42, {"a": 1}])
def test_malformed_input_emits_one_error(sort, bad):
    steps = collect(sort(bad))
    assert len(steps) == 1
    assert isinstance(steps[0], ErrorStep)


@pytest.mark.parametrize("sort", SORTS)
def test_input_is_not_mutated(sort):
    values = [3, 1, 2]
    collect(sort(values))
    assert values == [3, 1, 2]


@pytest.mark.parametrize("sort", SORTS)
def test_accepts_numpy_arrays(sort):
    steps = collect(sort(np.array([3, 1, 2])))
    assert steps[-1].array == (1, 2, 3)


@pytest.mark.parametrize("sort", SORTS)
def test_snapshots_are_complete_arrays(sort):
    values = [6, 2, 9, 1, 5]
    for step in collect(sort(values)):
        if step.snapshot is not None:
            assert len(step.snapshot) == len(values)
            assert sorted(step.snapshot) == sorted(values)


@pytest.mark.parametrize("sort", [selection_sort, insertion_sort, merge_sort])
def test_sorted_positions_never_shrink(sort):
    seen = set()
    for step in collect(sort([7, 3, 5, 1, 9, 2])):
        if step.type is StepType.SORTED:
            before = set(seen)
            seen.update(step.indices)
            assert before <= seen


def test_bubble_sort_scenario():
    steps = collect(bubble_sort([5, 3, 8, 1]))
    swaps = [s for s in steps if isinstance(s, SwapStep)]
    assert swaps[0] == SwapStep(indices=(0, 1), array=(3, 5, 8, 1))
    assert steps[0] == CompareStep(indices=(0, 1))
    assert steps[-1].array == (1, 3, 5, 8)
    assert StepType.SORTED.value not in types_of(steps)


def test_bubble_sort_compares_every_adjacent_pair_per_pass():
    compares = [s for s in collect(bubble_sort([1, 2, 3])) if s.type is StepType.COMPARE]
    assert [c.indices for c in compares] == [(0, 1), (1, 2), (0, 1)]


def test_selection_sort_step_sequence():
    assert types_of(selection_sort([2, 1])) == [
        "sorting",
        "compare",
        "newMin",
        "swap",
        "sorted",
        "sorted",
        "complete",
    ]


def test_selection_sort_marks_every_position_sorted():
    steps = collect(selection_sort([4, 1, 3, 2]))
    sorted_steps = [s.indices for s in steps if s.type is StepType.SORTED]
    assert sorted_steps == [(0,), (1,), (2,), (3,)]


def test_selection_sort_skips_swap_when_minimum_in_place():
    steps = collect(selection_sort([1, 2]))
    assert StepType.SWAP.value not in types_of(steps)


def test_insertion_sort_shifts_then_inserts():
    steps = collect(insertion_sort([3, 1]))
    assert types_of(steps) == [
        "current",
        "compare",
        "shift",
        "insert",
        "sorted",
        "complete",
    ]
    shift = steps[2]
    assert shift.index == 1 and shift.array == (3, 3)
    insert = steps[3]
    assert insert.index == 0 and insert.array == (1, 3)
    assert steps[4].indices == (0, 1)


def test_insertion_sort_compares_before_stopping():
    steps = collect(insertion_sort([1, 2]))
    assert types_of(steps) == ["current", "compare", "insert", "sorted", "complete"]


def test_merge_sort_divides_before_merging():
    steps = collect(merge_sort([4, 3, 2, 1]))
    tags = types_of(steps)
    assert tags[0] == "divide" and steps[0].indices == (0, 3)
    assert steps[1].indices == (0, 1)
    # Both halves merge before the outer merge starts
    merges = [s.indices for s in steps if s.type is StepType.MERGE]
    assert merges == [(0, 0, 1), (2, 2, 3), (0, 1, 3)]


def test_merge_sort_reports_array_positions():
    steps = collect(merge_sort([2, 1, 4, 3]))
    outer = max(i for i, s in enumerate(steps) if s.type is StepType.MERGE)
    compares = [s.indices for s in steps[outer:] if s.type is StepType.COMPARE]
    assert compares[0] == (0, 2)
    for left, right in compares:
        assert 0 <= left <= 1 and 2 <= right <= 3


def test_merge_sort_marks_each_merged_range_sorted():
    steps = collect(merge_sort([3, 1, 2]))
    ranges = [s.indices for s in steps if s.type is StepType.SORTED]
    assert ranges == [(0, 1), (0, 1, 2)]


def test_merge_sort_single_element_has_no_divide():
    assert types_of(merge_sort([7])) == ["complete"]


def test_producer_is_lazy():
    gen = bubble_sort([2, 1])
    assert next(gen) == CompareStep(indices=(0, 1))
    assert next(gen).type is StepType.SWAP
