"""
Property-based tests for the sort producers.

Replaying every snapshot onto a reference array must reproduce an ascending
sort, and positions reported as sorted are never withdrawn.
"""

import pytest
from hypothesis import given, settings, strategies as st

from algostep.sorting import bubble_sort, insertion_sort, merge_sort, selection_sort
from algostep.steps import StepType
from conftest import replay_snapshots

arrays = st.lists(st.integers(min_value=-50, max_value=50), min_size=1, max_size=12)
SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort]


@pytest.mark.parametrize("sort", SORTS)
@given(values=arrays)
@settings(max_examples=60)
def test_replay_matches_reference_sort(sort, values):
    steps = list(sort(values))
    assert replay_snapshots(values, steps) == sorted(values)
    assert steps[-1].type is StepType.COMPLETE
    assert sum(1 for s in steps if s.is_terminal) == 1


@pytest.mark.parametrize("sort", SORTS)
@given(values=arrays)
@settings(max_examples=60)
def test_compare_indices_stay_in_bounds(sort, values):
    for step in sort(values):
        if step.type is StepType.COMPARE:
            assert all(0 <= i < len(values) for i in step.indices)


@given(values=arrays)
@settings(max_examples=60)
def test_selection_sorted_positions_hold_final_values(values):
    expected = sorted(values)
    array = list(values)
    for step in selection_sort(values):
        if step.snapshot is not None:
            array = list(step.snapshot)
        if step.type is StepType.SORTED:
            for i in step.indices:
                assert array[i] == expected[i]
