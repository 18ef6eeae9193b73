"""Property-based tests: every search agrees with membership in the input."""

import pytest
from hypothesis import given, settings, strategies as st

from algostep.searching import (
    binary_search,
    exponential_search,
    interpolation_search,
    jump_search,
    linear_search,
)
from algostep.steps import FoundStep, NotFoundStep, StepType

SEARCHES = [
    linear_search,
    binary_search,
    jump_search,
    interpolation_search,
    exponential_search,
]
arrays = st.lists(st.integers(min_value=-30, max_value=30), min_size=1, max_size=15)
targets = st.integers(min_value=-35, max_value=35)


@pytest.mark.parametrize("search", SEARCHES)
@given(values=arrays, target=targets)
@settings(max_examples=80)
def test_found_iff_target_present(search, values, target):
    steps = list(search(values, target))
    found = [s for s in steps if isinstance(s, FoundStep)]
    not_found = [s for s in steps if isinstance(s, NotFoundStep)]

    if target in values:
        assert len(found) == 1 and not not_found
        assert values[found[0].index] == target
    else:
        assert len(not_found) == 1 and not found
    assert steps[-1].is_terminal
    assert sum(1 for s in steps if s.is_terminal) == 1


@pytest.mark.parametrize("search", SEARCHES)
@given(values=arrays, target=targets)
@settings(max_examples=50)
def test_reported_positions_belong_to_input(search, values, target):
    for step in search(values, target):
        if step.type in (StepType.COMPARE, StepType.RANGE, StepType.FOUND):
            assert all(0 <= i < len(values) for i in step.highlighted)
