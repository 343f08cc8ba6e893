"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from hypothesis import strategies as st

from seqconcat import ViewSettings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached environment settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unchecked():
    """Settings with debug checks disabled (release behavior)."""
    return ViewSettings(debug_checks=False)


@pytest.fixture
def tracing():
    """Settings that log every active-range transition."""
    return ViewSettings(trace_transitions=True)


# Lists of 1-5 int lists, empties included, for property tests
list_of_lists = st.lists(
    st.lists(st.integers(min_value=-100, max_value=100), max_size=5),
    min_size=1,
    max_size=5,
)


class ForwardOnly:
    """Minimal Range: forward traversal over a list, nothing optional."""

    def __init__(self, items: list) -> None:
        self._items = items

    def initial_position(self) -> int:
        return 0

    def terminal_position(self) -> int:
        return len(self._items)

    def equal(self, first: int, second: int) -> bool:
        return first == second

    def step_forward(self, pos: int) -> int:
        return pos + 1

    def read(self, pos: int):
        return self._items[pos]
