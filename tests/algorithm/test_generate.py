"""Tests for generate and generate_range."""

from itertools import count

import pytest
from conftest import list_of_lists
from hypothesis import given

from seqconcat import concat, generate, generate_range


def test_generate_fills_across_ranges():
    a, b = [0, 0], [0]
    view = concat(a, [], b)
    fn = count(10).__next__

    end, returned = generate(view.begin(), view.end(), fn)

    assert a == [10, 11]
    assert b == [12]
    assert end == view.end()
    assert returned is fn
    assert fn() == 13


def test_generate_partial_range():
    items = [0, 0, 0, 0]
    view = concat(items)
    generate(view.begin() + 1, view.begin() + 3, lambda: 7)
    assert items == [0, 7, 7, 0]


def test_generate_requires_writable_positions():
    view = concat((1, 2))
    with pytest.raises(TypeError, match="writable"):
        generate(view.begin(), view.end(), lambda: 0)


def test_generate_range_on_view():
    a, b = [0], [0, 0]
    view = concat(a, b)
    end, _ = generate_range(view, count().__next__)
    assert a + b == [0, 1, 2]
    assert end == view.end()


def test_generate_range_on_plain_list():
    """A temporary view is built and no position is returned."""
    items = [0, 0, 0]
    fn = count(1).__next__
    end, returned = generate_range(items, fn)
    assert items == [1, 2, 3]
    assert end is None
    assert returned is fn


def test_generate_range_on_empty_view_never_calls_fn():
    def fail():
        raise AssertionError("fn must not be called")

    view = concat([], [])
    end, _ = generate_range(view, fail)
    assert end == view.begin()


@given(list_of_lists)
def test_generate_visits_every_element_once(lists):
    """PROPERTY: fn is called exactly once per element, in traversal order."""
    view = concat(*lists)
    total = sum(len(items) for items in lists)
    generate_range(view, count().__next__)
    assert list(view) == list(range(total))
