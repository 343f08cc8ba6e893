"""Tests for ConcatenatedView construction, iteration and the Python surface.

Critical Invariants:
- Iterating the view yields the inputs' elements, in order, flattened
- Empty inputs are invisible
- size() is the sum of the input sizes
- A view over one range behaves like that range
"""

from itertools import islice

import pytest
from conftest import ForwardOnly, list_of_lists
from hypothesis import given
from hypothesis import strategies as st

from seqconcat import (
    Capability,
    ConcatenatedView,
    CountingRange,
    IterableRange,
    Position,
    RepeatRange,
    SequenceRange,
    SizedConcatenatedView,
    TerminalMarker,
    concat,
)


def flatten(lists):
    return [x for items in lists for x in items]


# Construction


def test_concat_requires_at_least_one_range():
    with pytest.raises(ValueError, match="at least one range"):
        concat()


def test_view_requires_at_least_one_range():
    with pytest.raises(ValueError, match="at least one range"):
        ConcatenatedView()


def test_concat_rejects_non_iterables():
    with pytest.raises(TypeError, match="Expecting input ranges"):
        concat([1], 42)


def test_view_rejects_unadapted_objects():
    """ConcatenatedView stores ranges verbatim; plain lists must go through concat()."""
    with pytest.raises(TypeError, match="Range protocol"):
        ConcatenatedView([1, 2])


def test_concat_picks_sized_view_when_all_inputs_sized():
    assert isinstance(concat([1], (2,), range(3)), SizedConcatenatedView)
    assert not isinstance(concat([1], iter([2])), SizedConcatenatedView)


def test_sized_view_rejects_unsized_input():
    """Size is gated when the view is built, not when size() is called."""
    with pytest.raises(TypeError, match="SIZED"):
        SizedConcatenatedView(SequenceRange([1]), CountingRange())


def test_ranges_are_stored_in_order():
    a, b = SequenceRange([1]), SequenceRange([2])
    view = ConcatenatedView(a, b)
    assert view.ranges == (a, b)


def test_sequences_are_referenced_not_copied():
    items = [1, 2]
    view = concat(items, [3])
    items.append(99)
    assert list(view) == [1, 2, 99, 3]


def test_repr():
    assert repr(concat([1], [2])) == "SizedConcatenatedView(SequenceRange([1]), SequenceRange([2]))"


# Flattening


def test_flattening_example():
    assert list(concat([1, 2], [], [3])) == [1, 2, 3]


@given(list_of_lists)
def test_flattening(lists):
    """PROPERTY: Iteration yields every input's elements in order, concatenated."""
    assert list(concat(*lists)) == flatten(lists)


@given(list_of_lists)
def test_empty_range_transparency(lists):
    """PROPERTY: Dropping empty inputs does not change the traversal."""
    non_empty = [items for items in lists if items] or [[]]
    assert list(concat(*lists)) == list(concat(*non_empty))


def test_all_empty_view():
    view = concat([], [], [])
    assert list(view) == []
    assert len(view) == 0
    assert view.begin() == view.end()


def test_heterogeneous_inputs():
    view = concat("ab", (1, 2), range(3, 5), iter([None]))
    assert list(view) == ["a", "b", 1, 2, 3, 4, None]


def test_single_pass_inputs_are_consumed_lazily():
    pulled = []

    def source():
        for i in range(3):
            pulled.append(i)
            yield i

    view = concat([9], source())
    pos = view.begin()
    assert pos.current() == 9
    assert pulled == []
    pos.next()
    assert pos.current() == 0
    assert pulled == [0]


def test_infinite_view_iterates_lazily():
    view = concat([1, 2], CountingRange(10))
    assert list(islice(view, 5)) == [1, 2, 10, 11, 12]
    assert Capability.INFINITE in view.capabilities


# Size


def test_size_example():
    view = concat([1, 2], [], [3])
    assert view.size() == 3
    assert len(view) == 3


@given(list_of_lists)
def test_size_additivity(lists):
    """PROPERTY: View size equals the sum of input sizes."""
    assert concat(*lists).size() == sum(len(items) for items in lists)


def test_unsized_view_has_no_size():
    view = concat([1], iter([2]))
    assert not hasattr(view, "size")
    with pytest.raises(TypeError):
        len(view)


def test_size_with_repeat_range():
    assert concat(RepeatRange("x", 4), [1]).size() == 5


# End representation


def test_bounded_view_end_is_full_position():
    view = concat([1], [2])
    end = view.end()
    assert isinstance(end, Position)
    assert end.index == 1
    assert end.inner == 1


def test_unbounded_view_end_is_terminal_marker():
    view = concat([1], iter([2]))
    assert isinstance(view.end(), TerminalMarker)


def test_minimal_ranges_are_bounded():
    view = ConcatenatedView(ForwardOnly([1]), ForwardOnly([]), ForwardOnly([2]))
    assert isinstance(view.end(), Position)
    assert list(view) == [1, 2]


# Reverse iteration and indexing


@given(list_of_lists)
def test_reversed(lists):
    assert list(reversed(concat(*lists))) == flatten(lists)[::-1]


def test_reversed_requires_bidirectional_bounded_view():
    with pytest.raises(TypeError, match="reversed"):
        reversed(concat([1], iter([2])))
    with pytest.raises(TypeError, match="BOUNDED"):
        reversed(concat([1], CountingRange()))


@given(list_of_lists, st.data())
def test_indexing(lists, data):
    flat = flatten(lists)
    view = concat(*lists)
    if not flat:
        with pytest.raises(IndexError):
            view[0]
        return
    index = data.draw(st.integers(min_value=-len(flat), max_value=len(flat) - 1))
    assert view[index] == flat[index]


def test_indexing_out_of_range():
    view = concat([1, 2], [], [3])
    with pytest.raises(IndexError):
        view[3]
    with pytest.raises(IndexError):
        view[-4]


def test_indexing_out_of_range_without_checks(unchecked):
    view = concat([1, 2], [3], settings=unchecked)
    with pytest.raises(IndexError):
        view[3]


def test_indexing_requires_random_access():
    with pytest.raises(TypeError, match="RANDOM_ACCESS"):
        concat([1], iter([2]))[0]


def test_indexing_rejects_slices():
    with pytest.raises(TypeError, match="must be integers"):
        concat([1, 2])[0:1]


def test_indexing_infinite_view():
    view = concat([1, 2], CountingRange(10))
    assert view[4] == 12


# N = 1


@given(st.lists(st.integers(), max_size=8))
def test_single_range_view_matches_range(items):
    """PROPERTY: Concatenating one range changes nothing observable."""
    view = concat(items)
    assert list(view) == items
    assert len(view) == len(items)
    assert list(reversed(view)) == items[::-1]
    for i in range(len(items)):
        assert view[i] == items[i]
    assert view.begin().distance_to(view.end()) == len(items)


# Nesting


def test_views_nest():
    inner = concat([1, 2], [3])
    view = concat(inner, [], [4])
    assert list(view) == [1, 2, 3, 4]
    assert len(view) == 4
    assert list(reversed(view)) == [4, 3, 2, 1]
    assert [view[i] for i in range(4)] == [1, 2, 3, 4]
    assert view.begin().distance_to(view.end()) == 4


def test_directly_built_view_is_not_sized():
    """CRITICAL: A view publishes SIZED only when it actually has size().

    Why: Outer views trust the published flags and would call size() on it.
    """
    inner = ConcatenatedView(SequenceRange([1, 2]), SequenceRange([3]))
    assert Capability.SIZED not in inner.capabilities
    assert Capability.RANDOM_ACCESS in inner.capabilities

    view = concat(inner, [4])
    assert not isinstance(view, SizedConcatenatedView)
    assert list(view) == [1, 2, 3, 4]
    assert view[3] == 4
    assert view.begin().distance_to(view.end()) == 4


def test_negative_index_requires_sized_view():
    inner = ConcatenatedView(SequenceRange([1, 2]), SequenceRange([3]))
    assert inner[2] == 3
    with pytest.raises(TypeError, match="SIZED"):
        inner[-1]


def test_sized_view_publishes_sized():
    view = SizedConcatenatedView(SequenceRange([1]), SequenceRange([2]))
    assert Capability.SIZED in view.capabilities
    assert len(concat(view, [3])) == 3


def test_nested_view_jumps_across_inner_boundaries():
    inner = concat([1, 2], [3])
    view = concat([0], inner, [4, 5])
    pos = view.begin()
    pos.advance(3)
    assert pos.current() == 3
    pos.advance(2)
    assert pos.current() == 5
    pos.advance(-4)
    assert pos.current() == 1


def test_nested_capabilities_propagate():
    inner = concat([1], iter([2]))
    view = concat([0], inner)
    assert view.capabilities == Capability.SINGLE_PASS
    assert list(view) == [0, 1, 2]


def test_iterable_range_input_directly():
    view = ConcatenatedView(IterableRange(iter("ab")), SequenceRange("c"))
    assert list(view) == ["a", "b", "c"]
