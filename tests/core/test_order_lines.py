"""OrderLines - tests for the read-only line view.

Tests cover:
    - Read access (len, index, slice, iteration, membership)
    - Every mutator raises UnsupportedOperationError and leaves the view unchanged
    - The view owns a copy: changing the source list has no effect
"""

import pytest

from storefront.core.errors import UnsupportedOperationError, ValidationError
from storefront.core.order_line import OrderLine
from storefront.core.order_lines import OrderLines

LAPTOP = OrderLine("LAPTOP", 1, 20000)
MOUSE = OrderLine("MOUSE", 3, 2500)
HACKER = OrderLine("HACKER", 1, 1)


def _make_view() -> OrderLines:
    return OrderLines([LAPTOP, MOUSE])


# ─── Reads ───────────────────────────────────────────────────────

def test_reads_behave_like_a_sequence():
    view = _make_view()
    assert len(view) == 2
    assert view[0] is LAPTOP
    assert view[-1] is MOUSE
    assert list(view) == [LAPTOP, MOUSE]
    assert MOUSE in view
    assert view.index(MOUSE) == 1
    assert view.count(LAPTOP) == 1
    assert view.skus == ("LAPTOP", "MOUSE")


def test_slice_returns_read_only_view():
    sliced = _make_view()[1:]
    assert isinstance(sliced, OrderLines)
    assert list(sliced) == [MOUSE]
    with pytest.raises(UnsupportedOperationError):
        sliced.append(HACKER)


def test_equality_with_tuples_and_lists():
    view = _make_view()
    assert view == OrderLines((LAPTOP, MOUSE))
    assert view == (LAPTOP, MOUSE)
    assert view == [LAPTOP, MOUSE]
    assert hash(view) == hash((LAPTOP, MOUSE))


def test_source_list_changes_are_invisible():
    source = [LAPTOP]
    view = OrderLines(source)
    source.append(MOUSE)
    source.clear()
    assert list(view) == [LAPTOP]


# ─── Mutators ────────────────────────────────────────────────────

@pytest.mark.parametrize("mutate", [
    lambda v: v.append(HACKER),
    lambda v: v.extend([HACKER]),
    lambda v: v.insert(0, HACKER),
    lambda v: v.remove(LAPTOP),
    lambda v: v.pop(),
    lambda v: v.clear(),
    lambda v: v.sort(),
    lambda v: v.reverse(),
    lambda v: v.__setitem__(0, HACKER),
    lambda v: v.__delitem__(0),
    lambda v: setattr(v, "_items", ()),
])
def test_mutators_raise_and_leave_view_unchanged(mutate):
    view = _make_view()
    with pytest.raises(UnsupportedOperationError):
        mutate(view)
    assert list(view) == [LAPTOP, MOUSE]


def test_augmented_add_rejected():
    view = _make_view()
    with pytest.raises(UnsupportedOperationError):
        view += [HACKER]
    assert len(view) == 2


def test_unsupported_operation_is_a_type_error_not_validation():
    view = _make_view()
    with pytest.raises(TypeError) as exc_info:
        view.append(HACKER)
    assert not isinstance(exc_info.value, ValidationError)
    assert exc_info.value.operation == "append"


def test_reinit_on_live_view_rejected():
    view = _make_view()
    with pytest.raises(UnsupportedOperationError):
        view.__init__([HACKER])
    assert list(view) == [LAPTOP, MOUSE]
    assert hash(view) == hash((LAPTOP, MOUSE))
