"""OrderLines - read-only, ordered view over an Order's line items.

Invariants:
    - Backed by a tuple owned by the view; built once from a copy of the caller's iterable
    - __init__ runs once per instance; calling it again on a live view raises
    - Every list-style mutator raises UnsupportedOperationError and leaves contents unchanged
    - Slicing returns another OrderLines, never a mutable list
    - Equality and hash follow the underlying tuple, so Order stays hashable
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from storefront.core.errors import UnsupportedOperationError
from storefront.core.order_line import OrderLine


class OrderLines(Sequence[OrderLine]):
    """Immutable sequence of OrderLine in insertion order."""

    __slots__ = ("_items",)

    def __init__(self, lines: Iterable[OrderLine] = ()):
        # slot is unset only on first init; re-running __init__ would rewrite a live view
        if hasattr(self, "_items"):
            raise UnsupportedOperationError("__init__")
        object.__setattr__(self, "_items", tuple(lines))

    @overload
    def __getitem__(self, index: int) -> OrderLine: ...

    @overload
    def __getitem__(self, index: slice) -> "OrderLines": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OrderLines(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderLines):
            return self._items == other._items
        if isinstance(other, (tuple, list)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"OrderLines({list(self._items)!r})"

    @property
    def skus(self) -> tuple[str, ...]:
        return tuple(line.sku for line in self._items)

    # ─── Rejected mutators ──────────────────────────────────────

    def __setattr__(self, name, value):
        raise UnsupportedOperationError("setattr")

    def __delattr__(self, name):
        raise UnsupportedOperationError("delattr")

    def __setitem__(self, index, value):
        raise UnsupportedOperationError("__setitem__")

    def __delitem__(self, index):
        raise UnsupportedOperationError("__delitem__")

    def __iadd__(self, other):
        raise UnsupportedOperationError("+=")

    def append(self, line):
        raise UnsupportedOperationError("append")

    def extend(self, lines):
        raise UnsupportedOperationError("extend")

    def insert(self, index, line):
        raise UnsupportedOperationError("insert")

    def remove(self, line):
        raise UnsupportedOperationError("remove")

    def pop(self, index=-1):
        raise UnsupportedOperationError("pop")

    def clear(self):
        raise UnsupportedOperationError("clear")

    def sort(self, *args, **kwargs):
        raise UnsupportedOperationError("sort")

    def reverse(self):
        raise UnsupportedOperationError("reverse")
