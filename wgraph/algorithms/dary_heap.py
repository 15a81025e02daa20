"""Indexed d-ary min-heap with decrease-key.

The heap stores items in a flat list where the children of slot ``i`` are
slots ``d*i + 1`` through ``d*i + d``. A position index maps each live item's
identity key to its slot, which makes ``decrease_key`` O(log_d n) instead of
a linear search.

Notes:
    A wider heap is shallower, so sift-up (push, decrease-key) does fewer
    moves while sift-down (pop_min) compares up to ``d`` children per level.
    Prim's algorithm performs one decrease-key per improving edge and one
    extraction per vertex, so it sizes ``d`` from the average degree.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

T = TypeVar("T")


def _identity(item):
    return item


class IndexedDaryHeap(Generic[T]):
    """Min-priority queue over comparable items with arity ``d``.

    Items are ordered with ``<``. Each live item is identified by
    ``key(item)``; at most one item per key may be live at a time.

    Args:
        arity: Branching factor ``d``; must be at least 2.
        key: Identity function used by ``decrease_key`` and membership tests.
            Defaults to the item itself.
        priority: Projection that ``decrease_key`` compares to reject an
            increase. Defaults to the item itself, i.e. the full ``<`` order.
            Items whose priorities tie may still be replaced in any order.

    Raises:
        ValueError: If ``arity`` is less than 2.
    """

    def __init__(
        self,
        arity: int = 2,
        key: Optional[Callable[[T], Hashable]] = None,
        priority: Optional[Callable[[T], Any]] = None,
    ) -> None:
        if arity < 2:
            raise ValueError(f"Heap arity must be at least 2, got {arity}.")
        self._d = arity
        self._key: Callable[[T], Hashable] = key or _identity
        self._priority: Callable[[T], Any] = priority or _identity
        self._items: List[T] = []
        self._pos: Dict[Hashable, int] = {}

    @property
    def arity(self) -> int:
        return self._d

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._pos

    def empty(self) -> bool:
        return not self._items

    def push(self, item: T) -> None:
        """Insert ``item``.

        Raises:
            ValueError: If an item with the same key is already live.
        """
        k = self._key(item)
        if k in self._pos:
            raise ValueError(f"Item with key {k!r} is already in the heap.")
        self._items.append(item)
        self._pos[k] = len(self._items) - 1
        self._sift_up(len(self._items) - 1)

    def min(self) -> T:
        """Return the minimum item without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._items:
            raise IndexError("min() on an empty heap")
        return self._items[0]

    def pop_min(self) -> T:
        """Remove and return the minimum item.

        Raises:
            IndexError: If the heap is empty.
        """
        if not self._items:
            raise IndexError("pop_min() on an empty heap")
        top = self._items[0]
        last = self._items.pop()
        del self._pos[self._key(top)]
        if self._items:
            self._items[0] = last
            self._pos[self._key(last)] = 0
            self._sift_down(0)
        return top

    def decrease_key(self, old: T, new: T) -> None:
        """Replace the live entry matching ``old`` with ``new``.

        The entry is found by ``key(old)``, so ``old`` only has to agree with
        the stored item on identity. A replacement with an equal priority is
        allowed and may move the entry either way among its ties.

        Raises:
            KeyError: If no live item has ``key(old)``.
            ValueError: If ``new`` has a different key, or a higher priority
                than the entry it replaces.
        """
        k = self._key(old)
        i = self._pos[k]
        if self._key(new) != k:
            raise ValueError(
                f"decrease_key cannot change item identity ({k!r} -> {self._key(new)!r})."
            )
        if self._priority(self._items[i]) < self._priority(new):
            raise ValueError("decrease_key cannot increase an item's priority.")
        self._items[i] = new
        self._sift_up(i)
        self._sift_down(self._pos[k])

    #
    # Internal helpers
    #
    def _place(self, item: T, i: int) -> None:
        self._items[i] = item
        self._pos[self._key(item)] = i

    def _sift_up(self, i: int) -> None:
        items = self._items
        item = items[i]
        while i > 0:
            parent = (i - 1) // self._d
            if not item < items[parent]:
                break
            self._place(items[parent], i)
            i = parent
        self._place(item, i)

    def _sift_down(self, i: int) -> None:
        items = self._items
        size = len(items)
        item = items[i]
        while True:
            first = self._d * i + 1
            if first >= size:
                break
            smallest = first
            for c in range(first + 1, min(first + self._d, size)):
                if items[c] < items[smallest]:
                    smallest = c
            if not items[smallest] < item:
                break
            self._place(items[smallest], i)
            i = smallest
        self._place(item, i)
