#!/usr/bin/env python3
"""
Bounded trail history for one pendulum.

Layout
- Points live in one Python list, oldest first. The live window is
  storage[start:], so the window is always contiguous and never wraps.
- A push appends at the end and, once the window holds `capacity` points, slides
  `start` forward by one. Evicted points stay in the list as dead slots.
- When the list reaches 2 * capacity slots the next push first calls rebase(),
  which copies the live window into a fresh list in one O(capacity) move. That happens at most
  once every `capacity` pushes, so push is amortized O(1).
- contiguous_view() wraps the live window in a TrailView without copying, so a
  read is O(1) no matter how many pushes happened since the last read.

A list is only ever appended to or replaced, never edited in place, so a
TrailView keeps showing the points the buffer held when the view was taken.
"""
from collections.abc import Sequence
from typing import Iterator, List, Tuple, Union

from .data_models import Point
from .utils import require_int


class TrailView(Sequence):
    """Read-only, non-copying window over a TrailBuffer's storage."""

    __slots__ = ("_storage", "_start", "_stop")

    def __init__(self, storage: List[Point], start: int, stop: int):
        self._storage = storage
        self._start = start
        self._stop = stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            lo, hi, step = index.indices(len(self))
            return [self._storage[self._start + i] for i in range(lo, hi, step)]
        n = len(self)
        if index < 0:
            index += n
        if not 0 <= index < n:
            raise IndexError("trail index out of range")
        return self._storage[self._start + index]

    def __iter__(self) -> Iterator[Point]:
        storage = self._storage
        for i in range(self._start, self._stop):
            yield storage[i]

    def __repr__(self) -> str:
        return f"TrailView({list(self)!r})"


class TrailBuffer:
    """
    FIFO history of at most `capacity` 2D points.

    States: empty -> filling (len < capacity) -> full (len == capacity). A full
    buffer stays full under further pushes, evicting its oldest point each time.
    clear() returns to empty from any state.

    `visible` only gates drawing; points are appended on every push regardless.
    """

    def __init__(self, capacity: int, visible: bool = True):
        self._capacity = require_int("trail_capacity", capacity, 0)
        self._storage: List[Point] = []
        self._start = 0
        self.visible = bool(visible)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._storage) - self._start

    def is_full(self) -> bool:
        return self._capacity > 0 and len(self) == self._capacity

    def push(self, point: Tuple[float, float]) -> None:
        """Append the newest point, evicting the oldest one when at capacity."""
        if self._capacity == 0:
            return
        if len(self._storage) >= 2 * self._capacity:
            self.rebase()
        self._storage.append((float(point[0]), float(point[1])))
        if len(self) > self._capacity:
            self._start += 1

    def rebase(self) -> None:
        """Drop evicted slots so the live window starts at storage index 0."""
        if self._start:
            self._storage = self._storage[self._start:]
            self._start = 0

    def contiguous_view(self) -> TrailView:
        """Return the live points, oldest first, as one unbroken read-only range."""
        return TrailView(self._storage, self._start, len(self._storage))

    def clear(self) -> None:
        # outstanding views keep the old list
        self._storage = []
        self._start = 0

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, evicting from the oldest end if the buffer shrinks."""
        capacity = require_int("trail_capacity", capacity, 0)
        excess = len(self) - capacity
        if excess > 0:
            self._start += excess
        self._capacity = capacity
        self.rebase()
