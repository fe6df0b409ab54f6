"""Data structures for experience replay."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """A fixed-size buffer that overwrites its oldest element once full."""

    def __init__(self, capacity: int) -> None:
        self._buffer: list[T] = []
        self._ix = 0
        self.capacity = capacity

    @classmethod
    def from_list(cls, data: list[T]) -> RingBuffer[T]:
        """Build a full buffer from ``data``; its capacity is ``len(data)``."""
        buf = cls(len(data))
        buf._buffer = list(data)
        return buf

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index: int) -> T:
        return self._buffer[index]

    def push(self, item: T) -> int:
        """Write ``item`` over the oldest element and return the write index."""
        if self.capacity <= 0:
            raise ValueError("cannot push into a ring buffer of zero capacity")
        ix = self._ix
        if ix >= len(self._buffer):
            self._buffer.append(item)
        else:
            self._buffer[ix] = item
        self._ix = (ix + 1) % self.capacity
        return ix

    def view(self) -> list[T]:
        """Return a copy of the stored elements in storage order."""
        return list(self._buffer)


class SumTree:
    """A binary tree whose parent nodes hold the sum of their children."""

    def __init__(self, capacity: int) -> None:
        capacity = 1 if capacity <= 1 else 1 << (capacity - 1).bit_length()
        self.capacity = capacity
        self._tree = [0.0] * (2 * capacity - 1)
        self._max = 0.0

    def _leaf(self, ix: int) -> int:
        if not 0 <= ix < self.capacity:
            raise IndexError(f"index {ix} out of range for capacity {self.capacity}")
        return ix + self.capacity - 1

    def update(self, ix: int, value: float) -> None:
        """Set the value at leaf ``ix`` and propagate the change upward."""
        node = self._leaf(ix)
        change = value - self._tree[node]
        self._tree[node] = value
        while node > 0:
            node = (node - 1) // 2
            self._tree[node] += change
        if value > self._max:
            self._max = value

    def find(self, value: float) -> int:
        """Return the first leaf index whose prefix sum reaches ``value``."""
        node = 0
        while node < self.capacity - 1:
            left = 2 * node + 1
            if value <= self._tree[left]:
                node = left
            else:
                value -= self._tree[left]
                node = left + 1
        return node - (self.capacity - 1)

    def sum(self) -> float:
        """Return the sum of all stored values."""
        return self._tree[0]

    def max(self) -> float:
        """Return the largest value ever stored."""
        return self._max

    def __getitem__(self, ix: int) -> float:
        return self._tree[self._leaf(ix)]

    def __len__(self) -> int:
        return self.capacity