"""Binary min-heap stored in a list."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

__all__ = ["MinHeap"]

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Binary min-heap: the smallest value sits at the root."""

    def __init__(self) -> None:
        self._data: list[T] = []

    def insert(self, value: T) -> None:
        """Add ``value`` and sift it up to restore the heap property."""
        data = self._data
        data.append(value)
        index = len(data) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not data[index] < data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def pop(self) -> T | None:
        """Remove and return the smallest value, or None if the heap is empty."""
        data = self._data
        if not data:
            return None

        data[0], data[-1] = data[-1], data[0]
        smallest_value = data.pop()

        current = 0
        size = len(data)
        while True:
            left = 2 * current + 1
            right = left + 1
            smallest = current
            if left < size and data[left] < data[smallest]:
                smallest = left
            if right < size and data[right] < data[smallest]:
                smallest = right
            if smallest == current:
                break
            data[current], data[smallest] = data[smallest], data[current]
            current = smallest

        return smallest_value

    def to_list(self) -> list[T]:
        """Return a copy of the underlying array in heap order."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MinHeap):
            return NotImplemented
        return self._data == other._data