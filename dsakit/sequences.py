"""Whole-sequence operations: reversing, shifting, merging and duplicate handling."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

__all__ = [
    "reverse_elements",
    "left_shift_elements",
    "right_shift_elements",
    "merge_elements",
    "delete_duplicates",
    "find_duplicate_elements",
]

T = TypeVar("T")


def reverse_elements(items: MutableSequence[Any]) -> None:
    """Reverse ``items`` in place by swapping from both ends towards the middle."""
    low, high = 0, len(items) - 1
    while low < high:
        items[low], items[high] = items[high], items[low]
        low += 1
        high -= 1


def _blank_value(items: Sequence[Any]) -> Any:
    """Return the default value of the element type, e.g. 0 for ints or "" for strings."""
    try:
        return type(items[0])()
    except TypeError:
        return None


def _checked_positions(items: Sequence[Any], positions: int) -> int:
    if positions < 0:
        raise ValueError("positions must be non-negative")
    return min(positions, len(items))


def left_shift_elements(items: MutableSequence[Any], positions: int) -> None:
    """Shift ``items`` left in place by ``positions``.

    Vacated slots at the end take the element type's default value. A shift
    larger than the sequence empties it to defaults; a shift of 0 changes nothing.
    Raises ValueError for a negative shift.
    """
    if not items or positions == 0:
        return
    positions = _checked_positions(items, positions)
    blank = _blank_value(items)
    length = len(items)
    for index in range(length - positions):
        items[index] = items[index + positions]
    for index in range(length - positions, length):
        items[index] = blank


def right_shift_elements(items: MutableSequence[Any], positions: int) -> None:
    """Shift ``items`` right in place by ``positions``.

    Vacated slots at the start take the element type's default value. A shift
    larger than the sequence empties it to defaults; a shift of 0 changes nothing.
    Raises ValueError for a negative shift.
    """
    if not items or positions == 0:
        return
    positions = _checked_positions(items, positions)
    blank = _blank_value(items)
    for index in range(len(items) - 1, positions - 1, -1):
        items[index] = items[index - positions]
    for index in range(positions):
        items[index] = blank


def merge_elements(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    On equal values the element from ``second`` is taken first.
    """
    left = iter(first)
    right = iter(second)
    merged: list[T] = []
    sentinel = object()
    a: Any = next(left, sentinel)
    b: Any = next(right, sentinel)
    while a is not sentinel and b is not sentinel:
        if a < b:
            merged.append(a)
            a = next(left, sentinel)
        else:
            merged.append(b)
            b = next(right, sentinel)
    if a is not sentinel:
        merged.append(a)
        merged.extend(left)
    if b is not sentinel:
        merged.append(b)
        merged.extend(right)
    return merged


def delete_duplicates(items: list[Any]) -> None:
    """Remove repeated values from ``items`` in place, keeping each first occurrence."""
    if len(items) <= 1:
        return
    seen: set[Any] = set()
    kept = []
    for value in items:
        if value not in seen:
            seen.add(value)
            kept.append(value)
    items[:] = kept


def find_duplicate_elements(items: Iterable[T]) -> list[T] | None:
    """Return each value that occurs at least twice, or None if there is none.

    Values are listed once each, in order of first appearance.
    """
    counts = Counter(items)
    duplicates = [value for value, count in counts.items() if count >= 2]
    return duplicates or None