"""In-place sorting routines and a sortedness check."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from enum import Enum
from itertools import chain, pairwise
from typing import Any

__all__ = ["SortOrder", "bin_sort", "insert_sort", "selection_sort", "is_sorted"]


class SortOrder(Enum):
    """Direction checked by :func:`is_sorted`."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def bin_sort(items: MutableSequence[int]) -> None:
    """Sort non-negative integers in place by distributing them into bins.

    Raises ValueError if any value is negative.
    Runs in O(n + k) time, where k is the largest value.
    """
    if len(items) <= 1:
        return

    values = list(items)
    if min(values) < 0:
        raise ValueError("Bin sort requires non-negative integers.")

    bins: list[list[int]] = [[] for _ in range(max(values) + 1)]
    for value in values:
        bins[value].append(value)

    for position, value in enumerate(chain.from_iterable(bins)):
        items[position] = value


def insert_sort(items: MutableSequence[Any]) -> None:
    """Stable in-place insertion sort."""
    for index in range(1, len(items)):
        key = items[index]
        position = index
        while position > 0 and key < items[position - 1]:
            items[position] = items[position - 1]
            position -= 1
        items[position] = key


def selection_sort(items: MutableSequence[Any]) -> None:
    """In-place selection sort (not stable)."""
    length = len(items)
    for index in range(length):
        smallest = min(range(index, length), key=items.__getitem__)
        if smallest != index:
            items[index], items[smallest] = items[smallest], items[index]


def is_sorted(items: Sequence[Any], order: SortOrder = SortOrder.ASCENDING) -> bool:
    """Return True if ``items`` is non-decreasing (or non-increasing for DESCENDING)."""
    if order is SortOrder.ASCENDING:
        return not any(current > following for current, following in pairwise(items))
    return not any(current < following for current, following in pairwise(items))