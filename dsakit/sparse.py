"""Sparse matrix that stores only its non-zero elements, in row-major order."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any

from dsakit.matrix import MatrixBase

__all__ = ["Element", "SparseMatrix"]

_DEFAULT = 0


@dataclass(frozen=True)
class Element:
    """One stored entry of a sparse matrix."""

    i: int
    j: int
    value: Any


def _position(element: Element) -> tuple[int, int]:
    return (element.i, element.j)


class SparseMatrix(MatrixBase):
    """Matrix of any shape that keeps only elements different from zero."""

    def __init__(self, rows: int, columns: int) -> None:
        super().__init__(rows, columns, 0)

    def _locate(self, i: int, j: int) -> tuple[int, bool]:
        index = bisect_left(self._data, (i, j), key=_position)
        found = index < len(self._data) and _position(self._data[index]) == (i, j)
        return index, found

    def get(self, i: int, j: int) -> Any:
        """Return the value at (i, j), or zero when nothing is stored there."""
        self._check_range(i, j)
        index, found = self._locate(i, j)
        return self._data[index].value if found else _DEFAULT

    def set(self, i: int, j: int, value: Any) -> None:
        """Store ``value`` at (i, j); storing zero removes the element."""
        self._check_range(i, j)
        index, found = self._locate(i, j)
        if value == _DEFAULT:
            if found:
                del self._data[index]
        elif found:
            self._data[index] = Element(i, j, value)
        else:
            self._data.insert(index, Element(i, j, value))

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the element-wise sum; raises ValueError on a shape mismatch."""
        if self.rows != other.rows or self.columns != other.columns:
            raise ValueError("Matrices must have the same dimensions for addition.")
        result = self.copy()
        for element in other._data:
            result.set(element.i, element.j, result.get(element.i, element.j) + element.value)
        return result

    def copy(self) -> SparseMatrix:
        """Return an independent matrix with the same shape and elements."""
        duplicate = type(self)(self.rows, self.columns)
        duplicate._data = list(self._data)
        return duplicate

    def elements(self) -> list[Element]:
        """Return the stored elements ordered by row, then column."""
        return list(self._data)

    def __add__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.add(other)