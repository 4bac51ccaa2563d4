"""Square matrices that store only the elements their shape requires."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

__all__ = ["MatrixBase", "DiagonalMatrix", "LowerTriangularMatrix", "SymmetricMatrix"]

_DEFAULT = 0


class MatrixBase(ABC):
    """Common shape, bounds checking and element access for compact matrices."""

    def __init__(self, rows: int, columns: int, storage: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._rows = rows
        self._columns = columns
        self._data: list[Any] = [_DEFAULT] * storage

    @abstractmethod
    def get(self, i: int, j: int) -> Any:
        """Return the element at row ``i``, column ``j``."""

    @abstractmethod
    def set(self, i: int, j: int, value: Any) -> None:
        """Store ``value`` at row ``i``, column ``j``."""

    @property
    def size(self) -> int:
        """Total number of elements, rows times columns."""
        return self._rows * self._columns

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    def _check_range(self, i: int, j: int) -> None:
        if not (0 <= i < self._rows and 0 <= j < self._columns):
            raise IndexError("Index out of range")

    def to_rows(self) -> list[list[Any]]:
        """Return the full matrix as a list of rows."""
        return [[self.get(i, j) for j in range(self._columns)] for i in range(self._rows)]

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = key
        self.set(i, j, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase) or type(self) is not type(other):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._columns == other._columns
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_rows()!r})"


def _require_square(values: Sequence[Sequence[Any]], kind: str) -> int:
    size = len(values)
    if any(len(row) != size for row in values):
        raise ValueError(f"Non-square matrix provided for {kind} matrix")
    return size


def _triangle_index(i: int, j: int) -> int:
    return i * (i + 1) // 2 + j


class DiagonalMatrix(MatrixBase):
    """Square matrix whose only stored elements lie on the main diagonal."""

    def __init__(self, size: int) -> None:
        super().__init__(size, size, size)

    @classmethod
    def from_diagonal(cls, values: Sequence[Any]) -> DiagonalMatrix:
        """Build a matrix whose diagonal holds ``values``."""
        matrix = cls(len(values))
        for index, value in enumerate(values):
            matrix.set(index, index, value)
        return matrix

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[Any]]) -> DiagonalMatrix:
        """Build a matrix from full rows, keeping only the diagonal."""
        size = _require_square(values, "diagonal")
        matrix = cls(size)
        for index, row in enumerate(values):
            matrix.set(index, index, row[index])
        return matrix

    def get(self, i: int, j: int) -> Any:
        self._check_range(i, j)
        return self._data[i] if i == j else _DEFAULT

    def set(self, i: int, j: int, value: Any) -> None:
        """Store ``value`` on the diagonal; raises ValueError off the diagonal."""
        self._check_range(i, j)
        if i != j:
            raise ValueError("Non-diagonal elements cannot be set")
        self._data[i] = value


class LowerTriangularMatrix(MatrixBase):
    """Square matrix storing only elements on or below the main diagonal."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows != columns:
            raise ValueError("Matrix must be square for lower triangular matrix.")
        super().__init__(rows, columns, rows * (rows + 1) // 2)

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[Any]]) -> LowerTriangularMatrix:
        """Build a matrix from full rows, keeping only the lower triangle."""
        size = _require_square(values, "lower-triangle")
        matrix = cls(size, size)
        for i, row in enumerate(values):
            for j in range(i + 1):
                matrix.set(i, j, row[j])
        return matrix

    def get(self, i: int, j: int) -> Any:
        self._check_range(i, j)
        if i < j:
            return _DEFAULT
        return self._data[_triangle_index(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """Store ``value`` at or below the diagonal; raises ValueError above it."""
        self._check_range(i, j)
        if i < j:
            raise ValueError("Non-lower triangular elements cannot be set")
        self._data[_triangle_index(i, j)] = value


class SymmetricMatrix(MatrixBase):
    """Square matrix where (i, j) and (j, i) share one stored element."""

    def __init__(self, rows: int, columns: int) -> None:
        if rows != columns:
            raise ValueError("Matrix must be square for symmetric matrix.")
        super().__init__(rows, columns, rows * (rows + 1) // 2)

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[Any]]) -> SymmetricMatrix:
        """Build a matrix from full rows, reading the lower triangle."""
        size = _require_square(values, "symmetric")
        matrix = cls(size, size)
        for i, row in enumerate(values):
            for j in range(i + 1):
                matrix.set(i, j, row[j])
        return matrix

    def get(self, i: int, j: int) -> Any:
        self._check_range(i, j)
        if i < j:
            i, j = j, i
        return self._data[_triangle_index(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """Store ``value`` at (i, j), which is also (j, i)."""
        self._check_range(i, j)
        if i < j:
            i, j = j, i
        self._data[_triangle_index(i, j)] = value