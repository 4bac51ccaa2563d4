import pytest

from dsakit.matrix import (
    DiagonalMatrix,
    LowerTriangularMatrix,
    MatrixBase,
    SymmetricMatrix,
)


# ---------------------------------------------------------------- base


def test_matrix_base_is_abstract():
    with pytest.raises(TypeError):
        MatrixBase(2, 2, 4)


def test_dimensions_reported():
    matrix = SymmetricMatrix(4, 4)
    assert matrix.rows == 4
    assert matrix.columns == 4
    assert matrix.size == 16


def test_item_access_matches_get_and_set():
    matrix = SymmetricMatrix(3, 3)
    matrix[2, 0] = 7
    assert matrix[0, 2] == 7
    assert matrix.get(2, 0) == 7


# ---------------------------------------------------------------- diagonal


def test_diagonal_default_is_zero():
    matrix = DiagonalMatrix(3)
    assert matrix.to_rows() == [[0, 0, 0], [0, 0, 0], [0, 0, 0]]
    assert matrix.size == 9


def test_diagonal_from_diagonal():
    matrix = DiagonalMatrix.from_diagonal([1, 2, 3])
    assert matrix.to_rows() == [[1, 0, 0], [0, 2, 0], [0, 0, 3]]


def test_diagonal_from_rows_keeps_only_diagonal():
    matrix = DiagonalMatrix.from_rows([[1, 9, 9], [9, 5, 9], [9, 9, 8]])
    assert matrix.get(0, 0) == 1
    assert matrix.get(1, 1) == 5
    assert matrix.get(2, 2) == 8
    assert matrix.get(0, 1) == 0


def test_diagonal_from_rows_rejects_non_square():
    with pytest.raises(ValueError):
        DiagonalMatrix.from_rows([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(ValueError):
        DiagonalMatrix.from_rows([[1, 2], [3]])


def test_diagonal_set_off_diagonal_raises():
    matrix = DiagonalMatrix(3)
    with pytest.raises(ValueError):
        matrix.set(0, 1, 5)


def test_diagonal_set_and_get():
    matrix = DiagonalMatrix(2)
    matrix.set(1, 1, 42)
    assert matrix.get(1, 1) == 42


def test_diagonal_out_of_range():
    matrix = DiagonalMatrix(2)
    with pytest.raises(IndexError):
        matrix.get(2, 2)
    with pytest.raises(IndexError):
        matrix.set(-1, -1, 3)


# ---------------------------------------------------------------- lower triangular


def test_lower_requires_square():
    with pytest.raises(ValueError):
        LowerTriangularMatrix(2, 3)


def test_lower_from_rows_drops_upper_part():
    matrix = LowerTriangularMatrix.from_rows([[1, 9, 9], [2, 3, 9], [4, 5, 6]])
    assert matrix.to_rows() == [[1, 0, 0], [2, 3, 0], [4, 5, 6]]


def test_lower_from_rows_rejects_non_square():
    with pytest.raises(ValueError):
        LowerTriangularMatrix.from_rows([[1, 2], [3, 4], [5, 6]])


def test_lower_set_above_diagonal_raises():
    matrix = LowerTriangularMatrix(3, 3)
    with pytest.raises(ValueError):
        matrix.set(0, 2, 1)


def test_lower_set_and_get():
    matrix = LowerTriangularMatrix(3, 3)
    matrix.set(2, 1, 11)
    assert matrix.get(2, 1) == 11
    assert matrix.get(1, 2) == 0


def test_lower_out_of_range():
    matrix = LowerTriangularMatrix(3, 3)
    with pytest.raises(IndexError):
        matrix.get(3, 0)


# ---------------------------------------------------------------- symmetric


def test_symmetric_requires_square():
    with pytest.raises(ValueError):
        SymmetricMatrix(3, 2)


def test_symmetric_constructor_defaults_to_zero():
    matrix = SymmetricMatrix(3, 3)
    for i in range(3):
        for j in range(3):
            assert matrix.get(i, j) == 0


def test_symmetric_constructor_from_rows():
    values = [[1, 2, 3], [2, 4, 5], [3, 5, 6]]
    matrix = SymmetricMatrix.from_rows(values)

    assert matrix.get(0, 0) == 1
    assert matrix.get(1, 0) == 2
    assert matrix.get(1, 1) == 4
    assert matrix.get(2, 0) == 3
    assert matrix.get(2, 1) == 5
    assert matrix.get(2, 2) == 6

    assert matrix.get(0, 1) == 2
    assert matrix.get(0, 2) == 3
    assert matrix.get(1, 2) == 5


def test_symmetric_from_rows_rejects_non_square():
    with pytest.raises(ValueError):
        SymmetricMatrix.from_rows([[1, 2, 3], [2, 4, 5]])


def test_symmetric_get_out_of_range():
    matrix = SymmetricMatrix(3, 3)
    with pytest.raises(IndexError):
        matrix.get(3, 0)
    with pytest.raises(IndexError):
        matrix.get(0, 3)


def test_symmetric_set():
    matrix = SymmetricMatrix(3, 3)
    matrix.set(0, 0, 10)
    matrix.set(1, 0, 20)
    matrix.set(1, 1, 30)
    matrix.set(2, 0, 40)
    matrix.set(2, 1, 50)
    matrix.set(2, 2, 60)

    assert matrix.get(0, 0) == 10
    assert matrix.get(1, 0) == 20
    assert matrix.get(1, 1) == 30
    assert matrix.get(2, 0) == 40
    assert matrix.get(2, 1) == 50
    assert matrix.get(2, 2) == 60

    assert matrix.get(0, 1) == 20
    assert matrix.get(0, 2) == 40
    assert matrix.get(1, 2) == 50


def test_symmetric_set_upper_updates_both():
    matrix = SymmetricMatrix(3, 3)
    matrix.set(0, 2, 99)
    assert matrix.get(2, 0) == 99


def test_symmetric_set_out_of_range():
    matrix = SymmetricMatrix(3, 3)
    with pytest.raises(IndexError):
        matrix.set(3, 0, 100)
    with pytest.raises(IndexError):
        matrix.set(0, 3, 100)


def test_symmetric_non_symmetric_access_mirrors():
    matrix = SymmetricMatrix(3, 3)
    assert matrix.get(0, 1) == matrix.get(1, 0)
    assert matrix.get(0, 2) == matrix.get(2, 0)
    assert matrix.get(1, 2) == matrix.get(2, 1)


@pytest.mark.parametrize(
    "values",
    [
        [[1, 2, 3], [2, 4, 5], [3, 5, 6]],
        [[1, 2, 3, 4], [2, 5, 6, 7], [3, 6, 8, 9], [4, 7, 9, 10]],
        [
            [1, 2, 3, 4, 5],
            [2, 6, 7, 8, 9],
            [3, 7, 10, 11, 12],
            [4, 8, 11, 13, 14],
            [5, 9, 12, 14, 15],
        ],
    ],
)
def test_symmetric_iteration(values):
    matrix = SymmetricMatrix.from_rows(values)
    n = len(values)
    count = 0
    for i in range(n):
        for j in range(n):
            if i <= j:
                assert matrix.get(i, j) == values[i][j]
                assert matrix.get(j, i) == values[i][j]
            else:
                assert matrix.get(i, j) == matrix.get(j, i)
            count += 1
    assert count == n * n
    assert matrix.size == n * n
    assert matrix.to_rows() == values


def test_symmetric_equality():
    values = [[1, 2], [2, 3]]
    assert SymmetricMatrix.from_rows(values) == SymmetricMatrix.from_rows(values)
    assert SymmetricMatrix.from_rows(values) != SymmetricMatrix.from_rows([[1, 2], [2, 4]])