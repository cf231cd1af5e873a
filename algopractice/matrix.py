"""Determinants, cofactors, adjoints and inverses of square matrices."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


class SingularMatrixError(ValueError):
    """Raised when an inverse is asked of a matrix whose determinant is zero."""


def _square(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("matrix must be square")
    return rows


def _minor(rows: Matrix, skip_row: int, skip_col: int) -> Matrix:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _det(rows: Matrix) -> float:
    size = len(rows)
    if size == 0:
        return 1
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    return sum(
        (-1) ** col * value * _det(_minor(rows, 0, col))
        for col, value in enumerate(rows[0])
    )


def determinant(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant by cofactor expansion along the first row."""
    return _det(_square(matrix))


def cofactor_matrix(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix of signed cofactors."""
    rows = _square(matrix)
    size = len(rows)
    return [
        [(-1) ** (i + j) * _det(_minor(rows, i, j)) for j in range(size)]
        for i in range(size)
    ]


def adjoint(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the adjugate: the transpose of the cofactor matrix."""
    return [list(column) for column in zip(*cofactor_matrix(matrix))]


def inverse(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse, computed as the adjoint divided by the determinant."""
    det = determinant(matrix)
    if det == 0:
        raise SingularMatrixError(
            "the inverse does not exist as the determinant is zero"
        )
    return [[value / det for value in row] for row in adjoint(matrix)]


def strip_zero_lines(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Drop every all-zero row, then every column that is zero in the rows left."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    kept_rows = [row for row in rows if any(value != 0 for value in row)]
    kept_cols = [
        col for col in range(width) if any(row[col] != 0 for row in kept_rows)
    ]
    return [[row[col] for col in kept_cols] for row in kept_rows]