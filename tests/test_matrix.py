import pytest

from algopractice.matrix import (
    SingularMatrixError,
    adjoint,
    cofactor_matrix,
    determinant,
    inverse,
    strip_zero_lines,
)

SAMPLE = [[2, 0, 1], [1, 3, 2], [1, 1, 1]]
SAMPLE4 = [[4, 1, 0, 2], [3, 5, 1, 0], [0, 2, 6, 1], [1, 0, 2, 3]]


def _product(a, b):
    return [[sum(x * y for x, y in zip(row, col)) for col in zip(*b)] for row in a]


def test_determinant_two_by_two():
    assert determinant([[1, 2], [3, 4]]) == -2


def test_determinant_identity():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert determinant(identity) == 1


def test_determinant_of_transpose_matches():
    transposed = [list(col) for col in zip(*SAMPLE4)]
    assert determinant(transposed) == determinant(SAMPLE4)


def test_determinant_singular_rows():
    assert determinant([[1, 2, 3], [2, 4, 6], [7, 8, 9]]) == 0


def test_determinant_rejects_non_square():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])


def test_adjoint_is_transposed_cofactors():
    cof = cofactor_matrix(SAMPLE)
    adj = adjoint(SAMPLE)
    assert adj == [list(col) for col in zip(*cof)]


def test_matrix_times_adjoint_is_scaled_identity():
    det = determinant(SAMPLE4)
    product = _product(SAMPLE4, adjoint(SAMPLE4))
    for i, row in enumerate(product):
        for j, value in enumerate(row):
            assert value == (det if i == j else 0)


def test_inverse_gives_identity():
    product = _product(SAMPLE4, inverse(SAMPLE4))
    for i, row in enumerate(product):
        for j, value in enumerate(row):
            assert value == pytest.approx(1.0 if i == j else 0.0, abs=1e-9)


def test_inverse_of_singular_raises():
    with pytest.raises(SingularMatrixError):
        inverse([[1, 2], [2, 4]])


def test_strip_zero_lines_example():
    matrix = [[1, 2, 0, 3, 5], [0, 0, 0, 0, 0], [4, 5, 0, 6, 9], [7, 8, 0, 9, 1]]
    assert strip_zero_lines(matrix) == [[1, 2, 3, 5], [4, 5, 6, 9], [7, 8, 9, 1]]


def test_strip_zero_lines_all_zero():
    assert strip_zero_lines([[0, 0], [0, 0]]) == []


def test_strip_zero_lines_keeps_full_matrix():
    assert strip_zero_lines(SAMPLE) == SAMPLE


def test_strip_zero_lines_ragged_raises():
    with pytest.raises(ValueError):
        strip_zero_lines([[1, 2], [3]])