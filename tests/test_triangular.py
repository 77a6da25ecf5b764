"""Tests for triangular factors and substitution."""

import numpy as np
import pytest
import scipy.linalg

from numkern.algebra.triangular import (
    Triangle,
    TriangularMatrix,
    forwardsub,
    backsub,
    lower,
    upper,
)
from numkern.core.exceptions import DimensionError


def test_forwardsub_matches_dense_solver(rng):
    """Forward substitution agrees with LAPACK's triangular solve."""
    L = np.tril(rng.standard_normal((6, 6))) + 6.0 * np.eye(6)
    b = rng.standard_normal(6)

    x = forwardsub(L, b)
    expected = scipy.linalg.solve_triangular(L, b, lower=True)

    assert np.allclose(x, expected, rtol=1e-12, atol=1e-14)


def test_backsub_matches_dense_solver(rng):
    """Back substitution agrees with LAPACK's triangular solve."""
    U = np.triu(rng.standard_normal((6, 6))) + 6.0 * np.eye(6)
    b = rng.standard_normal(6)

    x = backsub(U, b)
    expected = scipy.linalg.solve_triangular(U, b, lower=False)

    assert np.allclose(x, expected, rtol=1e-12, atol=1e-14)


def test_forwardsub_ignores_upper_triangle():
    """Only entries on and below the diagonal are read."""
    L = np.array([[2.0, 99.0], [1.0, 4.0]])
    b = np.array([2.0, 5.0])

    x = forwardsub(L, b)

    assert np.allclose(x, [1.0, 1.0])


def test_substitution_does_not_modify_inputs():
    """Caller arrays are left untouched."""
    U = np.array([[2.0, 1.0], [0.0, 4.0]])
    b = np.array([3.0, 4.0])
    U_before, b_before = U.copy(), b.copy()

    backsub(U, b)

    assert np.array_equal(U, U_before)
    assert np.array_equal(b, b_before)


def test_zero_diagonal_propagates_non_finite():
    """A zero pivot is not trapped: the result contains Inf/NaN."""
    L = np.array([[0.0, 0.0], [1.0, 1.0]])
    b = np.array([1.0, 1.0])

    with np.errstate(divide="ignore", invalid="ignore"):
        x = forwardsub(L, b)

    assert not np.all(np.isfinite(x))


def test_substitution_dimension_mismatch():
    """Vector length must match the matrix."""
    L = np.eye(3)

    with pytest.raises(DimensionError):
        forwardsub(L, np.ones(4))

    with pytest.raises(DimensionError):
        backsub(np.ones((3, 2)), np.ones(3))


def test_triangular_matrix_zeroes_wrong_side():
    """Construction enforces exact zeros off the tagged triangle."""
    A = np.arange(9.0).reshape(3, 3) + 1.0

    L = lower(A)
    U = upper(A)

    assert L.kind == Triangle.LOWER
    assert U.kind == Triangle.UPPER
    assert np.array_equal(L.data, np.tril(A))
    assert np.array_equal(U.data, np.triu(A))
    # Input is copied
    assert A[0, 2] == 3.0


def test_triangular_matrix_transpose_flips_kind():
    """Transposing a lower factor gives an upper one."""
    L = lower(np.array([[1.0, 0.0], [2.0, 3.0]]))

    Lt = L.T

    assert Lt.kind == Triangle.UPPER
    assert np.array_equal(Lt.data, np.array([[1.0, 2.0], [0.0, 3.0]]))


def test_triangular_matrix_solve_dispatch(rng):
    """solve() picks forward or back substitution from the tag."""
    A = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    b = rng.standard_normal(5)

    L = TriangularMatrix(A, Triangle.LOWER)
    U = TriangularMatrix(A, Triangle.UPPER)

    assert np.allclose(L.solve(b), forwardsub(np.tril(A), b))
    assert np.allclose(U.solve(b), backsub(np.triu(A), b))
    assert np.allclose(L @ L.solve(b), b)


def test_triangular_matrix_array_interop():
    """Factors convert to ndarrays and multiply with @."""
    L = lower(np.array([[1.0, 0.0], [2.0, 1.0]]))
    U = upper(np.array([[3.0, 4.0], [0.0, 5.0]]))

    assert np.asarray(L).shape == (2, 2)
    assert np.allclose(L @ U, np.array([[3.0, 4.0], [6.0, 13.0]]))
    assert np.allclose(np.eye(2) @ U, U.data)


def test_triangular_matrix_rejects_non_square():
    """Tagged factors must be square."""
    with pytest.raises(DimensionError):
        lower(np.ones((2, 3)))
