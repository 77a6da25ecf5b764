"""LU factorization by outer-product elimination, with and without pivoting."""

import logging
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.algebra.triangular import TriangularMatrix, lower, upper
from numkern.core.validation import check_square, check_vector

logger = logging.getLogger(__name__)


def lufact(A: ArrayLike) -> tuple[TriangularMatrix, TriangularMatrix]:
    """
    LU factorization without pivoting.

    At step k the k-th row of the working matrix becomes row k of U, the
    k-th column scaled by the pivot becomes column k of L, and the outer
    product of the two is subtracted from the working matrix.

    A zero pivot is not detected; L and U then contain Inf/NaN.

    Args:
        A: Square matrix (n, n)

    Returns:
        L: Unit lower-triangular factor
        U: Upper-triangular factor, with L @ U = A
    """
    Ak = check_square(A, "A")
    n = Ak.shape[0]
    L = np.eye(n)
    U = np.zeros((n, n))

    for k in range(n - 1):
        U[k, :] = Ak[k, :]
        L[:, k] = Ak[:, k] / U[k, k]
        Ak -= np.outer(L[:, k], U[k, :])

    U[n - 1, n - 1] = Ak[n - 1, n - 1]
    return lower(L), upper(U)


def plufact(
    A: ArrayLike,
) -> tuple[TriangularMatrix, TriangularMatrix, NDArray[np.intp]]:
    """
    LU factorization with partial (row) pivoting.

    The pivot at step k is the largest-magnitude entry of column k among
    rows not yet used as pivots, so p is always a permutation. The
    elimination factor is returned with its rows reordered by p, which
    makes it lower triangular.

    Args:
        A: Square matrix (n, n)

    Returns:
        L: Unit lower-triangular factor
        U: Upper-triangular factor
        p: Row permutation (0-based), with L @ U = A[p, :]
    """
    Ak = check_square(A, "A")
    n = Ak.shape[0]
    L = np.zeros((n, n))
    U = np.zeros((n, n))
    p = np.zeros(n, dtype=np.intp)
    used = np.zeros(n, dtype=bool)

    for k in range(n):
        # Used rows are exact zeros after elimination; mask them anyway
        # so an all-zero column cannot pick a row twice.
        candidates = np.where(used, -1.0, np.abs(Ak[:, k]))
        p[k] = int(np.argmax(candidates))
        used[p[k]] = True

        U[k, :] = Ak[p[k], :]
        L[:, k] = Ak[:, k] / U[k, k]
        if k < n - 1:
            Ak -= np.outer(L[:, k], U[k, :])

    logger.debug("plufact: n=%d, pivot order %s", n, p.tolist())
    return lower(L[p, :]), upper(U), p


def lusolve(A: ArrayLike, b: ArrayLike) -> NDArray:
    """Solve Ax = b with lufact and forward/back substitution."""
    L, U = lufact(A)
    b = check_vector(b, L.shape[0], "b")
    return U.solve(L.solve(b))


def plusolve(A: ArrayLike, b: ArrayLike) -> NDArray:
    """Solve Ax = b with plufact and forward/back substitution."""
    L, U, p = plufact(A)
    b = check_vector(b, L.shape[0], "b")
    return U.solve(L.solve(b[p]))
