"""Householder QR and linear least squares."""

import numpy as np
import scipy.linalg
from numpy.typing import ArrayLike, NDArray

from numkern.algebra.triangular import forwardsub, backsub
from numkern.core.exceptions import DimensionError, NotPositiveDefiniteError
from numkern.core.validation import check_matrix, check_vector


def qrfact(A: ArrayLike) -> tuple[NDArray, NDArray]:
    """
    QR factorization by Householder reflections.

    Column k is mapped onto a multiple of e_k by the reflector
    I - 2 v v^T, with the sign of the target chosen opposite to the
    leading entry. Columns with nothing below the diagonal are left
    alone.

    Args:
        A: Matrix (m, n) with m >= n

    Returns:
        Q: Orthogonal matrix (m, m)
        R: Upper-triangular matrix (m, n), with Q @ R = A
    """
    R = check_matrix(A, "A")
    m, n = R.shape
    if m < n:
        raise DimensionError(f"A: expected rows >= columns, got shape {R.shape}")

    Qt = np.eye(m)
    for k in range(n):
        z = R[k:, k]
        if not np.any(z[1:]):
            continue
        alpha = -np.copysign(np.linalg.norm(z), z[0])
        w = z.copy()
        w[0] -= alpha
        v = w / np.linalg.norm(w)

        R[k:, k:] -= 2.0 * np.outer(v, v @ R[k:, k:])
        Qt[k:, :] -= 2.0 * np.outer(v, v @ Qt[k:, :])

    return Qt.T, np.triu(R)


def lsqrfact(A: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Solve the linear least-squares problem min ||Ax - b|| by QR.

    Args:
        A: Matrix (m, n) with m >= n and full column rank
        b: Right-hand side (m,)

    Returns:
        Minimizer x (n,)
    """
    A = check_matrix(A, "A")
    m, n = A.shape
    b = check_vector(b, m, "b")

    Q, R = qrfact(A)
    c = Q.T @ b
    return backsub(R[:n, :n], c[:n])


def lsnormal(A: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Solve the linear least-squares problem by the normal equations.

    Forms A^T A x = A^T b and solves it with a Cholesky factor. Squares
    the condition number; prefer lsqrfact for ill-conditioned A.

    Raises:
        NotPositiveDefiniteError: If A^T A has no Cholesky factor
    """
    A = check_matrix(A, "A")
    b = check_vector(b, A.shape[0], "b")

    N = A.T @ A
    z = A.T @ b
    try:
        R = scipy.linalg.cholesky(N, lower=False)
    except np.linalg.LinAlgError as e:
        raise NotPositiveDefiniteError(
            f"A^T A: not positive definite, A is rank deficient ({e})",
            matrix_name="A^T A",
        ) from e

    w = forwardsub(R.T, z)
    return backsub(R, w)
