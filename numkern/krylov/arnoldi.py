"""Arnoldi iteration for an orthonormal Krylov basis."""

import logging
from typing import Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.algebra.operators import (
    LinearOperator,
    aslinearoperator,
    check_square_operator,
)
from numkern.core.exceptions import ValidationError
from numkern.core.tolerances import BREAKDOWN_RTOL
from numkern.core.validation import check_positive_int, check_vector

logger = logging.getLogger(__name__)


class ArnoldiProcess:
    """
    Incremental Arnoldi iteration with modified Gram-Schmidt.

    Holds pre-sized buffers Q (n, m+1) and H (m+1, m) and fills one
    column of each per call to `step`. After k steps without breakdown,
    A Q[:, :k] = Q[:, :k+1] H[:k+1, :k].

    Breakdown (the orthogonalized vector vanishes, or the basis already
    spans R^n) means the Krylov space is invariant under A. It ends the
    iteration successfully; `basis` then returns a square H with
    A Q = Q H.
    """

    def __init__(
        self,
        A: Union[ArrayLike, LinearOperator],
        u: ArrayLike,
        m: int,
        breakdown_tol: float = BREAKDOWN_RTOL,
    ):
        """
        Start the iteration from q1 = u / ||u||.

        Args:
            A: Square matrix or operator (n, n)
            u: Starting vector (n,), nonzero
            m: Maximum number of steps; clamped to n
            breakdown_tol: Relative size of the orthogonalized vector,
                against ||A q_k||, below which the iteration stops
        """
        self.op = aslinearoperator(A)
        n = check_square_operator(self.op)
        m = min(check_positive_int(m, "m"), n)
        u = check_vector(u, n, "u")

        beta = float(np.linalg.norm(u))
        if beta == 0.0:
            raise ValidationError("u: starting vector must be nonzero")

        self.n = n
        self.m = m
        self.beta = beta
        self.breakdown_tol = breakdown_tol
        self.Q = np.zeros((n, m + 1))
        self.H = np.zeros((m + 1, m))
        self.Q[:, 0] = u / beta
        self.steps = 0
        self.breakdown = False

    @property
    def done(self) -> bool:
        """True once m steps have run or the iteration broke down."""
        return self.breakdown or self.steps >= self.m

    def step(self) -> float:
        """
        Add one basis vector and one Hessenberg column.

        Returns:
            The new subdiagonal entry H[k+1, k] (0.0 on breakdown)
        """
        if self.done:
            raise RuntimeError(
                f"Arnoldi: no steps left (steps={self.steps}, m={self.m}, "
                f"breakdown={self.breakdown})"
            )

        k = self.steps
        Q, H = self.Q, self.H

        v = self.op @ Q[:, k]
        scale = float(np.linalg.norm(v))
        for i in range(k + 1):
            H[i, k] = Q[:, i] @ v
            v -= H[i, k] * Q[:, i]
        h = float(np.linalg.norm(v))
        self.steps += 1

        if h <= self.breakdown_tol * scale or self.steps == self.n:
            H[k + 1, k] = 0.0
            self.breakdown = True
            logger.debug(
                "arnoldi: invariant subspace of dimension %d "
                "(residual %.3e, |A q| %.3e)",
                self.steps, h, scale,
            )
        else:
            H[k + 1, k] = h
            Q[:, k + 1] = v / h

        return float(H[k + 1, k])

    def basis(self) -> tuple[NDArray, NDArray]:
        """
        Copy of the basis and Hessenberg matrix built so far.

        Returns:
            Q: (n, k+1) orthonormal columns, or (n, k) after breakdown
            H: (k+1, k) upper Hessenberg, or (k, k) after breakdown
        """
        k = self.steps
        if self.breakdown:
            return self.Q[:, :k].copy(), self.H[:k, :k].copy()
        return self.Q[:, :k + 1].copy(), self.H[:k + 1, :k].copy()


def arnoldi(
    A: Union[ArrayLike, LinearOperator],
    u: ArrayLike,
    m: int,
    breakdown_tol: float = BREAKDOWN_RTOL,
) -> tuple[NDArray, NDArray]:
    """
    Run up to m Arnoldi steps from u.

    Args:
        A: Square matrix or operator (n, n)
        u: Starting vector (n,)
        m: Number of steps
        breakdown_tol: See ArnoldiProcess

    Returns:
        Q: Orthonormal Krylov basis, (n, m+1) or (n, k) on breakdown
        H: Upper Hessenberg projection, (m+1, m) or (k, k) on breakdown,
           with A Q[:, :H.shape[1]] = Q H
    """
    process = ArnoldiProcess(A, u, m, breakdown_tol=breakdown_tol)
    while not process.done:
        process.step()
    return process.basis()
