"""GMRES: minimal residual over a Krylov subspace."""

import logging
from typing import Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.algebra.operators import (
    LinearOperator,
    aslinearoperator,
    check_square_operator,
)
from numkern.core.tolerances import BREAKDOWN_RTOL
from numkern.core.validation import check_positive_int, check_vector
from numkern.factorization.qr import lsqrfact
from numkern.krylov.arnoldi import ArnoldiProcess

logger = logging.getLogger(__name__)


def gmres(
    A: Union[ArrayLike, LinearOperator],
    b: ArrayLike,
    m: int,
    breakdown_tol: float = BREAKDOWN_RTOL,
) -> tuple[NDArray, NDArray]:
    """
    Approximate the solution of Ax = b with m steps of GMRES.

    Step j minimizes ||beta e1 - H_j y|| for the Hessenberg matrix of
    the first j Arnoldi steps from b, and sets x_j = Q_j y. No restarts:
    if the solution needs a larger Krylov space, x is just the best
    approximation in the one built.

    Args:
        A: Square matrix or operator (n, n)
        b: Right-hand side (n,)
        m: Krylov dimension; clamped to n
        breakdown_tol: See ArnoldiProcess

    Returns:
        x: Approximate solution after the last step (n,)
        residuals: ||b - A x_j|| for j = 0, 1, ..., with residuals[0] = ||b||.
            Length m+1, or shorter if Arnoldi broke down (x is then exact).
    """
    op = aslinearoperator(A)
    n = check_square_operator(op)
    m = check_positive_int(m, "m")
    b = check_vector(b, n, "b")

    beta = float(np.linalg.norm(b))
    if beta == 0.0:
        return np.zeros(n), np.array([0.0])

    process = ArnoldiProcess(op, b, m, breakdown_tol=breakdown_tol)
    residuals = [beta]
    x = np.zeros(n)

    while not process.done:
        process.step()
        Q, H = process.basis()
        j = process.steps

        rhs = np.zeros(H.shape[0])
        rhs[0] = beta
        y = lsqrfact(H, rhs)
        x = Q[:, :j] @ y

        residuals.append(float(np.linalg.norm(b - op @ x)))
        logger.debug("gmres: step %d, residual %.3e", j, residuals[-1])

    return x, np.array(residuals)
