"""Power iteration and shifted inverse iteration."""

import logging
from typing import Optional, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.algebra.operators import (
    LinearOperator,
    aslinearoperator,
    check_square_operator,
)
from numkern.algebra.protocols import LinearAlgebraBackend
from numkern.core.exceptions import ValidationError
from numkern.core.tolerances import DEFAULT_SEED
from numkern.core.validation import (
    check_positive_int,
    check_square,
    check_vector,
)
from numkern.factorization.backend import KernelBackend

logger = logging.getLogger(__name__)


def poweriter(
    A: Union[ArrayLike, LinearOperator],
    numiter: int,
    x0: Optional[ArrayLike] = None,
    seed: int = DEFAULT_SEED,
) -> tuple[NDArray, NDArray]:
    """
    Power iteration for the dominant eigenvalue.

    Each step multiplies by A and rescales so the largest-magnitude entry
    is 1. Converges linearly at rate |λ2/λ1|; no convergence when the
    dominant eigenvalue is not unique in magnitude.

    Args:
        A: Square matrix or operator (n, n)
        numiter: Number of iterations
        x0: Start vector (n,); random normal if not given
        seed: Seed for the random start vector

    Returns:
        estimates: Eigenvalue estimate after each iteration (numiter,)
        x: Final eigenvector estimate, infinity-normalized (n,)
    """
    op = aslinearoperator(A)
    n = check_square_operator(op)
    numiter = check_positive_int(numiter, "numiter")
    x = _start_vector(n, x0, seed)

    estimates = np.zeros(numiter)
    for k in range(numiter):
        y = op @ x
        m = int(np.argmax(np.abs(y)))
        estimates[k] = y[m] / x[m]
        x = y / y[m]

    logger.debug(
        "poweriter: %d iterations, final estimate %.16g",
        numiter, estimates[-1],
    )
    return estimates, x


def inviter(
    A: ArrayLike,
    shift: float,
    numiter: int,
    x0: Optional[ArrayLike] = None,
    seed: int = DEFAULT_SEED,
    backend: Optional[LinearAlgebraBackend] = None,
) -> tuple[NDArray, NDArray]:
    """
    Shifted inverse iteration for the eigenvalue nearest `shift`.

    Power iteration on (A - shift I)^{-1}, applied through one LU
    factorization and a triangular solve pair per step. A shift equal to
    an eigenvalue is not trapped and yields Inf/NaN.

    Args:
        A: Square matrix (n, n)
        shift: Target value for the eigenvalue
        numiter: Number of iterations
        x0: Start vector (n,); random normal if not given
        seed: Seed for the random start vector
        backend: Factor-and-solve backend (KernelBackend by default)

    Returns:
        estimates: Eigenvalue estimate after each iteration (numiter,)
        x: Final eigenvector estimate, infinity-normalized (n,)
    """
    A = check_square(A, "A")
    n = A.shape[0]
    numiter = check_positive_int(numiter, "numiter")
    if backend is None:
        backend = KernelBackend()
    x = _start_vector(n, x0, seed)

    factorization = backend.lu_factor(A - shift * np.eye(n))

    estimates = np.zeros(numiter)
    for k in range(numiter):
        y = backend.lu_solve(factorization, x)
        m = int(np.argmax(np.abs(y)))
        estimates[k] = x[m] / y[m] + shift
        x = y / y[m]

    logger.debug(
        "inviter: shift %.16g, %d iterations, final estimate %.16g",
        shift, numiter, estimates[-1],
    )
    return estimates, x


def _start_vector(n: int, x0: Optional[ArrayLike], seed: int) -> NDArray:
    """Infinity-normalized start vector, random when x0 is None."""
    if x0 is None:
        x = np.random.default_rng(seed).standard_normal(n)
    else:
        x = check_vector(x0, n, "x0")
        if not np.any(x):
            raise ValidationError("x0: start vector must be nonzero")
    return x / np.max(np.abs(x))
