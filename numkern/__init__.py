"""
numkern: dense numerical linear algebra kernels written from scratch.

This library provides:
- Forward and back substitution on typed triangular factors
- LU factorization, with and without partial pivoting
- Householder QR and linear least squares
- Power iteration and shifted inverse iteration
- Arnoldi iteration and GMRES

All kernels work on dense, real, in-memory arrays and return fresh
arrays; caller data is never modified.
"""

import logging

__version__ = "0.1.0"

from numkern.algebra.triangular import (
    Triangle,
    TriangularMatrix,
    forwardsub,
    backsub,
)
from numkern.algebra.operators import LinearOperator, aslinearoperator
from numkern.algebra.dense import DenseBackend
from numkern.factorization import (
    lufact,
    plufact,
    lusolve,
    plusolve,
    qrfact,
    lsqrfact,
    lsnormal,
    KernelBackend,
)
from numkern.eigen import poweriter, inviter
from numkern.krylov import ArnoldiProcess, arnoldi, gmres
from numkern.core.exceptions import (
    NumkernError,
    ValidationError,
    DimensionError,
    NumericalError,
    NotPositiveDefiniteError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Triangle",
    "TriangularMatrix",
    "forwardsub",
    "backsub",
    "LinearOperator",
    "aslinearoperator",
    "DenseBackend",
    "KernelBackend",
    "lufact",
    "plufact",
    "lusolve",
    "plusolve",
    "qrfact",
    "lsqrfact",
    "lsnormal",
    "poweriter",
    "inviter",
    "ArnoldiProcess",
    "arnoldi",
    "gmres",
    "NumkernError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "NotPositiveDefiniteError",
]
