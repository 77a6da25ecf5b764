"""Triangular factors, operators and linear algebra backends."""

from numkern.algebra.triangular import (
    Triangle,
    TriangularMatrix,
    forwardsub,
    backsub,
    lower,
    upper,
)
from numkern.algebra.operators import LinearOperator, aslinearoperator
from numkern.algebra.protocols import LinearAlgebraBackend
from numkern.algebra.dense import DenseBackend

__all__ = [
    "Triangle",
    "TriangularMatrix",
    "forwardsub",
    "backsub",
    "lower",
    "upper",
    "LinearOperator",
    "aslinearoperator",
    "LinearAlgebraBackend",
    "DenseBackend",
]
