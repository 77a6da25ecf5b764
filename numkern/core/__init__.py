"""Core exceptions, validation and tolerances."""

from numkern.core.exceptions import (
    NumkernError,
    ValidationError,
    DimensionError,
    NumericalError,
    NotPositiveDefiniteError,
)
from numkern.core.tolerances import (
    ToleranceTier,
    FACTORIZATION,
    ITERATIVE,
    BREAKDOWN_RTOL,
    DEFAULT_SEED,
)

__all__ = [
    "NumkernError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "NotPositiveDefiniteError",
    "ToleranceTier",
    "FACTORIZATION",
    "ITERATIVE",
    "BREAKDOWN_RTOL",
    "DEFAULT_SEED",
]
