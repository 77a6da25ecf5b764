"""
Exception hierarchy for numkern.

All exceptions inherit from NumkernError so callers can catch any
library-specific error in one place.

Only precondition violations are raised. Zero pivots and singular shifts
are not detected; they surface as Inf/NaN in the returned arrays.
"""


class NumkernError(Exception):
    """Base exception for all numkern errors."""
    pass


class ValidationError(NumkernError):
    """
    Input validation failed.

    Raised when user-provided inputs are not numeric, empty, or otherwise
    unusable by a kernel.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square, a vector is not 1-D, or a vector
    length does not match the matrix it is paired with.
    """
    pass


class NumericalError(NumkernError):
    """Numerical computation failed in a way the kernel can detect."""
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by the normal-equations least-squares solver when A^T A has
    no Cholesky factor (A is rank deficient).

    Attributes:
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(self, message: str, matrix_name: str | None = None):
        super().__init__(message)
        self.matrix_name = matrix_name
