"""
Input validation utilities.

Validators fail fast: they raise with the parameter name and the actual
shape or value instead of truncating, padding, or guessing intent.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.core.exceptions import ValidationError, DimensionError


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert input to a floating point numpy array.

    Always returns a fresh array so kernels can work in place without
    touching caller data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        Floating point copy of the input

    Raises:
        ValidationError: If input is not numeric or is complex
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if not np.issubdtype(result.dtype, np.number) and result.dtype != bool:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex input is not supported")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray, ndim: int, name: str) -> None:
    """Verify array has exactly `ndim` dimensions."""
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D "
            f"with shape {array.shape}"
        )


def check_matrix(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate a non-empty 2-D matrix and return a float copy."""
    result = check_array(array, name)
    check_ndim(result, 2, name)
    if result.size == 0:
        raise ValidationError(f"{name}: empty matrix with shape {result.shape}")
    return result


def check_square(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a non-empty square matrix and return a float copy.

    Raises:
        DimensionError: If the matrix is not 2-D or not square
    """
    result = check_matrix(array, name)
    rows, cols = result.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {result.shape}"
        )
    return result


def check_vector(
    array: ArrayLike, length: int, name: str
) -> NDArray[np.floating[Any]]:
    """
    Validate a 1-D vector of the given length and return a float copy.

    Args:
        array: Input vector
        length: Required length (matching a matrix dimension)
        name: Parameter name for error messages

    Raises:
        DimensionError: If the vector is not 1-D or has the wrong length
    """
    result = check_array(array, name)
    check_ndim(result, 1, name)
    if result.shape[0] != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {result.shape[0]}"
        )
    return result


def check_positive_int(value: Any, name: str) -> int:
    """
    Validate a strictly positive integer count (iterations, Krylov steps).

    Raises:
        ValidationError: If value is not an integer or is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)
