"""Matrix-free operator wrappers."""

from typing import Callable, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.core.exceptions import DimensionError
from numkern.core.validation import check_matrix


class LinearOperator:
    """
    Matrix-free linear operator wrapper.

    Iterative kernels only need products A @ x, so they accept either a
    dense matrix or one of these.
    """

    def __init__(
        self,
        shape: tuple[int, int],
        matvec: Callable[[NDArray], NDArray],
        rmatvec: Callable[[NDArray], NDArray] | None = None,
    ):
        """
        Initialize linear operator.

        Args:
            shape: (m, n) dimensions
            matvec: Function computing A @ x
            rmatvec: Function computing A.T @ x (optional)
        """
        self.shape = (int(shape[0]), int(shape[1]))
        self._matvec = matvec
        self._rmatvec = rmatvec

    def matvec(self, x: NDArray) -> NDArray:
        """Compute A @ x."""
        if x.shape != (self.shape[1],):
            raise DimensionError(
                f"x: expected shape ({self.shape[1]},), got {x.shape}"
            )
        return np.array(self._matvec(x), dtype=float)

    def rmatvec(self, x: NDArray) -> NDArray:
        """Compute A.T @ x."""
        if self._rmatvec is None:
            raise NotImplementedError("Transpose operation not provided")
        return np.array(self._rmatvec(x), dtype=float)

    def __matmul__(self, x: NDArray) -> NDArray:
        """Support A @ x syntax."""
        return self.matvec(x)


def aslinearoperator(A: Union[ArrayLike, LinearOperator]) -> LinearOperator:
    """
    Wrap a dense matrix as a LinearOperator; operators pass through.

    The dense matrix is copied, so later changes by the caller do not leak
    into a running iteration.
    """
    if isinstance(A, LinearOperator):
        return A

    M = check_matrix(A, "A")
    return LinearOperator(M.shape, lambda x: M @ x, lambda x: M.T @ x)


def check_square_operator(op: LinearOperator, name: str = "A") -> int:
    """Return n for an (n, n) operator, raise DimensionError otherwise."""
    rows, cols = op.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square operator, got shape {op.shape}"
        )
    return rows
