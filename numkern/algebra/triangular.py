"""Triangular factors and forward/back substitution."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkern.core.validation import check_square, check_vector


class Triangle(Enum):
    """Which side of the diagonal a triangular factor occupies."""
    LOWER = auto()
    UPPER = auto()


def forwardsub(L: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Solve the lower-triangular system Lx = b, top to bottom.

    Only the lower triangle of L is read. A zero diagonal entry is not
    trapped and produces Inf/NaN in x.

    Args:
        L: Lower-triangular matrix (n, n)
        b: Right-hand side (n,)

    Returns:
        Solution x (n,)
    """
    L = check_square(L, "L")
    n = L.shape[0]
    b = check_vector(b, n, "b")

    x = np.zeros(n)
    for i in range(n):
        s = L[i, :i] @ x[:i]
        x[i] = (b[i] - s) / L[i, i]
    return x


def backsub(U: ArrayLike, b: ArrayLike) -> NDArray:
    """
    Solve the upper-triangular system Ux = b, bottom to top.

    Args:
        U: Upper-triangular matrix (n, n)
        b: Right-hand side (n,)

    Returns:
        Solution x (n,)
    """
    U = check_square(U, "U")
    n = U.shape[0]
    b = check_vector(b, n, "b")

    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        s = U[i, i + 1:] @ x[i + 1:]
        x[i] = (b[i] - s) / U[i, i]
    return x


_SUBSTITUTION: dict[Triangle, Callable[[ArrayLike, ArrayLike], NDArray]] = {
    Triangle.LOWER: forwardsub,
    Triangle.UPPER: backsub,
}


@dataclass(frozen=True)
class TriangularMatrix:
    """
    Dense square matrix tagged as lower or upper triangular.

    The wrong side of the diagonal is zeroed at construction, so the
    structure holds exactly rather than to rounding.
    """

    data: NDArray
    kind: Triangle

    def __post_init__(self) -> None:
        data = check_square(self.data, "data")
        if self.kind == Triangle.LOWER:
            data = np.tril(data)
        else:
            data = np.triu(data)
        object.__setattr__(self, "data", data)

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape

    @property
    def T(self) -> "TriangularMatrix":
        """Transpose, tagged with the opposite triangle."""
        kind = Triangle.UPPER if self.kind == Triangle.LOWER else Triangle.LOWER
        return TriangularMatrix(self.data.T, kind)

    def solve(self, b: ArrayLike) -> NDArray:
        """Solve self @ x = b with the substitution matching `kind`."""
        return _SUBSTITUTION[self.kind](self.data, b)

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray:
        if dtype is None:
            return self.data.copy()
        return self.data.astype(dtype)

    def __matmul__(self, other: Any) -> NDArray:
        return self.data @ np.asarray(other)

    def __rmatmul__(self, other: Any) -> NDArray:
        return np.asarray(other) @ self.data


def lower(A: ArrayLike) -> TriangularMatrix:
    """Lower-triangular factor built from the lower triangle of A."""
    return TriangularMatrix(np.asarray(A), Triangle.LOWER)


def upper(A: ArrayLike) -> TriangularMatrix:
    """Upper-triangular factor built from the upper triangle of A."""
    return TriangularMatrix(np.asarray(A), Triangle.UPPER)
