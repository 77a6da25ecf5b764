"""Dense reference backend using NumPy/SciPy."""

from typing import Tuple
import numpy as np
import scipy.linalg
from numpy.typing import NDArray

from numkern.core.validation import check_square, check_vector


class DenseBackend:
    """
    LAPACK-backed implementation of LinearAlgebraBackend.

    Serves as the independent reference the from-scratch kernels are
    checked against.
    """

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """Solve linear system Ax = b using direct solve."""
        A = check_square(A, "A")
        b = check_vector(b, A.shape[0], "b")
        return scipy.linalg.solve(A, b)

    def lu_factor(self, A: NDArray) -> Tuple[NDArray, NDArray]:
        """
        Compute LU factorization using scipy.

        Returns:
            (lu, piv) tuple from scipy.linalg.lu_factor
        """
        A = check_square(A, "A")
        return scipy.linalg.lu_factor(A, check_finite=False)

    def lu_solve(
        self,
        factorization: Tuple[NDArray, NDArray],
        b: NDArray,
        trans: int = 0,
    ) -> NDArray:
        """
        Solve using precomputed LU factorization.

        Args:
            factorization: (lu, piv) from lu_factor
            b: Right-hand side
            trans: 0 for Ax=b, 1 for A^T x=b

        Returns:
            Solution x
        """
        b = check_vector(b, factorization[0].shape[0], "b")
        return scipy.linalg.lu_solve(
            factorization, b, trans=trans, check_finite=False
        )

    def norm(self, x: NDArray) -> float:
        """Compute L2 norm."""
        return float(np.linalg.norm(x))
