"""Backend built on numkern's own factorization and substitution kernels."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

from numkern.algebra.triangular import TriangularMatrix
from numkern.core.exceptions import ValidationError
from numkern.core.validation import check_square, check_vector
from numkern.factorization.lu import plufact

PLUFactors = Tuple[TriangularMatrix, TriangularMatrix, NDArray[np.intp]]


class KernelBackend:
    """LinearAlgebraBackend implemented with plufact, forwardsub and backsub."""

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """Solve linear system Ax = b by pivoted LU."""
        return self.lu_solve(self.lu_factor(A), b)

    def lu_factor(self, A: NDArray) -> PLUFactors:
        """
        Compute the pivoted LU factorization.

        Returns:
            (L, U, p) from plufact
        """
        return plufact(check_square(A, "A"))

    def lu_solve(
        self,
        factorization: PLUFactors,
        b: NDArray,
        trans: int = 0,
    ) -> NDArray:
        """
        Solve using precomputed (L, U, p).

        With A[p, :] = LU, Ax = b becomes LUx = b[p]. For the transpose,
        A^T x = b becomes U^T L^T (x[p]) = b.

        Args:
            factorization: (L, U, p) from lu_factor
            b: Right-hand side
            trans: 0 for Ax=b, 1 for A^T x=b

        Returns:
            Solution x
        """
        L, U, p = factorization
        b = check_vector(b, L.shape[0], "b")

        if trans == 0:
            return U.solve(L.solve(b[p]))

        if trans != 1:
            raise ValidationError(f"trans: expected 0 or 1, got {trans}")

        z = L.T.solve(U.T.solve(b))
        x = np.empty_like(z)
        x[p] = z
        return x

    def norm(self, x: NDArray) -> float:
        """Compute L2 norm."""
        return float(np.sqrt(x @ x))
