"""Krylov subspace methods."""

from numkern.krylov.arnoldi import ArnoldiProcess, arnoldi
from numkern.krylov.gmres import gmres

__all__ = [
    "ArnoldiProcess",
    "arnoldi",
    "gmres",
]
