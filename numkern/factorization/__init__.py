"""Dense factorizations: LU, pivoted LU, QR and least squares."""

from numkern.factorization.lu import lufact, plufact, lusolve, plusolve
from numkern.factorization.qr import qrfact, lsqrfact, lsnormal
from numkern.factorization.backend import KernelBackend

__all__ = [
    "lufact",
    "plufact",
    "lusolve",
    "plusolve",
    "qrfact",
    "lsqrfact",
    "lsnormal",
    "KernelBackend",
]
