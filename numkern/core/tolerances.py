"""
Tolerance tiers and algorithm defaults.

Direct kernels (substitution, LU, QR) are expected to match a reference
solver to a small multiple of machine epsilon. Iterative kernels are
compared in relative terms after enough iterations to converge.
"""

from dataclasses import dataclass
import numpy as np


EPS = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FACTORIZATION = ToleranceTier(
    rtol=0.0,
    atol=100 * EPS,
    name='factorization',
    description='Direct factorization and substitution, 100 eps absolute',
)

ITERATIVE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='iterative',
    description='Converged eigenvalue and Krylov estimates',
)

# Arnoldi stops when the orthogonalized vector has lost this fraction
# of the norm of A q_k.
BREAKDOWN_RTOL = 1e-10

# Seed for the random start vector of power and inverse iteration.
DEFAULT_SEED = 0
