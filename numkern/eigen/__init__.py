"""Iterative eigenvalue methods."""

from numkern.eigen.power import poweriter, inviter

__all__ = [
    "poweriter",
    "inviter",
]
