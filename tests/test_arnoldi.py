"""Tests for the Arnoldi process."""

import logging

import numpy as np
import pytest

from numkern.core.exceptions import DimensionError, ValidationError
from numkern.krylov.arnoldi import ArnoldiProcess, arnoldi


def test_arnoldi_relation_full_dimension(eigen_problem):
    """A Q = Q H when the basis fills the whole space."""
    A, _ = eigen_problem

    Q, H = arnoldi(A, np.ones(4), 4)

    assert Q.shape == (4, 4)
    assert H.shape == (4, 4)
    assert np.allclose(A @ Q, Q @ H)


@pytest.mark.parametrize("m", [1, 2, 3, 4, 5, 6])
def test_arnoldi_relation_and_orthonormality(rng, m):
    """A Q[:, :k] = Q H and Q has orthonormal columns for every m <= n."""
    A = rng.standard_normal((6, 6))
    u = rng.standard_normal(6)

    Q, H = arnoldi(A, u, m)
    k = H.shape[1]

    assert k == m
    assert np.allclose(A @ Q[:, :k], Q @ H)
    assert np.allclose(Q.T @ Q, np.eye(Q.shape[1]), atol=1e-12)


def test_arnoldi_hessenberg_structure(rng):
    """Entries below the first subdiagonal are exactly zero."""
    A = rng.standard_normal((7, 7))

    _, H = arnoldi(A, rng.standard_normal(7), 5)

    assert H.shape == (6, 5)
    assert np.array_equal(np.tril(H, -2), np.zeros_like(H))


def test_arnoldi_first_vector_is_normalized_start(rng):
    """q1 is the start vector scaled to unit length."""
    A = rng.standard_normal((5, 5))
    u = np.array([3.0, 0.0, 4.0, 0.0, 0.0])

    Q, _ = arnoldi(A, u, 2)

    assert np.allclose(Q[:, 0], u / 5.0)


def test_arnoldi_breakdown_on_invariant_subspace(caplog):
    """A start vector in a 2-D invariant subspace stops after 2 steps."""
    A = np.diag([1.0, 2.0, 3.0, 4.0, 5.0])
    u = np.array([1.0, 1.0, 0.0, 0.0, 0.0])

    caplog.set_level(logging.DEBUG, logger="numkern")
    process = ArnoldiProcess(A, u, 4)
    while not process.done:
        process.step()
    Q, H = process.basis()

    assert process.breakdown
    assert process.steps == 2
    assert Q.shape == (5, 2)
    assert H.shape == (2, 2)
    assert np.allclose(A @ Q, Q @ H)
    assert np.allclose(np.sort(np.linalg.eigvals(H).real), [1.0, 2.0])
    assert "invariant subspace" in caplog.text


def test_arnoldi_step_after_done_raises():
    """Stepping past the end is an error."""
    process = ArnoldiProcess(np.eye(3) * 2.0, np.ones(3), 1)
    process.step()

    assert process.done
    with pytest.raises(RuntimeError):
        process.step()


def test_arnoldi_identity_breaks_down_immediately():
    """For A = I the Krylov space is one-dimensional."""
    Q, H = arnoldi(np.eye(3), np.array([1.0, 2.0, 2.0]), 3)

    assert Q.shape == (3, 1)
    assert np.allclose(H, [[1.0]])


def test_arnoldi_clamps_steps_to_dimension(rng):
    """Asking for more steps than n still gives a square basis."""
    A = rng.standard_normal((3, 3))

    Q, H = arnoldi(A, rng.standard_normal(3), 10)

    assert Q.shape == (3, 3)
    assert H.shape == (3, 3)
    assert np.allclose(Q.T @ Q, np.eye(3))


def test_arnoldi_validation():
    """Zero start vector and mismatched shapes fail fast."""
    A = np.eye(3)

    with pytest.raises(ValidationError):
        arnoldi(A, np.zeros(3), 2)
    with pytest.raises(DimensionError):
        arnoldi(A, np.ones(4), 2)
    with pytest.raises(ValidationError):
        arnoldi(A, np.ones(3), 0)
