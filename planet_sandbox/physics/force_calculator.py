"""Pairwise gravitational acceleration with a guarded singularity.

Each unordered pair (i, j) is visited exactly once: the force is computed once
and applied with opposite signs to both bodies (Newton's third law).
"""

import warnings
from typing import Tuple
import numpy as np


class DegenerateGeometryWarning(RuntimeWarning):
    """Two bodies share a position, so the pair has no force direction."""


class ForceCalculator:
    """Symmetric pairwise force accumulation.

    Separations below ``min_separation`` are clamped to it for the force
    magnitude. Coincident pairs (zero separation) contribute nothing and emit
    a DegenerateGeometryWarning instead of propagating NaN.
    """

    def __init__(self, G: float, min_separation: float = 1.0):
        if min_separation <= 0:
            raise ValueError(f"min_separation must be positive, got {min_separation}")
        self.G = G
        self.min_separation = min_separation

    def compute_accelerations(self, positions, masses) -> np.ndarray:
        """Compute the total gravitational acceleration on every body.

        Args:
            positions: (n, 2) array of positions
            masses: (n,) array of masses (must be positive)

        Returns:
            (n, 2) accelerations
        """
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        n = masses.shape[0]
        accelerations = np.zeros((n, 2), dtype=np.float64)
        if n < 2:
            return accelerations

        i, j, force = self._pair_forces(positions, masses)

        # acceleration differs based on mass
        np.add.at(accelerations, i, force / masses[i][:, np.newaxis])
        np.add.at(accelerations, j, -force / masses[j][:, np.newaxis])
        return accelerations

    def force_matrix(self, positions, masses) -> np.ndarray:
        """Return the (n, n, 2) matrix F where F[i, j] is the force of j on i."""
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        n = masses.shape[0]
        forces = np.zeros((n, n, 2), dtype=np.float64)
        if n < 2:
            return forces
        i, j, force = self._pair_forces(positions, masses)
        forces[i, j] = force
        forces[j, i] = -force
        return forces

    def _pair_forces(self, positions, masses: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Force on i from j for every pair i < j."""
        if np.any(masses <= 0.0) or not np.all(np.isfinite(masses)):
            raise ValueError("All masses must be positive and finite")
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        i, j = np.triu_indices(masses.shape[0], k=1)

        # r_ij = r_j - r_i
        r_vec = positions[j] - positions[i]
        r_sq = np.sum(r_vec ** 2, axis=1)

        coincident = r_sq == 0.0
        if np.any(coincident):
            warnings.warn(
                f"{int(np.count_nonzero(coincident))} body pair(s) share a position; "
                "their mutual force is skipped",
                DegenerateGeometryWarning,
                stacklevel=3,
            )

        distance = np.sqrt(np.where(coincident, 1.0, r_sq))
        direction = r_vec / distance[:, np.newaxis]
        direction[coincident] = 0.0

        r_sq_clamped = np.maximum(r_sq, self.min_separation ** 2)
        force = direction * (self.G * masses[i] * masses[j] / r_sq_clamped)[:, np.newaxis]
        return i, j, force
