"""Conservation diagnostics for the sandbox.

All functions take plain (n, 2) / (n,) arrays so they work on live store
arrays and on snapshots alike.
"""

import numpy as np


def total_momentum(velocities, masses) -> np.ndarray:
    """Total linear momentum: sum(m_i * v_i)."""
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    return np.sum(masses[:, np.newaxis] * velocities, axis=0)


def kinetic_energy(velocities, masses) -> float:
    """Total kinetic energy: 0.5 * sum(m_i * v_i^2)."""
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    v_sq = np.sum(velocities ** 2, axis=1)
    return float(0.5 * np.sum(masses * v_sq))


def potential_energy(positions, masses, G: float, min_separation: float = 1.0) -> float:
    """Pairwise potential energy, consistent with the clamped force law.

    U = -G * sum_{i<j} m_i * m_j / max(r_ij, min_separation)

    Coincident pairs contribute nothing, matching the force calculation.
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    n = masses.shape[0]
    if n < 2:
        return 0.0
    i, j = np.triu_indices(n, k=1)
    r = np.linalg.norm(positions[j] - positions[i], axis=1)
    active = r > 0.0
    r_clamped = np.maximum(r[active], min_separation)
    return float(-G * np.sum(masses[i][active] * masses[j][active] / r_clamped))


def angular_momentum(positions, velocities, masses) -> float:
    """Total angular momentum about the origin (z component).

    L_z = sum(m_i * (x_i * v_y_i - y_i * v_x_i))
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    return float(np.sum(masses * (positions[:, 0] * velocities[:, 1] -
                                  positions[:, 1] * velocities[:, 0])))


def center_of_mass(positions, masses) -> np.ndarray:
    """Mass-weighted mean position; the origin for an empty system."""
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    masses = np.asarray(masses, dtype=np.float64).reshape(-1)
    total_mass = np.sum(masses)
    if total_mass <= 0.0:
        return np.zeros(2)
    return np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
