"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple
import numpy as np
from planet_sandbox.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Two-phase Euler step.

    1. v_new = v + a*dt for every body
    2. r_new = r + v_new*dt for every body

    Positions always move with the fully updated velocity of the same step.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        new_velocities = np.asarray(velocities, dtype=np.float64) + np.asarray(accelerations) * dt
        new_positions = np.asarray(positions, dtype=np.float64) + new_velocities * dt
        return new_positions, new_velocities
