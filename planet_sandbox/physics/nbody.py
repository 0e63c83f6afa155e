"""Force/integration engine for the gravity sandbox."""

from typing import Optional, Tuple
import numpy as np
from planet_sandbox.physics.body_store import BodyStore
from planet_sandbox.physics.force_calculator import ForceCalculator
from planet_sandbox.physics.integrators.base import Integrator
from planet_sandbox.physics.integrators.euler import SymplecticEulerIntegrator
from planet_sandbox.utils.config import SimulationConfig


class NBodySystem:
    """N-body gravitational engine.

    Runs one fixed step of size ``config.stepsize``: pairwise accelerations for
    all bodies, velocity update for all bodies, then position update for all
    bodies. The same ``advance`` drives both the live store and the
    trajectory predictor.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, integrator: Optional[Integrator] = None):
        """Initialize engine.

        Args:
            config: Simulation configuration (G, stepsize, min_separation)
            integrator: Fixed-step integrator (default: symplectic Euler)
        """
        self.config = config if config is not None else SimulationConfig()
        self.integrator = integrator if integrator is not None else SymplecticEulerIntegrator()
        self.force_calculator = ForceCalculator(self.config.G, self.config.min_separation)

    @property
    def stepsize(self) -> float:
        return self.config.stepsize

    def compute_accelerations(self, positions, masses) -> np.ndarray:
        return self.force_calculator.compute_accelerations(positions, masses)

    def advance(self, positions, velocities, masses) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Advance detached arrays by one step.

        Inputs are never modified.

        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            masses: (n,) masses

        Returns:
            Tuple of (new_positions, new_velocities, accelerations)
        """
        accelerations = self.compute_accelerations(positions, masses)
        new_positions, new_velocities = self.integrator.step(
            positions, velocities, accelerations, self.config.stepsize
        )
        return new_positions, new_velocities, accelerations

    def step(self, store: BodyStore) -> np.ndarray:
        """Advance the live store in place by one step.

        Returns:
            (n, 2) accelerations used for the step
        """
        if len(store) == 0:
            return np.zeros((0, 2))
        positions, velocities, accelerations = self.advance(
            store.positions(), store.velocities(), store.masses()
        )
        store.apply_step(positions, velocities, accelerations)
        return accelerations
