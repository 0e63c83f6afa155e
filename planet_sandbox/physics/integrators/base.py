"""Abstract base class for fixed-step integrators."""

from abc import ABC, abstractmethod
from typing import Tuple


class Integrator(ABC):
    """Abstract interface for fixed-step integrators."""

    @abstractmethod
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        """Advance every body by one step of size dt.

        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            accelerations: (n, 2) accelerations at the current positions
            dt: Time step

        Returns:
            Tuple of (new_positions, new_velocities); inputs are not modified
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
