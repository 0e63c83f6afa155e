"""Body record for the gravity sandbox."""

from dataclasses import dataclass, field
import numpy as np
from planet_sandbox.constants import G as G_DEFAULT, DEFAULT_GRAVITY, DEFAULT_RADIUS


def _zeros2() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


@dataclass
class Body:
    """A single simulated planet.

    Mass is not stored: it is derived from the gravitational parameter and
    the radius, ``mass = gravity * radius**2 / G``.

    Attributes:
        name: Stable identity ("Planet 1", ...), never reused
        position: (3,) array; x, y are physical, z is a render layer
        velocity: (2,) current velocity
        staged_velocity: (2,) velocity delta applied once on resume
        acceleration: (2,) total acceleration from the last integration step
        gravity: Per-body gravitational strength
        radius: Radius (drives mass and display size)
    """
    name: str
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=_zeros2)
    staged_velocity: np.ndarray = field(default_factory=_zeros2)
    acceleration: np.ndarray = field(default_factory=_zeros2)
    gravity: float = DEFAULT_GRAVITY
    radius: float = DEFAULT_RADIUS

    def __post_init__(self):
        position = np.asarray(self.position, dtype=np.float64).flatten()
        if position.shape[0] == 2:
            position = np.append(position, 0.0)
        if position.shape[0] != 3:
            raise ValueError(f"Position must have 2 or 3 components, got {position.shape[0]}")
        self.position = position
        self.velocity = np.asarray(self.velocity, dtype=np.float64).reshape(2)
        self.staged_velocity = np.asarray(self.staged_velocity, dtype=np.float64).reshape(2)
        self.acceleration = np.asarray(self.acceleration, dtype=np.float64).reshape(2)

    def mass(self, G: float = G_DEFAULT) -> float:
        """Return mass derived from gravity and radius."""
        return self.gravity * self.radius ** 2 / G

    @property
    def xy(self) -> np.ndarray:
        """Physical (x, y) position."""
        return self.position[:2]
