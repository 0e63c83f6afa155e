"""Body store: owner of the live planet state."""

import hashlib
import warnings
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple
import numpy as np

from planet_sandbox.physics.body import Body
from planet_sandbox.utils.config import SimulationConfig


@dataclass(frozen=True)
class BodySnapshot:
    """Immutable, detached copy of the kinematic state of all bodies.

    Arrays are private copies flagged read-only, so a snapshot can never alias
    or mutate the live store.
    """
    names: Tuple[str, ...]
    positions: np.ndarray  # (n, 2)
    velocities: np.ndarray  # (n, 2)
    masses: np.ndarray  # (n,)

    @classmethod
    def from_arrays(cls, names, positions, velocities, masses) -> "BodySnapshot":
        positions = np.array(positions, dtype=np.float64).reshape(-1, 2)
        velocities = np.array(velocities, dtype=np.float64).reshape(-1, 2)
        masses = np.array(masses, dtype=np.float64).reshape(-1)
        for arr in (positions, velocities, masses):
            arr.flags.writeable = False
        return cls(tuple(names), positions, velocities, masses)

    def __len__(self) -> int:
        return len(self.names)

    def fingerprint(self) -> str:
        """Digest of the snapshot contents (names and raw array bytes)."""
        digest = hashlib.sha1()
        digest.update("\0".join(self.names).encode("utf-8"))
        for arr in (self.positions, self.velocities, self.masses):
            digest.update(np.ascontiguousarray(arr).tobytes())
        return digest.hexdigest()


class BodyStore:
    """Insertion-ordered collection of bodies keyed by name.

    Bodies are only ever added. Names come from a monotonically increasing
    spawn counter and are never reused.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config if config is not None else SimulationConfig()
        self._bodies: Dict[str, Body] = {}
        self.spawn_count = 0

    def spawn(self, position) -> str:
        """Create a body at rest with default gravity and radius.

        Args:
            position: 2- or 3-component position

        Returns:
            Name of the new body
        """
        position = _finite_vector("position", position)
        self.spawn_count += 1
        name = f"Planet {self.spawn_count}"
        self._bodies[name] = Body(
            name=name,
            position=position,
            gravity=self.config.default_gravity,
            radius=self.config.default_radius,
        )
        return name

    def get(self, name: str) -> Body:
        try:
            return self._bodies[name]
        except KeyError:
            raise KeyError(f"Unknown body: {name!r}") from None

    @property
    def names(self) -> List[str]:
        return list(self._bodies)

    @property
    def count(self) -> int:
        return len(self._bodies)

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies.values())

    def __contains__(self, name) -> bool:
        return name in self._bodies

    def set_staged_velocity(self, name: str, vx: Optional[float] = None, vy: Optional[float] = None):
        """Set one or both components of a body's staged velocity."""
        body = self.get(name)
        for axis, value in ((0, vx), (1, vy)):
            if value is None:
                continue
            value = float(value)
            if not np.isfinite(value):
                raise ValueError(f"Staged velocity must be finite, got {value}")
            body.staged_velocity[axis] = value

    def set_gravity(self, name: str, value: float):
        """Set gravity; non-positive values are rejected, large ones clamped."""
        self.get(name).gravity = _checked_parameter("gravity", value, self.config.max_gravity)

    def set_radius(self, name: str, value: float):
        """Set radius; non-positive values are rejected, large ones clamped."""
        self.get(name).radius = _checked_parameter("radius", value, self.config.max_radius)

    def set_position(self, name: str, position):
        body = self.get(name)
        position = _finite_vector("position", position)[:3]
        body.position[:position.shape[0]] = position

    def set_velocity(self, name: str, velocity):
        self.get(name).velocity[:] = _finite_vector("velocity", velocity).reshape(2)

    def masses(self) -> np.ndarray:
        G = self.config.G
        return np.array([body.mass(G) for body in self], dtype=np.float64)

    def positions(self) -> np.ndarray:
        return np.array([body.xy for body in self], dtype=np.float64).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        return np.array([body.velocity for body in self], dtype=np.float64).reshape(-1, 2)

    def staged_velocities(self) -> np.ndarray:
        return np.array([body.staged_velocity for body in self], dtype=np.float64).reshape(-1, 2)

    def apply_step(self, positions, velocities, accelerations):
        """Write back one integration step (x, y only; z is preserved)."""
        if len(positions) != len(self) or len(velocities) != len(self) or len(accelerations) != len(self):
            raise ValueError(
                f"Step arrays do not match body count {len(self)}: "
                f"{len(positions)}, {len(velocities)}, {len(accelerations)}"
            )
        for i, body in enumerate(self):
            body.position[:2] = positions[i]
            body.velocity[:] = velocities[i]
            body.acceleration[:] = accelerations[i]

    def commit_staged_velocities(self) -> int:
        """Add each staged velocity to its body's velocity and zero it.

        Returns:
            Number of bodies that had a non-zero staged velocity
        """
        committed = 0
        for body in self:
            if np.any(body.staged_velocity != 0.0):
                committed += 1
            body.velocity += body.staged_velocity
            body.staged_velocity[:] = 0.0
        return committed

    def snapshot(self, include_staged: bool = True) -> BodySnapshot:
        """Detached copy of kinematic state.

        Args:
            include_staged: Add staged velocity to each body's velocity, so a
                preview shows the effect of pending edits
        """
        velocities = self.velocities()
        if include_staged:
            velocities = velocities + self.staged_velocities()
        return BodySnapshot.from_arrays(self.names, self.positions(), velocities, self.masses())

    def telemetry(self) -> List[dict]:
        """Per-body values for display; all arrays are copies."""
        G = self.config.G
        return [
            {
                "name": body.name,
                "position": body.position.copy(),
                "velocity": body.velocity.copy(),
                "acceleration": body.acceleration.copy(),
                "staged_velocity": body.staged_velocity.copy(),
                "gravity": body.gravity,
                "radius": body.radius,
                "mass": body.mass(G),
            }
            for body in self
        ]


def _checked_parameter(label: str, value: float, upper: float) -> float:
    value = float(value)
    if not np.isfinite(value) or value <= 0.0:
        raise ValueError(f"{label} must be positive and finite, got {value}")
    if value > upper:
        warnings.warn(f"{label} {value} exceeds {upper}; clamped", UserWarning, stacklevel=3)
        value = upper
    return value


def _finite_vector(label: str, values) -> np.ndarray:
    values = np.asarray(values, dtype=np.float64).flatten()
    if not np.all(np.isfinite(values)):
        raise ValueError(f"{label} must be finite, got {values.tolist()}")
    return values
