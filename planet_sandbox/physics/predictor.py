"""Look-ahead trajectory prediction on detached snapshots."""

import warnings
from typing import Dict, Optional, Tuple
import numpy as np
from planet_sandbox.physics.body_store import BodySnapshot
from planet_sandbox.physics.force_calculator import DegenerateGeometryWarning
from planet_sandbox.physics.nbody import NBodySystem
from planet_sandbox.utils.config import SimulationConfig


class TrajectoryPredictor:
    """Simulate future paths without touching live state.

    Runs the engine's own ``advance`` on private copies of a BodySnapshot for
    ``config.prediction_steps`` steps and records every body's position after
    each step.

    Results are memoised on the snapshot fingerprint: while neither the bodies
    nor the staged velocities change, repeated per-frame queries reuse the last
    result. Pass ``cache=False`` to recompute on every call.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        system: Optional[NBodySystem] = None,
        cache: bool = True
    ):
        self.config = config if config is not None else SimulationConfig()
        self.system = system if system is not None else NBodySystem(self.config)
        self.cache = cache
        self._cache_key: Optional[Tuple] = None
        self._cache_value: Optional[Dict[str, np.ndarray]] = None
        self.compute_count = 0

    def invalidate(self):
        """Drop the memoised result."""
        self._cache_key = None
        self._cache_value = None

    def predict(self, snapshot: BodySnapshot, steps: Optional[int] = None) -> Dict[str, np.ndarray]:
        """Predict future positions for every body in the snapshot.

        Args:
            snapshot: Detached body state (velocities already include staged values)
            steps: Number of steps (default: config.prediction_steps)

        Returns:
            Mapping body name -> read-only (steps, 2) array of positions
        """
        steps = self.config.prediction_steps if steps is None else int(steps)
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")

        key = (
            snapshot.fingerprint(), steps, self.config.stepsize,
            self.config.G, self.config.min_separation, self.system.integrator.name,
        )
        if self.cache and key == self._cache_key:
            return dict(self._cache_value)

        paths = self._simulate(snapshot, steps)
        self.compute_count += 1
        if self.cache:
            self._cache_key = key
            self._cache_value = paths
        return dict(paths)

    def _simulate(self, snapshot: BodySnapshot, steps: int) -> Dict[str, np.ndarray]:
        n = len(snapshot)
        if n == 0:
            return {}

        positions = np.array(snapshot.positions, dtype=np.float64)
        velocities = np.array(snapshot.velocities, dtype=np.float64)
        masses = np.array(snapshot.masses, dtype=np.float64)
        points = np.empty((steps, n, 2), dtype=np.float64)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DegenerateGeometryWarning)
            for k in range(steps):
                positions, velocities, _ = self.system.advance(positions, velocities, masses)
                points[k] = positions

        degenerate_steps = 0
        for w in caught:
            if issubclass(w.category, DegenerateGeometryWarning):
                degenerate_steps += 1
            else:
                warnings.warn(w.message, w.category, stacklevel=2)
        if degenerate_steps:
            warnings.warn(
                f"Coincident bodies in {degenerate_steps} of {steps} predicted steps; "
                "their mutual force was skipped",
                DegenerateGeometryWarning,
                stacklevel=3,
            )

        paths = {}
        for idx, name in enumerate(snapshot.names):
            path = np.ascontiguousarray(points[:, idx, :])
            path.flags.writeable = False
            paths[name] = path
        return paths
