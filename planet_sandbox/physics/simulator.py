"""Main simulator controller: pause/resume state machine and tick clock."""

import enum
import time
import warnings
from typing import Callable, Dict, Optional
import numpy as np
from planet_sandbox.physics.body_store import BodyStore
from planet_sandbox.physics.nbody import NBodySystem
from planet_sandbox.physics.integrators.base import Integrator
from planet_sandbox.physics.predictor import TrajectoryPredictor
from planet_sandbox.physics import diagnostics
from planet_sandbox.utils.config import SimulationConfig


class SimulationMode(enum.Enum):
    PAUSED = "paused"
    RUNNING = "running"


class Simulator:
    """Main simulation controller.

    Owns the body store, the integration engine and the trajectory predictor,
    and decides which of them runs:

    - PAUSED (initial): no integration; trajectories may be previewed.
    - RUNNING: one engine step per fixed tick; no preview.

    Entering RUNNING commits every staged velocity exactly once, before any
    tick of the new run.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        store: Optional[BodyStore] = None,
        integrator: Optional[Integrator] = None,
        cache_predictions: bool = True
    ):
        """Initialize simulator.

        Args:
            config: Simulation configuration (shared with store, engine, predictor)
            store: Existing body store sharing ``config`` (default: empty store)
            integrator: Fixed-step integrator (default: symplectic Euler)
            cache_predictions: Memoise trajectory predictions while inputs are unchanged
        """
        if config is None and store is not None:
            config = store.config
        self.config = config if config is not None else SimulationConfig()
        if store is not None and store.config is not self.config:
            raise ValueError("store must share the simulator's config")
        self.store = store if store is not None else BodyStore(self.config)
        self.system = NBodySystem(self.config, integrator)
        self.predictor = TrajectoryPredictor(self.config, self.system, cache=cache_predictions)

        self.mode = SimulationMode.PAUSED
        self.show_trajectories = self.config.show_trajectories
        self.time = 0.0
        self.step_count = 0
        self._accumulator = 0.0

        # Profiling: last timings (ms)
        self._last_step_ms: Optional[float] = None
        self._last_predict_ms: Optional[float] = None
        self._profile: bool = False

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.on_mode_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    @property
    def paused(self) -> bool:
        return self.mode is SimulationMode.PAUSED

    @property
    def running(self) -> bool:
        return self.mode is SimulationMode.RUNNING

    @property
    def speed(self) -> float:
        """Fixed-update rate in ticks per second."""
        return self.config.speed

    @property
    def stepsize(self) -> float:
        return self.config.stepsize

    @property
    def body_count(self) -> int:
        return self.store.count

    def set_profiling(self, enabled: bool = True):
        """Enable or disable timing of steps and predictions."""
        self._profile = enabled

    def get_timing(self) -> dict:
        """Return last timings in ms: step_ms, predict_ms."""
        return {
            "step_ms": self._last_step_ms,
            "predict_ms": self._last_predict_ms,
        }

    def resume(self) -> int:
        """Enter RUNNING, committing staged velocities.

        Calling resume while already running is a no-op.

        Returns:
            Number of bodies whose staged velocity was committed
        """
        if self.running:
            return 0
        committed = self.store.commit_staged_velocities()
        self._accumulator = 0.0
        self.mode = SimulationMode.RUNNING
        if self.on_mode_callback:
            self.on_mode_callback(self)
        return committed

    def pause(self):
        """Enter PAUSED. Body state is left untouched."""
        if self.paused:
            return
        self.mode = SimulationMode.PAUSED
        self._accumulator = 0.0
        if self.on_mode_callback:
            self.on_mode_callback(self)

    def toggle(self) -> SimulationMode:
        """Flip between PAUSED and RUNNING (the pause/resume key)."""
        if self.running:
            self.pause()
        else:
            self.resume()
        return self.mode

    def set_speed(self, speed: float) -> float:
        """Set the tick rate (Hz), clamped to the configured bounds.

        The per-tick stepsize is unaffected.

        Returns:
            The applied speed
        """
        self.config.speed = self.config.clamp_speed(speed)
        return self.config.speed

    def step(self):
        """Perform one fixed tick (no-op while paused)."""
        if self.paused:
            return

        if self._profile:
            t0 = time.perf_counter()
        self.system.step(self.store)
        if self._profile:
            self._last_step_ms = (time.perf_counter() - t0) * 1000.0

        self.time += self.config.stepsize
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_stability_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def run_steps(self, k: int) -> int:
        """Run up to k ticks; stops early if paused from a callback."""
        done = 0
        for _ in range(k):
            if self.paused:
                break
            self.step()
            done += 1
        return done

    def advance(self, elapsed: float) -> int:
        """Feed wall-clock time and run the ticks that fall due.

        At most ``config.max_ticks_per_advance`` ticks run per call; time
        beyond that is dropped so a slow frame cannot snowball.

        Args:
            elapsed: Seconds of wall time since the previous call

        Returns:
            Number of ticks run
        """
        if self.paused:
            self._accumulator = 0.0
            return 0
        self._accumulator += max(0.0, float(elapsed))
        speed = self.config.speed
        # tolerance absorbs float error in elapsed * speed
        due = int(self._accumulator * speed + 1e-9)
        if due > self.config.max_ticks_per_advance:
            due = self.config.max_ticks_per_advance
            self._accumulator = 0.0
        else:
            self._accumulator = max(0.0, self._accumulator - due / speed)
        return self.run_steps(due)

    def spawn(self, position) -> str:
        """Spawn a body at rest at the given position."""
        return self.store.spawn(position)

    def set_staged_velocity(self, name: str, vx: Optional[float] = None, vy: Optional[float] = None):
        """Stage a velocity edit, applied on the next resume.

        While running the edit is inert until the next pause/resume cycle; it
        is accepted with a warning, or rejected with RuntimeError when
        ``config.lock_staged_velocity_while_running`` is set.
        """
        if self.running:
            if self.config.lock_staged_velocity_while_running:
                raise RuntimeError("Staged velocity can only be edited while paused")
            warnings.warn(
                f"Staged velocity of {name!r} edited while running; "
                "it takes effect on the next resume",
                UserWarning,
                stacklevel=2,
            )
        self.store.set_staged_velocity(name, vx, vy)

    def set_gravity(self, name: str, value: float):
        self.store.set_gravity(name, value)

    def set_radius(self, name: str, value: float):
        self.store.set_radius(name, value)

    def toggle_trajectories(self) -> bool:
        """Toggle trajectory preview visibility."""
        self.show_trajectories = not self.show_trajectories
        return self.show_trajectories

    def predict_trajectories(self, steps: Optional[int] = None) -> Dict[str, np.ndarray]:
        """Predicted paths for the preview, or {} when not paused or hidden."""
        if not (self.paused and self.show_trajectories):
            return {}
        if self._profile:
            t0 = time.perf_counter()
        paths = self.predictor.predict(self.store.snapshot(include_staged=True), steps=steps)
        if self._profile:
            self._last_predict_ms = (time.perf_counter() - t0) * 1000.0
        return paths

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        return (
            self.store.positions(),
            self.store.velocities(),
            self.store.masses(),
            self.time,
            self.step_count,
        )

    def get_momentum(self) -> np.ndarray:
        return diagnostics.total_momentum(self.store.velocities(), self.store.masses())

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        masses = self.store.masses()
        return diagnostics.kinetic_energy(self.store.velocities(), masses) + diagnostics.potential_energy(
            self.store.positions(), masses, self.config.G, self.config.min_separation
        )

    def _log_stability_table(self):
        """Log momentum, energy and angular momentum."""
        positions = self.store.positions()
        velocities = self.store.velocities()
        masses = self.store.masses()
        p = diagnostics.total_momentum(velocities, masses)
        K = diagnostics.kinetic_energy(velocities, masses)
        U = diagnostics.potential_energy(positions, masses, self.config.G, self.config.min_separation)
        Lz = diagnostics.angular_momentum(positions, velocities, masses)
        print(
            f"[Diag] step={self.step_count} t={self.time:.2f} px={p[0]:.4e} py={p[1]:.4e} "
            f"K={K:.4e} U={U:.4e} E={K + U:.4e} Lz={Lz:.4e}"
        )
