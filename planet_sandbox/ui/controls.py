"""Keyboard, mouse and scroll bindings for the sandbox window."""

import warnings
from typing import Optional
import numpy as np
from planet_sandbox.physics.simulator import Simulator

RIGHT_BUTTON = 3
LEFT_BUTTON = 1
VELOCITY_STEP = 1.0
SPEED_STEP = 10.0


class InputController:
    """Translates raw input events into simulator operations.

    Key bindings:
        space       pause / resume
        tab         show / hide trajectory preview
        escape      quit
        arrows      edit the selected body's staged velocity
        + / -       raise / lower the tick rate

    Mouse: left click selects the nearest body, right click spawns a body at
    the cursor, scroll zooms. Unsupported events are reported with a warning
    and ignored.
    """

    def __init__(self, simulator: Simulator, renderer=None):
        self.simulator = simulator
        self.renderer = renderer
        self.selected: Optional[str] = None
        self.exit_requested = False

    def on_key(self, key: Optional[str]) -> Optional[str]:
        """Handle a key press.

        Returns:
            Name of the action taken, or None if the key is unbound
        """
        if key in ("space", " "):
            mode = self.simulator.toggle()
            return f"mode:{mode.value}"
        if key == "tab":
            visible = self.simulator.toggle_trajectories()
            return f"trajectories:{'on' if visible else 'off'}"
        if key == "escape":
            self.exit_requested = True
            return "exit"
        if key in ("+", "="):
            self.simulator.set_speed(self.simulator.speed + SPEED_STEP)
            return "speed"
        if key == "-":
            self.simulator.set_speed(self.simulator.speed - SPEED_STEP)
            return "speed"
        if key in ("left", "right", "up", "down"):
            return self._nudge_staged_velocity(key)
        return None

    def on_click(self, button, x: Optional[float], y: Optional[float]) -> Optional[str]:
        """Handle a mouse click at world coordinates (x, y)."""
        if x is None or y is None:
            return None  # outside the axes
        if button == RIGHT_BUTTON:
            self.selected = self.simulator.spawn((x, y, 0.0))
            return "spawn"
        if button == LEFT_BUTTON:
            self.selected = self._nearest_body(x, y)
            return "select" if self.selected is not None else None
        return None

    def on_scroll(self, direction) -> Optional[str]:
        """Handle one scroll notch ('up' zooms in, 'down' zooms out)."""
        if direction not in ("up", "down"):
            warnings.warn(f"Unsupported scroll input {direction!r}; ignored", UserWarning, stacklevel=2)
            return None
        if self.renderer is not None:
            self.renderer.zoom(direction == "up")
        return f"zoom:{'in' if direction == 'up' else 'out'}"

    def _nudge_staged_velocity(self, key: str) -> Optional[str]:
        if self.selected is None or self.selected not in self.simulator.store:
            return None
        if self.simulator.running:
            # editing is disabled in the panel while running
            return None
        body = self.simulator.store.get(self.selected)
        vx, vy = body.staged_velocity
        dx, dy = {"left": (-1, 0), "right": (1, 0), "up": (0, 1), "down": (0, -1)}[key]
        self.simulator.set_staged_velocity(
            self.selected, vx + dx * VELOCITY_STEP, vy + dy * VELOCITY_STEP
        )
        return "stage"

    def _nearest_body(self, x: float, y: float) -> Optional[str]:
        if self.simulator.body_count == 0:
            return None
        distances = np.linalg.norm(self.simulator.store.positions() - np.array([x, y]), axis=1)
        return self.simulator.store.names[int(np.argmin(distances))]
