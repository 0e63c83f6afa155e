"""Interactive sandbox window using matplotlib."""

import argparse
import time
from typing import Optional
import matplotlib.pyplot as plt
from planet_sandbox.physics.simulator import Simulator
from planet_sandbox.presets import get_preset, PRESETS
from planet_sandbox.render.renderer_2d import Renderer2D
from planet_sandbox.ui.controls import InputController
from planet_sandbox.utils.config import SimulationConfig, load_config

FRAME_INTERVAL_MS = 16


class SandboxApp:
    """Main GUI application.

    A matplotlib timer drives the frame loop: wall time is fed to the
    simulator clock, then the scene (and the preview, while paused) is drawn.
    """

    def __init__(self, simulator: Simulator, renderer: Optional[Renderer2D] = None):
        self.simulator = simulator
        self.renderer = renderer if renderer is not None else Renderer2D()
        self.controller = InputController(simulator, self.renderer)
        self._last_frame: Optional[float] = None
        self.timer = None

    def status_line(self) -> str:
        sim = self.simulator
        state = "RUNNING" if sim.running else "PAUSED"
        line = f"{state}  speed={sim.speed:.0f}Hz  bodies={sim.body_count}  t={sim.time:.1f}"
        if self.controller.selected is not None and self.controller.selected in sim.store:
            body = sim.store.get(self.controller.selected)
            vx, vy = body.velocity
            sx, sy = body.staged_velocity
            line += f"\n{body.name}: v=({vx:.2f}, {vy:.2f}) staged=({sx:.2f}, {sy:.2f})"
        return line

    def frame(self):
        """Advance the clock and redraw."""
        now = time.perf_counter()
        elapsed = 0.0 if self._last_frame is None else now - self._last_frame
        self._last_frame = now

        self.simulator.advance(elapsed)
        trajectories = self.simulator.predict_trajectories()
        self.renderer.render(self.simulator.store.telemetry(), trajectories, self.status_line())

    def _on_key(self, event):
        self.controller.on_key(event.key)
        if self.controller.exit_requested:
            self.close()

    def _on_click(self, event):
        button = getattr(event.button, "value", event.button)
        self.controller.on_click(button, event.xdata, event.ydata)

    def _on_scroll(self, event):
        self.controller.on_scroll(event.button)

    def run(self):
        """Open the window and block until it is closed."""
        self.renderer.render(self.simulator.store.telemetry(), None, self.status_line())
        fig = self.renderer.fig
        fig.canvas.mpl_connect("key_press_event", self._on_key)
        fig.canvas.mpl_connect("button_press_event", self._on_click)
        fig.canvas.mpl_connect("scroll_event", self._on_scroll)
        self.timer = fig.canvas.new_timer(interval=FRAME_INTERVAL_MS)
        self.timer.add_callback(self.frame)
        self.timer.start()
        plt.show()

    def close(self):
        if self.timer is not None:
            self.timer.stop()
        self.renderer.close()


def run_gui(argv=None):
    """Run GUI application."""
    parser = argparse.ArgumentParser(description="Planet Sandbox - interactive gravity sandbox")
    parser.add_argument('--preset', type=str, default=None, choices=sorted(PRESETS),
                        help='Start-up scene (default: from config, else single)')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else SimulationConfig()
    simulator = Simulator(config)
    get_preset(args.preset or config.preset).populate(simulator)
    SandboxApp(simulator).run()


if __name__ == '__main__':
    run_gui()
