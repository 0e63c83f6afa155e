"""Tests for the 2D renderer and the sandbox window loop."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from planet_sandbox.physics.simulator import Simulator
from planet_sandbox.presets import BinaryPair
from planet_sandbox.render.renderer_2d import Renderer2D
from planet_sandbox.ui.main import SandboxApp
from planet_sandbox.utils.config import SimulationConfig


def _sim():
    sim = Simulator(SimulationConfig(prediction_steps=25))
    BinaryPair().populate(sim)
    return sim


def test_render_frame():
    """Test rendering bodies and trajectories to an image."""
    sim = _sim()
    renderer = Renderer2D(figsize=(4, 4), dpi=50)

    renderer.render(sim.store.telemetry(), sim.predict_trajectories(), "PAUSED")
    frame = renderer.capture_frame()

    assert frame.shape == (200, 200, 3)
    assert frame.dtype == np.uint8
    renderer.close()


def test_capture_before_render():
    """Test capturing without a figure fails."""
    renderer = Renderer2D()

    with pytest.raises(RuntimeError):
        renderer.capture_frame()


def test_save(tmp_path):
    """Test saving a frame to disk."""
    renderer = Renderer2D(figsize=(3, 3), dpi=50)
    renderer.render(_sim().store.telemetry())
    path = tmp_path / "frame.png"

    renderer.save(str(path))

    assert path.exists()
    renderer.close()


def test_app_frame_advances_running_sim():
    """Test a frame feeds wall time to the simulator and redraws."""
    sim = _sim()
    app = SandboxApp(sim, Renderer2D(figsize=(3, 3), dpi=50))

    app.frame()
    assert "PAUSED" in app.status_line()

    sim.resume()
    app._last_frame -= 0.5
    app.frame()
    assert sim.step_count > 0
    assert "RUNNING" in app.status_line()
    app.close()


def test_labels_scale_with_zoom():
    """Test label size follows the zoom level within bounds."""
    renderer = Renderer2D(view_half_width=600.0)
    base = renderer.label_font_size()

    renderer.zoom(True)
    assert renderer.label_font_size() == pytest.approx(base * 1.25)

    for _ in range(40):
        renderer.zoom(False)
    assert renderer.label_font_size() == 4.0
