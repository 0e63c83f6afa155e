"""Tests for input handling."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from planet_sandbox.physics.simulator import Simulator
from planet_sandbox.render.renderer_2d import Renderer2D, ZOOM_FACTOR
from planet_sandbox.ui.controls import InputController, LEFT_BUTTON, RIGHT_BUTTON, VELOCITY_STEP
from planet_sandbox.utils.config import SimulationConfig


def _controller(renderer=None):
    sim = Simulator(SimulationConfig(prediction_steps=10))
    return InputController(sim, renderer)


def test_space_toggles_mode():
    """Test the pause key."""
    controller = _controller()

    assert controller.on_key(" ") == "mode:running"
    assert controller.simulator.running
    assert controller.on_key("space") == "mode:paused"


def test_tab_toggles_trajectories():
    """Test the trajectory visibility key."""
    controller = _controller()

    assert controller.on_key("tab") == "trajectories:off"
    assert controller.on_key("tab") == "trajectories:on"


def test_escape_requests_exit():
    """Test the exit key."""
    controller = _controller()

    assert controller.on_key("escape") == "exit"
    assert controller.exit_requested


def test_speed_keys():
    """Test speed keys change the tick rate only."""
    controller = _controller()
    speed = controller.simulator.speed

    controller.on_key("+")
    assert controller.simulator.speed > speed
    controller.on_key("-")
    assert controller.simulator.speed == speed
    assert controller.on_key("q") is None


def test_right_click_spawns_and_selects():
    """Test spawning at the cursor."""
    controller = _controller()

    assert controller.on_click(RIGHT_BUTTON, 120.0, -30.0) == "spawn"
    assert controller.selected == "Planet 1"
    assert np.allclose(controller.simulator.store.get("Planet 1").xy, [120.0, -30.0])

    # clicks outside the axes are ignored
    assert controller.on_click(RIGHT_BUTTON, None, None) is None
    assert controller.simulator.body_count == 1


def test_left_click_selects_nearest():
    """Test selecting the nearest body."""
    controller = _controller()
    controller.simulator.spawn((0.0, 0.0))
    controller.simulator.spawn((100.0, 0.0))

    assert controller.on_click(LEFT_BUTTON, 90.0, 5.0) == "select"
    assert controller.selected == "Planet 2"


def test_arrows_edit_staged_velocity():
    """Test arrow keys stage velocity on the selected body while paused."""
    controller = _controller()
    controller.on_click(RIGHT_BUTTON, 0.0, 0.0)

    assert controller.on_key("right") == "stage"
    assert controller.on_key("up") == "stage"
    body = controller.simulator.store.get("Planet 1")
    assert np.allclose(body.staged_velocity, [VELOCITY_STEP, VELOCITY_STEP])

    controller.on_key(" ")
    assert controller.on_key("left") is None
    assert np.allclose(body.staged_velocity, 0.0)


def test_scroll_zooms():
    """Test scroll notches zoom the view."""
    renderer = Renderer2D(view_half_width=500.0)
    controller = _controller(renderer)

    assert controller.on_scroll("up") == "zoom:in"
    assert renderer.view_half_width == pytest.approx(500.0 / ZOOM_FACTOR)
    assert controller.on_scroll("down") == "zoom:out"
    assert renderer.view_half_width == pytest.approx(500.0)


def test_unsupported_scroll_is_ignored():
    """Test unknown scroll input warns instead of failing."""
    renderer = Renderer2D(view_half_width=500.0)
    controller = _controller(renderer)

    with pytest.warns(UserWarning):
        assert controller.on_scroll("pixels") is None
    assert renderer.view_half_width == 500.0
