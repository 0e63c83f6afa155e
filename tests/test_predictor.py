"""Tests for trajectory prediction."""

import warnings
import numpy as np
import pytest
from planet_sandbox.physics.body_store import BodyStore
from planet_sandbox.physics.force_calculator import DegenerateGeometryWarning
from planet_sandbox.physics.nbody import NBodySystem
from planet_sandbox.physics.predictor import TrajectoryPredictor
from planet_sandbox.utils.config import SimulationConfig


def _scene(config):
    store = BodyStore(config)
    a = store.spawn((-50.0, 0.0))
    b = store.spawn((50.0, 0.0))
    store.set_staged_velocity(a, 0.0, 2.0)
    store.set_staged_velocity(b, 0.0, -2.0)
    return store


def test_prediction_shape_and_names():
    """Test one (steps, 2) path per body, keyed by name."""
    config = SimulationConfig(prediction_steps=50)
    store = _scene(config)
    predictor = TrajectoryPredictor(config)

    paths = predictor.predict(store.snapshot())

    assert set(paths) == {"Planet 1", "Planet 2"}
    for path in paths.values():
        assert path.shape == (50, 2)
        assert np.all(np.isfinite(path))


def test_prediction_does_not_touch_live_state():
    """Test the store is unchanged after predicting."""
    config = SimulationConfig(prediction_steps=200)
    store = _scene(config)
    before = store.telemetry()

    TrajectoryPredictor(config).predict(store.snapshot())

    for row, after in zip(before, store.telemetry()):
        assert np.allclose(row["position"], after["position"])
        assert np.allclose(row["velocity"], after["velocity"])
        assert np.allclose(row["staged_velocity"], after["staged_velocity"])


def test_prediction_matches_engine():
    """Test predicted points equal the positions the live engine reaches."""
    config = SimulationConfig(prediction_steps=30)
    store = _scene(config)
    paths = TrajectoryPredictor(config).predict(store.snapshot())

    store.commit_staged_velocities()
    system = NBodySystem(config)
    for k in range(30):
        system.step(store)
        assert np.allclose(store.get("Planet 1").xy, paths["Planet 1"][k])
        assert np.allclose(store.get("Planet 2").xy, paths["Planet 2"][k])


def test_repeated_predictions_are_identical():
    """Test prediction is deterministic for an unchanged snapshot."""
    config = SimulationConfig(prediction_steps=100)
    store = _scene(config)
    predictor = TrajectoryPredictor(config, cache=False)

    first = predictor.predict(store.snapshot())
    second = predictor.predict(store.snapshot())

    assert predictor.compute_count == 2
    for name in first:
        assert np.array_equal(first[name], second[name])


def test_prediction_cache():
    """Test unchanged snapshots reuse the memoised result."""
    config = SimulationConfig(prediction_steps=20)
    store = _scene(config)
    predictor = TrajectoryPredictor(config)

    first = predictor.predict(store.snapshot())
    second = predictor.predict(store.snapshot())
    assert predictor.compute_count == 1
    assert second["Planet 1"] is first["Planet 1"]

    store.set_staged_velocity("Planet 1", 5.0, 0.0)
    predictor.predict(store.snapshot())
    assert predictor.compute_count == 2

    predictor.invalidate()
    predictor.predict(store.snapshot())
    assert predictor.compute_count == 3


def test_staged_velocity_changes_prediction():
    """Test staged edits show up in the preview."""
    config = SimulationConfig(prediction_steps=10)
    store = BodyStore(config)
    name = store.spawn((0.0, 0.0))
    predictor = TrajectoryPredictor(config)

    at_rest = predictor.predict(store.snapshot())[name]
    store.set_staged_velocity(name, 3.0, 0.0)
    moving = predictor.predict(store.snapshot())[name]

    assert np.allclose(at_rest, 0.0)
    assert np.allclose(moving[:, 0], 3.0 * config.stepsize * np.arange(1, 11))


def test_empty_and_zero_steps():
    """Test empty scenes and zero-length predictions."""
    config = SimulationConfig(prediction_steps=10)
    predictor = TrajectoryPredictor(config)

    assert predictor.predict(BodyStore(config).snapshot()) == {}

    store = _scene(config)
    paths = predictor.predict(store.snapshot(), steps=0)
    assert paths["Planet 1"].shape == (0, 2)

    with pytest.raises(ValueError):
        predictor.predict(store.snapshot(), steps=-1)


def test_predicted_paths_are_read_only():
    """Test callers cannot corrupt a cached path."""
    config = SimulationConfig(prediction_steps=5)
    paths = TrajectoryPredictor(config).predict(_scene(config).snapshot())

    with pytest.raises(ValueError):
        paths["Planet 1"][0, 0] = 0.0


def test_cached_result_cannot_be_emptied_by_caller():
    """Test removing keys from a returned mapping leaves later results intact."""
    config = SimulationConfig(prediction_steps=5)
    store = _scene(config)
    predictor = TrajectoryPredictor(config)

    predictor.predict(store.snapshot()).pop("Planet 1")

    assert set(predictor.predict(store.snapshot())) == {"Planet 1", "Planet 2"}
    assert predictor.compute_count == 1


def test_coincident_bodies_warn_once_per_prediction():
    """Test per-step degeneracy warnings are folded into a single warning."""
    config = SimulationConfig(prediction_steps=30)
    store = BodyStore(config)
    store.spawn((10.0, 10.0))
    store.spawn((10.0, 10.0))
    predictor = TrajectoryPredictor(config)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        paths = predictor.predict(store.snapshot())

    degenerate = [w for w in caught if issubclass(w.category, DegenerateGeometryWarning)]
    assert len(degenerate) == 1
    assert "30 of 30" in str(degenerate[0].message)
    for path in paths.values():
        assert np.all(np.isfinite(path))
        assert np.allclose(path, [10.0, 10.0])
