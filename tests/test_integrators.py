"""Tests for numerical integrators."""

import numpy as np
from planet_sandbox.physics.integrators import Integrator, SymplecticEulerIntegrator


def test_symplectic_euler_integrator():
    """Test symplectic Euler integrator."""
    integrator = SymplecticEulerIntegrator()

    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    velocities = np.array([[0.0, 0.0], [0.0, 0.0]])
    accelerations = np.array([[0.0, 1.0], [0.0, 0.0]])
    dt = 0.01

    new_pos, new_vel = integrator.step(positions, velocities, accelerations, dt)

    # Should have moved
    assert not np.allclose(new_pos, positions)
    assert isinstance(integrator, Integrator)
    assert integrator.name == "symplectic_euler"
    assert integrator.order == 1


def test_velocity_updated_before_position():
    """Test positions advance with the new velocity, not the old one."""
    integrator = SymplecticEulerIntegrator()

    positions = np.array([[1.0, 2.0]])
    velocities = np.array([[3.0, -1.0]])
    accelerations = np.array([[10.0, 5.0]])
    dt = 0.1

    new_pos, new_vel = integrator.step(positions, velocities, accelerations, dt)

    assert np.allclose(new_vel, [[4.0, -0.5]])
    assert np.allclose(new_pos, [[1.4, 1.95]])


def test_integrator_does_not_mutate_inputs():
    """Test inputs are left untouched."""
    integrator = SymplecticEulerIntegrator()

    positions = np.array([[0.0, 0.0], [5.0, 5.0]])
    velocities = np.array([[1.0, 0.0], [0.0, 1.0]])
    accelerations = np.ones((2, 2))

    integrator.step(positions, velocities, accelerations, 0.1)

    assert np.allclose(positions, [[0.0, 0.0], [5.0, 5.0]])
    assert np.allclose(velocities, [[1.0, 0.0], [0.0, 1.0]])
