"""Fixed-step integrators for the sandbox."""

from planet_sandbox.physics.integrators.base import Integrator
from planet_sandbox.physics.integrators.euler import SymplecticEulerIntegrator

__all__ = ["Integrator", "SymplecticEulerIntegrator"]
