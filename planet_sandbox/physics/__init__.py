"""Physics engine for the gravity sandbox."""

from planet_sandbox.physics.body import Body
from planet_sandbox.physics.body_store import BodyStore, BodySnapshot
from planet_sandbox.physics.force_calculator import ForceCalculator, DegenerateGeometryWarning
from planet_sandbox.physics.nbody import NBodySystem
from planet_sandbox.physics.predictor import TrajectoryPredictor
from planet_sandbox.physics.simulator import Simulator, SimulationMode

__all__ = [
    "Body",
    "BodyStore",
    "BodySnapshot",
    "ForceCalculator",
    "DegenerateGeometryWarning",
    "NBodySystem",
    "TrajectoryPredictor",
    "Simulator",
    "SimulationMode",
]
