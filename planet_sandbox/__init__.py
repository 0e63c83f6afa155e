"""
Planet Sandbox - an interactive N-body gravity sandbox.

Features:
- Pairwise Newtonian gravity with a guarded singularity
- Fixed-step two-phase integration
- Pause/resume with staged velocity edits
- Look-ahead trajectory preview on detached snapshots
- Matplotlib front end and headless CLI
"""

__version__ = "0.1.0"

from planet_sandbox.physics.simulator import Simulator, SimulationMode
from planet_sandbox.physics.body_store import BodyStore
from planet_sandbox.utils.config import SimulationConfig

__all__ = [
    "Simulator",
    "SimulationMode",
    "BodyStore",
    "SimulationConfig",
]
