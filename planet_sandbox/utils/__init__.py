"""Configuration utilities."""

from planet_sandbox.utils.config import load_config, save_config, SimulationConfig

__all__ = ["load_config", "save_config", "SimulationConfig"]
