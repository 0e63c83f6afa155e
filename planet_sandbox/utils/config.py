"""Configuration management."""

import json
import math
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict

from planet_sandbox import constants


@dataclass
class SimulationConfig:
    """Sandbox configuration.

    Injected into the simulator, the engine and the predictor at construction.
    ``stepsize`` is the per-tick integration step and is never changed by the
    tick rate (``speed``).
    """
    # Physics
    G: float = constants.G
    stepsize: float = constants.STEPSIZE
    min_separation: float = constants.MIN_SEPARATION

    # Clock
    speed: float = constants.DEFAULT_SPEED
    min_speed: float = constants.MIN_SPEED
    max_speed: float = constants.MAX_SPEED
    max_ticks_per_advance: int = 1000

    # Trajectory preview
    prediction_steps: int = constants.PREDICTION_STEPS
    show_trajectories: bool = True

    # Body defaults and edit bounds
    default_gravity: float = constants.DEFAULT_GRAVITY
    default_radius: float = constants.DEFAULT_RADIUS
    max_gravity: float = constants.MAX_GRAVITY
    max_radius: float = constants.MAX_RADIUS
    lock_staged_velocity_while_running: bool = False

    # Scene
    preset: str = "single"

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Check parameter ranges.

        Raises:
            ValueError: If a parameter is out of range
        """
        for key in ("G", "stepsize", "min_separation", "default_gravity",
                    "default_radius", "max_gravity", "max_radius"):
            if not getattr(self, key) > 0:
                raise ValueError(f"{key} must be positive, got {getattr(self, key)}")
        if self.prediction_steps < 0:
            raise ValueError(f"prediction_steps must be >= 0, got {self.prediction_steps}")
        if self.max_ticks_per_advance < 1:
            raise ValueError(f"max_ticks_per_advance must be >= 1, got {self.max_ticks_per_advance}")
        if not 0 < self.min_speed <= self.max_speed:
            raise ValueError(f"Invalid speed bounds: [{self.min_speed}, {self.max_speed}]")
        self.speed = self.clamp_speed(self.speed)

    def clamp_speed(self, speed: float) -> float:
        """Clamp a tick rate (Hz) into the configured bounds.

        Raises:
            ValueError: If speed is NaN or infinite
        """
        speed = float(speed)
        if not math.isfinite(speed):
            raise ValueError(f"speed must be finite, got {speed}")
        return float(min(max(speed, self.min_speed), self.max_speed))


def load_config(config_path: str, overrides: Optional[dict] = None) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)
        overrides: Optional values applied on top of the file contents

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    if overrides:
        data.update(overrides)
    return SimulationConfig(**data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.dump(data, f, default_flow_style=False)
        elif output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
