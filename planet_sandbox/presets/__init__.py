"""Preset scenes for the sandbox."""

from planet_sandbox.presets.base import Preset
from planet_sandbox.presets.scenes import SinglePlanet, BinaryPair, PlanetAndMoon, Triangle

PRESETS = {
    "single": SinglePlanet,
    "binary": BinaryPair,
    "orbit": PlanetAndMoon,
    "triangle": Triangle,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "SinglePlanet",
    "BinaryPair",
    "PlanetAndMoon",
    "Triangle",
    "PRESETS",
    "get_preset",
]
