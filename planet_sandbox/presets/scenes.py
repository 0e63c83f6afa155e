"""Built-in scenes."""

from typing import List
import numpy as np
from planet_sandbox.presets.base import Preset


class SinglePlanet(Preset):
    """One planet at the origin (the start-up scene)."""

    @property
    def name(self) -> str:
        return "single"

    def populate(self, simulator) -> List[str]:
        return [simulator.spawn((0.0, 0.0, 0.0))]


class BinaryPair(Preset):
    """Two default planets at rest, mirrored about the origin."""

    def __init__(self, separation: float = 100.0):
        self.separation = separation

    @property
    def name(self) -> str:
        return "binary"

    def populate(self, simulator) -> List[str]:
        half = self.separation / 2
        return [simulator.spawn((-half, 0.0)), simulator.spawn((half, 0.0))]


class PlanetAndMoon(Preset):
    """A heavy central planet and a light planet on a staged circular orbit."""

    def __init__(
        self,
        orbit_radius: float = 300.0,
        central_gravity: float = 100.0,
        central_radius: float = 100.0,
        moon_gravity: float = 1.0,
        moon_radius: float = 20.0
    ):
        self.orbit_radius = orbit_radius
        self.central_gravity = central_gravity
        self.central_radius = central_radius
        self.moon_gravity = moon_gravity
        self.moon_radius = moon_radius

    @property
    def name(self) -> str:
        return "orbit"

    def populate(self, simulator) -> List[str]:
        central = simulator.spawn((0.0, 0.0))
        simulator.set_gravity(central, self.central_gravity)
        simulator.set_radius(central, self.central_radius)

        moon = simulator.spawn((self.orbit_radius, 0.0))
        simulator.set_gravity(moon, self.moon_gravity)
        simulator.set_radius(moon, self.moon_radius)

        # v = sqrt(G * M / r), and G * M is gravity * radius^2
        gm = self.central_gravity * self.central_radius ** 2
        simulator.set_staged_velocity(moon, 0.0, float(np.sqrt(gm / self.orbit_radius)))
        return [central, moon]


class Triangle(Preset):
    """Three equal planets on an equilateral triangle, staged to co-rotate."""

    def __init__(self, circumradius: float = 200.0):
        self.circumradius = circumradius

    @property
    def name(self) -> str:
        return "triangle"

    def populate(self, simulator) -> List[str]:
        names = []
        angles = np.pi / 2 + np.arange(3) * 2 * np.pi / 3
        for angle in angles:
            names.append(simulator.spawn((self.circumradius * np.cos(angle),
                                          self.circumradius * np.sin(angle))))

        # Net pull on each body points at the centre: a = G*m / (sqrt(3) * R^2)
        body = simulator.store.get(names[0])
        gm = body.gravity * body.radius ** 2
        speed = float(np.sqrt(gm / (np.sqrt(3.0) * self.circumradius)))
        for name, angle in zip(names, angles):
            simulator.set_staged_velocity(name, -speed * np.sin(angle), speed * np.cos(angle))
        return names
