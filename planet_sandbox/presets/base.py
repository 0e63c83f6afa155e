"""Base class for preset scenes."""

from abc import ABC, abstractmethod
from typing import List


class Preset(ABC):
    """Abstract base class for preset scenes.

    A preset spawns bodies into a simulator and edits them through the same
    operations the editing surface uses. Orbital velocities are staged, so the
    scene starts paused with its future paths already previewable.
    """

    @abstractmethod
    def populate(self, simulator) -> List[str]:
        """Spawn the preset's bodies.

        Args:
            simulator: Target Simulator (normally paused and empty)

        Returns:
            Names of the spawned bodies
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
