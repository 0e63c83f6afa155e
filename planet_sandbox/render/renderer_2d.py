"""2D renderer using matplotlib."""

from typing import Dict, List, Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Circle

ZOOM_FACTOR = 1.25
LABEL_FONT_SIZE = 10.0
LABEL_FONT_RANGE = (4.0, 40.0)


class Renderer2D:
    """Draws planets, their labels and predicted trajectories.

    The view is a simple camera: a centre and a half-width in world units.
    Zooming scales the half-width by ZOOM_FACTOR per notch.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (10, 10),
        dpi: int = 100,
        view_center: Tuple[float, float] = (0.0, 0.0),
        view_half_width: float = 600.0,
        show_labels: bool = True,
        trajectory_color: str = "white",
        body_color: str = "#4f8fd6",
        label_color: str = "#00ff00",
        background: str = "black"
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            view_center: Initial camera centre (world units)
            view_half_width: Initial half-width of the view (world units)
            show_labels: Draw planet numbers
            trajectory_color: Colour of predicted paths
            body_color: Fill colour of planets
            label_color: Colour of planet numbers
            background: Axes background colour
        """
        self.figsize = figsize
        self.dpi = dpi
        self.view_center = np.array(view_center, dtype=np.float64)
        self.view_half_width = float(view_half_width)
        self.show_labels = show_labels
        self.trajectory_color = trajectory_color
        self.body_color = body_color
        self.label_color = label_color
        self.background = background
        self._base_half_width = self.view_half_width

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False

    def _initialize(self):
        """Create the figure if not already done."""
        if not self.initialized:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
            self.initialized = True

    def zoom(self, zoom_in: bool) -> float:
        """Zoom one notch in or out.

        Returns:
            New view half-width
        """
        if zoom_in:
            self.view_half_width /= ZOOM_FACTOR
        else:
            self.view_half_width *= ZOOM_FACTOR
        return self.view_half_width

    def label_font_size(self) -> float:
        """Label size in points; labels grow as the view zooms in, like the planets."""
        size = LABEL_FONT_SIZE * self._base_half_width / self.view_half_width
        low, high = LABEL_FONT_RANGE
        return float(min(max(size, low), high))

    def render(
        self,
        bodies: List[dict],
        trajectories: Optional[Dict[str, np.ndarray]] = None,
        status: Optional[str] = None
    ):
        """Render current frame.

        Args:
            bodies: Body telemetry dicts (name, position, radius, ...)
            trajectories: Optional mapping name -> (k, 2) predicted path
            status: Optional status line drawn in the corner
        """
        self._initialize()
        ax = self.ax
        ax.clear()
        ax.set_facecolor(self.background)
        ax.set_aspect("equal")
        ax.set_xticks([])
        ax.set_yticks([])

        cx, cy = self.view_center
        w = self.view_half_width
        ax.set_xlim(cx - w, cx + w)
        ax.set_ylim(cy - w, cy + w)

        # paths first so planets are drawn on top
        for path in (trajectories or {}).values():
            if len(path) > 1:
                ax.plot(path[:, 0], path[:, 1], color=self.trajectory_color, linewidth=1.0, zorder=1)

        for body in bodies:
            x, y = body["position"][:2]
            # sprite diameter equals the radius parameter
            ax.add_patch(Circle((x, y), body["radius"] / 2, color=self.body_color, zorder=2))
            if self.show_labels:
                ax.text(x, y, body["name"].split()[-1], color=self.label_color,
                        ha="center", va="center", fontsize=self.label_font_size(), zorder=3)

        if status:
            ax.text(0.01, 0.99, status, transform=ax.transAxes, color="white",
                    ha="left", va="top", fontsize=9, family="monospace", zorder=4)

        self.fig.canvas.draw_idle()

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[..., :3].copy()

    def save(self, output_path: str):
        """Save current frame to an image file."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.savefig(output_path, facecolor=self.fig.get_facecolor())

    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
