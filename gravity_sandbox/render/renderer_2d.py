"""2D renderer using matplotlib."""

import math
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from typing import List, Optional, Sequence
from gravity_sandbox.physics.body import BodyView
from gravity_sandbox.render.base import Renderer

BG_COLOR = (10 / 255, 10 / 255, 30 / 255)
BODY_COLOR = (150 / 255, 180 / 255, 255 / 255)
TEXT_COLOR = "white"


class Renderer2D(Renderer):
    """Draws bodies as filled circles labelled with their integer mass.

    The axes fill the whole figure and map one data unit to one pixel, with
    y growing downwards like screen coordinates.
    """

    def __init__(
        self,
        width: float = 1280.0,
        height: float = 720.0,
        dpi: int = 100,
        show_labels: bool = True,
        label_fontsize: float = 9.0,
        overlay_fontsize: float = 9.0
    ):
        """Initialize 2D renderer.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels
            dpi: Dots per inch
            show_labels: Draw floor(mass) on every body
            label_fontsize: Font size of body labels
            overlay_fontsize: Font size of the status overlay
        """
        self.width = width
        self.height = height
        self.dpi = dpi
        self.show_labels = show_labels
        self.label_fontsize = label_fontsize
        self.overlay_fontsize = overlay_fontsize

        self.fig: Optional[Figure] = None
        self.ax = None
        self.collection: Optional[PatchCollection] = None
        self.labels: List = []
        self.overlay_text = None
        self.initialized = False

    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return
        self.fig = plt.figure(
            figsize=(self.width / self.dpi, self.height / self.dpi),
            dpi=self.dpi,
            facecolor=BG_COLOR,
        )
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_facecolor(BG_COLOR)
        self.ax.set_axis_off()
        self.overlay_text = self.fig.text(
            0.01, 0.99, "",
            color=TEXT_COLOR,
            fontsize=self.overlay_fontsize,
            va='top', ha='left',
            family='monospace',
        )
        self.initialized = True
        self._apply_limits()

    def _apply_limits(self):
        if self.ax is None:
            return
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)

    def set_bounds(self, width: float, height: float):
        self.width = width
        self.height = height
        self._apply_limits()

    def render(self, bodies: Sequence[BodyView], overlay: Optional[str] = None):
        """Render current frame."""
        self._initialize()

        if self.collection is not None:
            self.collection.remove()
            self.collection = None
        for label in self.labels:
            label.remove()
        self.labels = []

        patches = [Circle((b.x, b.y), b.radius) for b in bodies]
        self.collection = PatchCollection(patches, facecolor=BODY_COLOR, edgecolor='none')
        self.ax.add_collection(self.collection)

        if self.show_labels:
            for b in bodies:
                self.labels.append(self.ax.text(
                    b.x, b.y, str(math.floor(b.mass)),
                    color=TEXT_COLOR,
                    fontsize=self.label_fontsize,
                    ha='center', va='center',
                    clip_on=True,
                ))

        if overlay is not None:
            self.overlay_text.set_text(overlay)

        self.fig.canvas.draw_idle()

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.collection = None
            self.labels = []
            self.overlay_text = None
            self.initialized = False
