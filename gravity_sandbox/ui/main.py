"""Interactive window: drives the world from a matplotlib animation timer."""

import argparse
import logging
import time
from typing import Dict, List, Optional
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from gravity_sandbox.physics.world import SimulationWorld
from gravity_sandbox.render.renderer_2d import Renderer2D
from gravity_sandbox.ui.controls import KEY_BINDINGS, format_overlay, handle_key
from gravity_sandbox.utils.config import WorldConfig, load_config

logger = logging.getLogger(__name__)


def free_keymaps(keys=KEY_BINDINGS) -> Dict[str, List[str]]:
    """rcParams overrides that unbind matplotlib's default shortcuts for our keys."""
    overrides = {}
    for name, bound in plt.rcParams.items():
        if not name.startswith('keymap.'):
            continue
        remaining = [k for k in bound if k not in keys]
        if len(remaining) != len(bound):
            overrides[name] = remaining
    return overrides


class GravitySandboxApp:
    """Owns the render/input loop; calls into the world, never the reverse.

    Every animation frame measures the wall-clock time since the previous one,
    steps the world once with it and redraws.
    """

    def __init__(
        self,
        world: SimulationWorld,
        renderer: Optional[Renderer2D] = None,
        interval_ms: int = 16,
        profile: bool = False
    ):
        """Initialize app.

        Args:
            world: World to drive
            renderer: Renderer (default: Renderer2D sized to the world)
            interval_ms: Target delay between frames
            profile: Show per-step timing in the overlay
        """
        self.world = world
        self.renderer = renderer or Renderer2D(width=world.width, height=world.height)
        self.interval_ms = interval_ms
        self.world.set_profiling(profile)
        self.animation: Optional[FuncAnimation] = None
        self._last_timestamp: Optional[float] = None

    def _elapsed(self) -> float:
        now = time.perf_counter()
        dt = 0.0 if self._last_timestamp is None else now - self._last_timestamp
        self._last_timestamp = now
        return dt

    def _overlay(self) -> str:
        text = format_overlay(self.world)
        timing = self.world.get_timing()
        forces_ms, collisions_ms = timing.get("forces_ms"), timing.get("collisions_ms")
        if forces_ms is not None and collisions_ms is not None:
            text = f"Forces: {forces_ms:.2f} ms | Collisions: {collisions_ms:.2f} ms\n" + text
        return text

    def on_frame(self, frame):
        self.world.step(self._elapsed())
        self.redraw()
        return []

    def redraw(self):
        self.renderer.render(self.world.snapshot(), self._overlay())

    def on_key(self, event):
        if handle_key(self.world, event.key):
            logger.debug("key %r handled", event.key)

    def on_click(self, event):
        if event.inaxes is not self.renderer.ax or event.xdata is None or event.ydata is None:
            return
        self.world.insert_body(event.xdata, event.ydata)

    def on_resize(self, event):
        if event.width <= 0 or event.height <= 0:
            return
        self.world.set_bounds(event.width, event.height)
        self.renderer.set_bounds(event.width, event.height)

    def connect(self):
        """Draw the first frame and hook up input and timer callbacks."""
        self.redraw()
        canvas = self.renderer.fig.canvas
        canvas.mpl_connect('key_press_event', self.on_key)
        canvas.mpl_connect('button_press_event', self.on_click)
        canvas.mpl_connect('resize_event', self.on_resize)
        self.animation = FuncAnimation(
            self.renderer.fig,
            self.on_frame,
            interval=self.interval_ms,
            blit=False,
            cache_frame_data=False,
        )

    def run(self):
        """Open the window and block until it is closed."""
        with plt.rc_context(free_keymaps()):
            self.connect()
            plt.show()
        self.renderer.close()


def run_gui(config: Optional[WorldConfig] = None, seed: Optional[int] = None, profile: bool = False):
    """Run the interactive sandbox."""
    world = SimulationWorld(config, seed=seed)
    GravitySandboxApp(world, profile=profile).run()


def main():
    """Entry point for the gravity-sandbox-gui script."""
    parser = argparse.ArgumentParser(description="Gravity Sandbox - interactive window")
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--profile', action='store_true',
                        help='Show step timing in the overlay')
    args = parser.parse_args()

    config = load_config(args.config) if args.config else None
    run_gui(config, seed=args.seed, profile=args.profile)


if __name__ == '__main__':
    main()
