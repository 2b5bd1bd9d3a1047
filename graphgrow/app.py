"""
graphgrow - moderngl-window host

Creates the 400x400 window, wires the window callbacks into an
EventQueue and runs the InteractionLoop until Escape or window close.
"""

from __future__ import annotations
from typing import Optional
import logging
import sys

import moderngl_window as mglw

from .core.config import GraphAppConfig
from .core.errors import SetupError, SurfaceError
from .core.frame import FramePacer
from .core.random_source import NumpyRandomSource, RandomSource
from .graph.store import GraphStore
from .input.events import KEY_ENTER, KEY_ESCAPE
from .input.queue import EventQueue
from .loop import InteractionLoop
from .render.gl_surface import GLSurface
from .render.surface import Surface

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class WindowHost:
    """Owns the platform window and translates its callbacks into events."""

    def __init__(self, window, config: GraphAppConfig):
        self.window = window
        self.config = config
        self.queue = EventQueue()
        self.gl_surface = GLSurface(
            window.ctx,
            config.size,
            swap=window.swap_buffers,
            circle_segments=config.circle_segments,
            buffer_size=tuple(window.buffer_size),
        )
        self.surface = self.gl_surface

        window.key_event_func = self.key_event
        window.close_func = self.close_event

    @classmethod
    def create(cls, config: GraphAppConfig) -> WindowHost:
        try:
            window_cls = mglw.get_local_window_cls()
            window = window_cls(
                title=config.title,
                size=config.size,
                resizable=False,
                vsync=False,
                gl_version=(3, 3),
            )
            mglw.activate_context(window=window)
        except Exception as e:
            raise SetupError(f"Could not create window: {e}") from e
        return cls(window, config)

    # -------------------------------------------------------------------------
    # Window callbacks
    # -------------------------------------------------------------------------

    def key_event(self, key, action, modifiers):
        keys = self.window.keys
        if action != keys.ACTION_PRESS:
            return
        if key == keys.ESCAPE:
            self.queue.push_key(KEY_ESCAPE)
        elif key == keys.ENTER:
            self.queue.push_key(KEY_ENTER)
        else:
            self.queue.push_other(f"key:{key}")

    def close_event(self):
        self.queue.push_quit()

    # -------------------------------------------------------------------------
    # Input source
    # -------------------------------------------------------------------------

    def drain(self):
        """
        Pending events in arrival order.

        Window callbacks fire while the previous present swaps buffers, so
        keys pressed during tick N are seen by tick N + 1.
        """
        if self.window.is_closing:
            self.queue.push_quit()
        return self.queue.drain()

    def close(self):
        self.gl_surface.release()
        self.window.destroy()


def build_loop(
    config: GraphAppConfig,
    surface: Surface,
    events,
    rng: Optional[RandomSource] = None,
    pacer: Optional[FramePacer] = None,
) -> InteractionLoop:
    """Seed a graph and wire it to a surface and input source."""
    rng = rng or NumpyRandomSource(config.seed)
    store = GraphStore.seeded(config.width, config.height, rng)
    return InteractionLoop(store, surface, events, rng, config=config, pacer=pacer)


def main(config: Optional[GraphAppConfig] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = config or GraphAppConfig()

    try:
        host = WindowHost.create(config)
    except SetupError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        loop = build_loop(config, host.surface, host)
        return loop.run()
    except SurfaceError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        host.close()


if __name__ == "__main__":
    sys.exit(main())
