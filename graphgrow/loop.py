# graphgrow/loop.py
"""
InteractionLoop - the per-tick control loop.

Each tick:
1. Drain every pending input event
2. Classify each one; QUIT stops the loop, CONFIRM runs a growth step
3. Present the current frame (skipped once stopped)
4. Sleep one frame interval

A growth step adds one random node linked to a random pre-existing node
and draws just those two primitives on top of the current frame.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Protocol
import logging

from .core.config import GraphAppConfig
from .core.frame import FramePacer, FrameState
from .core.random_source import RandomSource
from .graph.store import GraphStore, Node, sample_position
from .input.events import EventKind, InputEvent, classify
from .render.surface import Surface

logger = logging.getLogger(__name__)

EXIT_OK = 0


class InputSource(Protocol):

    def drain(self) -> List[InputEvent]: ...


class LoopState(Enum):
    RUNNING = auto()
    STOPPED = auto()


@dataclass(frozen=True)
class GrowthStep:
    """Result of one growth step."""
    new_index: int
    target_index: int
    position: Node

    @property
    def edge(self):
        return (self.new_index, self.target_index)


class InteractionLoop:
    """
    Owns nothing; drives the store, the surface and the input source for
    as long as it runs.
    """

    def __init__(
        self,
        store: GraphStore,
        surface: Surface,
        events: InputSource,
        rng: RandomSource,
        config: Optional[GraphAppConfig] = None,
        pacer: Optional[FramePacer] = None,
    ):
        self.store = store
        self.surface = surface
        self.events = events
        self.rng = rng
        self.config = config or GraphAppConfig()
        self.pacer = pacer or FramePacer(self.config.frame_interval)

        self.state = LoopState.RUNNING
        self.growth_count = 0
        self.frame: Optional[FrameState] = None

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def stop(self):
        if self.state is LoopState.RUNNING:
            logger.info("Stopping after %d growth steps (%r)", self.growth_count, self.store)
        self.state = LoopState.STOPPED

    # -------------------------------------------------------------------------
    # Control
    # -------------------------------------------------------------------------

    def run(self) -> int:
        """Full redraw, then tick until a quit is seen. Returns exit status."""
        logger.info("Starting loop at %.1f Hz with %r", self.config.fps, self.store)
        self.full_redraw()
        while self.running:
            self.tick()
        return EXIT_OK

    def tick(self):
        """One iteration: drain, react, present, pace."""
        if not self.running:
            return
        self.frame = self.pacer.begin()
        logger.debug("Tick %d dt=%.4f", self.frame.frame_id, self.frame.dt)

        for event in self.events.drain():
            kind = classify(event, self.config.confirm_key)
            if kind is EventKind.QUIT:
                self.stop()
                break
            if kind is EventKind.CONFIRM:
                self.grow()

        if self.running:
            self.surface.present()
        self.pacer.wait()

    # -------------------------------------------------------------------------
    # Graph growth
    # -------------------------------------------------------------------------

    def grow(self) -> GrowthStep:
        """Add one node and one edge to an existing node, then draw both."""
        cfg = self.config
        position = sample_position(cfg.width, cfg.height, self.rng)
        target = self.rng.uniform(0, self.store.node_count)

        new = self.store.add_node(position)
        self.store.add_edge(new, target)
        self.growth_count += 1

        step = GrowthStep(new_index=new, target_index=target, position=position)
        logger.debug("Growth step %d: node %d at %s -> %d",
                     self.growth_count, new, position, target)

        self.surface.draw_line(position, self.store.position(target), cfg.foreground)
        self.surface.draw_circle(position, cfg.node_radius, cfg.foreground)
        self.surface.present()
        return step

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def full_redraw(self):
        """Clear, all edges, then all nodes on top, then present."""
        cfg = self.config
        self.surface.clear(cfg.background)

        for p1, p2 in self.store.iter_edge_segments():
            self.surface.draw_line(p1, p2, cfg.foreground)

        for node in self.store.nodes:
            self.surface.draw_circle(node, cfg.node_radius, cfg.foreground)

        self.surface.present()
        logger.debug("Full redraw: %d edges, %d nodes",
                     self.store.edge_count, self.store.node_count)
