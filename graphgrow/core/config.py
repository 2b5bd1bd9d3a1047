# graphgrow/core/config.py
"""
App Config

Fixed settings for one run. The canvas size never changes after startup.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)


@dataclass
class GraphAppConfig:
    width: int = 400
    height: int = 400
    title: str = "graphgrow"
    fps: float = 30.0
    node_radius: float = 8.0
    circle_segments: int = 24
    background: Color = WHITE
    foreground: Color = BLACK
    confirm_key: str = "enter"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid canvas size: {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.node_radius <= 0:
            raise ValueError(f"node_radius must be positive, got {self.node_radius}")
        if self.circle_segments < 3:
            raise ValueError(f"circle_segments must be >= 3, got {self.circle_segments}")

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def frame_interval(self) -> float:
        """Seconds slept at the end of every tick."""
        return 1.0 / self.fps
