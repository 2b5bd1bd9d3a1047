# graphgrow/core/__init__.py
"""
Core components: config, frame pacing, randomness, errors.
"""

from .config import GraphAppConfig, Color, WHITE, BLACK
from .errors import GraphGrowError, SetupError, SurfaceError, EdgeIndexError
from .frame import FrameState, FramePacer
from .random_source import RandomSource, NumpyRandomSource

__all__ = [
    'GraphAppConfig', 'Color', 'WHITE', 'BLACK',
    'GraphGrowError', 'SetupError', 'SurfaceError', 'EdgeIndexError',
    'FrameState', 'FramePacer',
    'RandomSource', 'NumpyRandomSource',
]
