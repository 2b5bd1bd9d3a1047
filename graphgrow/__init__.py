# graphgrow/__init__.py
"""
graphgrow - interactive random graph growth.

Core components:
- GraphStore: append-only nodes and edges
- InteractionLoop: drain input, grow on Enter, redraw, pace at 30 Hz
- Surface: clear / draw_line / draw_circle / present
- EventQueue: non-blocking input source
"""

from .core import (
    GraphAppConfig,
    FrameState, FramePacer,
    RandomSource, NumpyRandomSource,
    GraphGrowError, SetupError, SurfaceError, EdgeIndexError,
)

from .graph import GraphStore, GraphSnapshot, sample_position

from .input import (
    EventKind, QuitEvent, KeyDownEvent, OtherEvent,
    EventQueue, classify,
)

from .render import CommandList, RecordingSurface

from .loop import InteractionLoop, LoopState, GrowthStep

__version__ = '0.1.0'

__all__ = [
    # Core
    'GraphAppConfig',
    'FrameState', 'FramePacer',
    'RandomSource', 'NumpyRandomSource',
    'GraphGrowError', 'SetupError', 'SurfaceError', 'EdgeIndexError',

    # Graph
    'GraphStore', 'GraphSnapshot', 'sample_position',

    # Input
    'EventKind', 'QuitEvent', 'KeyDownEvent', 'OtherEvent',
    'EventQueue', 'classify',

    # Render
    'CommandList', 'RecordingSurface',

    # Loop
    'InteractionLoop', 'LoopState', 'GrowthStep',
]
