# graphgrow/core/errors.py
"""
Error taxonomy.

Setup and surface errors are environment failures and end the run.
EdgeIndexError is a programming error and is never caught.
"""


class GraphGrowError(Exception):
    """Base class for all graphgrow errors."""


class SetupError(GraphGrowError):
    """Window or GL context could not be created."""


class SurfaceError(GraphGrowError):
    """A draw or present call failed mid-run."""


class EdgeIndexError(GraphGrowError, IndexError):
    """An edge referenced a node that does not exist yet."""

    def __init__(self, a: int, b: int, node_count: int):
        self.a = a
        self.b = b
        self.node_count = node_count
        super().__init__(
            f"Edge ({a}, {b}) references a node outside [0, {node_count})"
        )
