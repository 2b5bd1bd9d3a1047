# graphgrow/graph/store.py
"""
GraphStore - owns the growing node and edge sequences.

Nodes are integer screen points. Edges are (source, target) index pairs.
Nothing is ever removed, so indices stay valid for the whole run.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Iterator
import logging

from ..core.errors import EdgeIndexError
from ..core.random_source import RandomSource

logger = logging.getLogger(__name__)

Node = Tuple[int, int]
Edge = Tuple[int, int]


def sample_position(width: int, height: int, rng: RandomSource) -> Node:
    """Uniform point in [0, width) x [0, height)."""
    x = rng.uniform(0, width)
    y = rng.uniform(0, height)
    return (x, y)


@dataclass(frozen=True)
class GraphSnapshot:
    """Frozen copy of the graph at one moment."""
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)


class GraphStore:
    """Canonical graph state. Append-only."""

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    @classmethod
    def seeded(cls, width: int, height: int, rng: RandomSource) -> GraphStore:
        """Two random nodes joined by edge (0, 1)."""
        store = cls()
        a = store.add_node(sample_position(width, height, rng))
        b = store.add_node(sample_position(width, height, rng))
        store.add_edge(a, b)
        logger.debug("Seeded graph: nodes=%s edges=%s", store._nodes, store._edges)
        return store

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self, position: Node) -> int:
        """Append a node and return its index."""
        index = len(self._nodes)
        self._nodes.append((int(position[0]), int(position[1])))
        return index

    def add_edge(self, a: int, b: int):
        """Append edge (a, b). Both endpoints must already exist."""
        n = len(self._nodes)
        if not (0 <= a < n and 0 <= b < n):
            raise EdgeIndexError(a, b, n)
        self._edges.append((a, b))

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def position(self, index: int) -> Node:
        return self._nodes[index]

    def iter_edge_segments(self) -> Iterator[Tuple[Node, Node]]:
        """Yield (source position, target position) per edge, in order."""
        for a, b in self._edges:
            yield self._nodes[a], self._nodes[b]

    def snapshot(self) -> GraphSnapshot:
        return GraphSnapshot(nodes=tuple(self._nodes), edges=tuple(self._edges))

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, edges={len(self._edges)})"
