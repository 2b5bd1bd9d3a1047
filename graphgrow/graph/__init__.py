"""
Graph state.
"""

from .store import GraphStore, GraphSnapshot, Node, Edge, sample_position

__all__ = ['GraphStore', 'GraphSnapshot', 'Node', 'Edge', 'sample_position']
