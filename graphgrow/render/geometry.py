"""
Vertex builders for the GL surface.

Everything is emitted as GL_LINES vertex pairs: pos(2f) + color(4f).
"""

from __future__ import annotations

import numpy as np

from .commands import Point, RGBA

VERTEX_FLOATS = 6  # x, y, r, g, b, a


def line_vertices(p1: Point, p2: Point, color: RGBA) -> np.ndarray:
    """Two vertices for one segment, shape (2, 6)."""
    verts = np.empty((2, VERTEX_FLOATS), dtype=np.float32)
    verts[0] = [p1[0], p1[1], *color]
    verts[1] = [p2[0], p2[1], *color]
    return verts


def circle_outline(center: Point, radius: float, segments: int = 24) -> np.ndarray:
    """Points on the circle, shape (segments, 2), first point at angle 0."""
    angles = np.linspace(0.0, 2.0 * np.pi, segments, endpoint=False)
    pts = np.empty((segments, 2), dtype=np.float32)
    pts[:, 0] = center[0] + radius * np.cos(angles)
    pts[:, 1] = center[1] + radius * np.sin(angles)
    return pts


def circle_vertices(
    center: Point, radius: float, color: RGBA, segments: int = 24
) -> np.ndarray:
    """Closed outline as line pairs, shape (segments * 2, 6)."""
    pts = circle_outline(center, radius, segments)
    nxt = np.roll(pts, -1, axis=0)

    verts = np.empty((segments * 2, VERTEX_FLOATS), dtype=np.float32)
    verts[0::2, 0:2] = pts
    verts[1::2, 0:2] = nxt
    verts[:, 2:6] = color
    return verts

