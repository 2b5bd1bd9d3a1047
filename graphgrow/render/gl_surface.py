"""
GL Surface

moderngl-backed Surface. Primitives drawn since the last clear() are
retained and re-submitted on every present(), so draws without a clear
add to what is already on screen. Lines and circle outlines both go
through a single GL_LINES program; coordinates are logical pixels and the
viewport covers the whole framebuffer.

Usage:
    surface = GLSurface(ctx, (400, 400), swap=window.swap_buffers)

    surface.clear(WHITE)
    surface.draw_line((0, 0), (100, 100), BLACK)
    surface.draw_circle((100, 100), 8.0, BLACK)
    surface.present()
"""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple
import logging

import numpy as np
import moderngl

from ..core.errors import SurfaceError
from .commands import Point, RGBA
from .geometry import VERTEX_FLOATS, line_vertices, circle_vertices

logger = logging.getLogger(__name__)

_VERTEX_BYTES = VERTEX_FLOATS * 4

_LINE_VS = """
#version 330
in vec2 in_pos;
in vec4 in_color;
out vec4 v_color;
uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_color = in_color;
}
"""

_LINE_FS = """
#version 330
in vec4 v_color;
out vec4 frag_color;
void main() { frag_color = v_color; }
"""


class GLSurface:

    def __init__(
        self,
        ctx: moderngl.Context,
        size: Tuple[int, int],
        swap: Optional[Callable[[], None]] = None,
        circle_segments: int = 24,
        buffer_size: Optional[Tuple[int, int]] = None,
    ):
        self.ctx = ctx
        self.size = size
        # Framebuffer pixels; larger than size on HiDPI displays
        self.buffer_size = buffer_size or size
        self.circle_segments = circle_segments
        self._swap = swap

        self._clear_color: RGBA = (0.0, 0.0, 0.0, 1.0)
        self._retained: List[np.ndarray] = []

        self._line_prog = None
        self._line_vbo = None
        self._line_vao = None
        self._line_capacity = 0

        self._initialized = False

    def _ensure_initialized(self):
        """Create GPU resources on first use."""
        if self._initialized:
            return
        self._line_prog = self.ctx.program(
            vertex_shader=_LINE_VS,
            fragment_shader=_LINE_FS,
        )
        self._initialized = True

    def _ensure_line_buffer(self, vertex_count: int):
        """Ensure line VBO can hold vertex_count vertices."""
        if self._line_capacity >= vertex_count and self._line_vbo is not None:
            return

        new_capacity = max(vertex_count, self._line_capacity * 2, 256)

        if self._line_vao:
            self._line_vao.release()
        if self._line_vbo:
            self._line_vbo.release()

        self._line_vbo = self.ctx.buffer(reserve=new_capacity * _VERTEX_BYTES, dynamic=True)
        self._line_capacity = new_capacity
        logger.debug("Line buffer grown to %d vertices", new_capacity)

        self._line_vao = self.ctx.vertex_array(
            self._line_prog,
            [(self._line_vbo, "2f 4f", "in_pos", "in_color")],
        )

    # -------------------------------------------------------------------------
    # Surface API
    # -------------------------------------------------------------------------

    def clear(self, color: RGBA):
        self._clear_color = tuple(color)
        self._retained.clear()

    def draw_line(self, p1: Point, p2: Point, color: RGBA):
        self._retained.append(line_vertices(p1, p2, color))

    def draw_circle(self, center: Point, radius: float, color: RGBA):
        self._retained.append(
            circle_vertices(center, radius, color, self.circle_segments)
        )

    def present(self):
        try:
            self._ensure_initialized()

            w, h = self.size
            bw, bh = self.buffer_size
            self.ctx.screen.use()
            self.ctx.viewport = (0, 0, bw, bh)
            self.ctx.clear(*self._clear_color)

            if self._retained:
                vertices = np.concatenate(self._retained)
                self._ensure_line_buffer(len(vertices))
                self._line_vbo.write(vertices.tobytes())
                self._line_prog["u_screen_size"].value = (w, h)
                self._line_vao.render(mode=self.ctx.LINES, vertices=len(vertices))

            if self._swap is not None:
                self._swap()
        except moderngl.Error as e:
            raise SurfaceError(f"present failed: {e}") from e

    def output_size(self) -> Tuple[int, int]:
        return self.size

    @property
    def retained_vertex_count(self) -> int:
        return sum(len(v) for v in self._retained)

    def release(self):
        """Release GPU resources."""
        if self._line_vao:
            self._line_vao.release()
        if self._line_vbo:
            self._line_vbo.release()
        if self._line_prog:
            self._line_prog.release()
        self._initialized = False
