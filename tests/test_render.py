from types import SimpleNamespace

import numpy as np
import pytest

from graphgrow.core.errors import SurfaceError
from graphgrow.render.commands import CmdDrawCircle
from graphgrow.render.gl_surface import GLSurface
from graphgrow.render.geometry import (
    line_vertices, circle_outline, circle_vertices,
)
from graphgrow.render.surface import RecordingSurface

RED = (1.0, 0.0, 0.0, 1.0)


def test_recording_surface_records_calls():
    s = RecordingSurface(400, 300)
    s.clear(RED)
    s.draw_line((0, 0), (1, 1), RED)
    s.draw_circle((5, 5), 8, RED)
    s.present()

    assert s.output_size() == (400, 300)
    assert s.present_count == 1
    assert s.commands.get_stats() == {
        "CmdClear": 1, "CmdDrawLine": 1, "CmdDrawCircle": 1, "CmdPresent": 1,
    }
    assert s.commands.get_draw_count() == 2


def test_recording_surface_failure_injection():
    s = RecordingSurface(fail_on=CmdDrawCircle, fail_after=2)
    s.draw_circle((0, 0), 1, RED)
    s.draw_circle((0, 0), 1, RED)
    with pytest.raises(SurfaceError):
        s.draw_circle((0, 0), 1, RED)
    assert len(s.commands) == 2


def test_line_vertices_layout():
    v = line_vertices((1, 2), (3, 4), RED)
    assert v.shape == (2, 6)
    assert v.dtype == np.float32
    assert list(v[0]) == [1, 2, 1, 0, 0, 1]
    assert list(v[1]) == [3, 4, 1, 0, 0, 1]


def test_circle_outline_points_on_radius():
    pts = circle_outline((100, 50), 8.0, segments=16)
    assert pts.shape == (16, 2)
    r = np.hypot(pts[:, 0] - 100, pts[:, 1] - 50)
    np.testing.assert_allclose(r, 8.0, rtol=1e-5)
    np.testing.assert_allclose(pts[0], [108.0, 50.0], atol=1e-4)


def test_circle_vertices_close_the_loop():
    v = circle_vertices((0, 0), 1.0, RED, segments=8)
    assert v.shape == (16, 6)
    # Last segment ends where the first one starts
    np.testing.assert_allclose(v[-1, 0:2], v[0, 0:2], atol=1e-6)
    # Each segment starts where the previous ended
    np.testing.assert_allclose(v[2::2, 0:2], v[1:-1:2, 0:2], atol=1e-6)
    assert np.all(v[:, 2:6] == RED)



def test_gl_surface_retains_draws_until_clear():
    s = GLSurface(ctx=None, size=(400, 400), circle_segments=12)
    assert s.output_size() == (400, 400)

    s.clear(RED)
    s.draw_line((0, 0), (10, 10), RED)
    s.draw_circle((10, 10), 8.0, RED)
    assert s.retained_vertex_count == 2 + 12 * 2

    s.draw_line((10, 10), (20, 20), RED)
    assert s.retained_vertex_count == 2 + 12 * 2 + 2

    s.clear(RED)
    assert s.retained_vertex_count == 0


class FakeCtx:
    """Records the GL calls GLSurface.present() makes."""

    LINES = "lines"

    def __init__(self):
        self.screen = SimpleNamespace(use=lambda: None)
        self.viewport = None
        self.cleared = []
        self.rendered = []
        self.uniforms = {}

    def program(self, vertex_shader, fragment_shader):
        return self

    def __getitem__(self, name):
        return self.uniforms.setdefault(name, SimpleNamespace(value=None))

    def buffer(self, reserve, dynamic):
        return SimpleNamespace(write=lambda data: None, release=lambda: None)

    def vertex_array(self, prog, content):
        ctx = self

        class VAO:
            def render(self, mode, vertices):
                ctx.rendered.append((mode, vertices))

            def release(self):
                pass

        return VAO()

    def clear(self, *color):
        self.cleared.append(color)

    def release(self):
        pass


def test_gl_surface_viewport_covers_hidpi_framebuffer():
    ctx = FakeCtx()
    swaps = []
    s = GLSurface(ctx, (400, 400), swap=lambda: swaps.append(1),
                  circle_segments=12, buffer_size=(800, 800))
    s.clear(RED)
    s.draw_line((0, 0), (10, 10), RED)
    s.draw_circle((10, 10), 8.0, RED)
    s.present()

    assert ctx.viewport == (0, 0, 800, 800)
    assert ctx.uniforms["u_screen_size"].value == (400, 400)
    assert ctx.cleared == [RED]
    assert ctx.rendered == [("lines", 2 + 12 * 2)]
    assert swaps == [1]


def test_gl_surface_viewport_defaults_to_logical_size():
    ctx = FakeCtx()
    s = GLSurface(ctx, (400, 300))
    s.clear(RED)
    s.present()

    assert ctx.viewport == (0, 0, 400, 300)
    assert ctx.rendered == []
