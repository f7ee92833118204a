"""
Mosaic renderer - walks the grid once per frame and draws every cell
as 8 noise-colored triangles
"""

from collections import namedtuple

from mosaic.colorizer import Color, colors_at
from mosaic.geometry import subdivide
from mosaic.grid import compute_grid

# hue=0, sat=0, bri=100 -> white
BACKGROUND = Color(0, 0, 100, 100)

DrawCommand = namedtuple('DrawCommand', ['triangle', 'color'])


def iter_draw_commands(viewport, frame, noise_scale, noise, base_cell_size, rng=None):
    """Yield one DrawCommand per triangle, rows outer and columns inner.

    The grid is recomputed from the viewport on every call, so a resize
    shows up on the next frame without any other bookkeeping. Colors for
    the whole frame are sampled in one batch.
    """
    grid = compute_grid(viewport, base_cell_size)
    size = grid.cell_size

    triangles = [
        triangle
        for y in range(grid.rows)
        for x in range(grid.cols)
        for triangle in subdivide(x * size, y * size, size, frame).triangles
    ]
    colors = colors_at([triangle.sample for triangle in triangles],
                       frame, noise_scale, noise, rng)

    for triangle, color in zip(triangles, colors):
        yield DrawCommand(triangle.vertices, color)


def render_frame(surface, viewport, frame, noise_scale, noise, base_cell_size, rng=None):
    """Repaint the whole surface for one frame.

    Args:
        surface: Drawing surface with background/fill/no_stroke/triangle
        viewport: (width, height) in pixels
        frame: Current frame counter
        noise_scale: NoiseScale fixed at setup
        noise: Callable noise(x, y)
        base_cell_size: Lower bound for the cell size
        rng: Random source for the cool-band hue jitter

    Returns:
        Number of triangles drawn
    """
    surface.background(BACKGROUND)

    count = 0
    for command in iter_draw_commands(viewport, frame, noise_scale, noise, base_cell_size, rng):
        surface.fill(command.color)
        surface.no_stroke()
        surface.triangle(*command.triangle)
        count += 1

    return count
