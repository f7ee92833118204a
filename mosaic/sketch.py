"""
Mosaic sketch - the setup/draw pair driven by the animation loop
"""

import logging

from mosaic.colorizer import noise_scale_for
from mosaic.grid import Viewport, compute_grid
from mosaic.noise import ValueNoise
from mosaic.renderer import render_frame

logger = logging.getLogger(__name__)

DEFAULT_BASE_CELL_SIZE = 20


class MosaicSketch:
    """Animated triangle mosaic.

    setup() is called once with the initial viewport and fixes the noise
    scale for the life of the sketch. draw() is then called every frame
    with the current viewport and frame counter.

    Args:
        noise: Callable noise(x, y) in [0, 1), defaults to a random ValueNoise
        base_cell_size: Smallest allowed cell size in pixels
        rng: Random source for the cool-band hue jitter
    """

    def __init__(self, noise=None, base_cell_size=DEFAULT_BASE_CELL_SIZE, rng=None):
        if base_cell_size <= 0:
            raise ValueError(f"base_cell_size must be positive, got {base_cell_size}")
        self.noise = noise if noise is not None else ValueNoise()
        self.base_cell_size = base_cell_size
        self.rng = rng
        self.noise_scale = None
        self.viewport = None

    @property
    def is_setup(self):
        return self.noise_scale is not None

    def setup(self, surface, viewport):
        """Create the canvas and fix the noise scale from the initial grid"""
        viewport = Viewport(*viewport)
        surface.create_canvas(viewport.width, viewport.height)

        grid = compute_grid(viewport, self.base_cell_size)
        self.noise_scale = noise_scale_for(grid.cell_size)
        self.viewport = viewport
        logger.info("Sketch setup at %dx%d: %d cols x %d rows, cell size %.2f",
                    viewport.width, viewport.height, grid.cols, grid.rows, grid.cell_size)

    def draw(self, surface, viewport, frame):
        """Render one frame, returns the number of triangles drawn"""
        if not self.is_setup:
            raise RuntimeError("draw() called before setup()")

        viewport = Viewport(*viewport)
        if viewport != self.viewport:
            # Noise scale stays as computed at setup
            surface.resize(viewport.width, viewport.height)
            self.viewport = viewport
            logger.debug("Viewport resized to %dx%d", viewport.width, viewport.height)

        return render_frame(surface, viewport, frame, self.noise_scale,
                            self.noise, self.base_cell_size, self.rng)
