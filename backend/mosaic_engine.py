"""
Mosaic execution engine - owns the frame clock and runs the mosaic sketch
"""

import base64
import logging
import threading
import traceback
from io import BytesIO

from backend.canvas import Canvas
from mosaic import MosaicSketch, ValueNoise, Viewport, compute_grid

logger = logging.getLogger(__name__)


class MosaicEngine:
    def __init__(self, width=1280, height=720, base_cell_size=20, seed=None, jpeg_quality=85):
        self.viewport = Viewport(width, height)
        self.screen = Canvas(self.viewport)
        self.seed = seed
        self.sketch = MosaicSketch(noise=ValueNoise(seed), base_cell_size=base_cell_size)
        self.jpeg_quality = jpeg_quality
        # Frame counter, never reset while the engine lives
        self.frame_count = 0
        self.is_initialized = False
        # Render loop and snapshot requests share one canvas
        self._render_lock = threading.Lock()

    def set_viewport(self, width, height):
        """Set the viewport size; applied on the next rendered frame"""
        try:
            width = max(0, int(width))
            height = max(0, int(height))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid viewport size: {width!r} x {height!r}")
        self.viewport = Viewport(width, height)

    def reseed(self, seed=None):
        """Replace the noise field; the noise scale fixed at setup is kept"""
        self.seed = seed
        self.sketch.noise = ValueNoise(seed)
        logger.info("Noise reseeded with %r", seed)

    def render_frame(self):
        """Render one frame and return it as a base64 JPEG data URL.

        Returns:
            (data_url, None) on success, (None, None) when the viewport is
            empty, (None, error_message) if drawing failed
        """
        with self._render_lock:
            return self._render_locked()

    def _render_locked(self):
        viewport = self.viewport
        try:
            # Run setup if this is the first frame
            if not self.is_initialized:
                self.sketch.setup(self.screen, viewport)
                self.is_initialized = True

            self.sketch.draw(self.screen, viewport, self.frame_count)
            self.frame_count += 1

            if viewport.width == 0 or viewport.height == 0:
                return None, None

            # JPEG is much faster to encode than PNG at full-window sizes
            img = self.screen.get_image()
            buffer = BytesIO()
            img.save(buffer, format='JPEG', quality=self.jpeg_quality)
            img_base64 = base64.b64encode(buffer.getvalue()).decode('utf-8')

            return f"data:image/jpeg;base64,{img_base64}", None

        except Exception as e:
            logger.exception("Frame %d failed", self.frame_count)
            error_msg = f"Error rendering frame: {str(e)}\n{traceback.format_exc()}"
            return None, error_msg

    def get_status(self):
        """Get current engine status"""
        grid = compute_grid(self.viewport, self.sketch.base_cell_size)
        noise_scale = self.sketch.noise_scale
        return {
            'initialized': self.is_initialized,
            'frame_count': self.frame_count,
            'viewport': list(self.viewport),
            'grid': {'cols': grid.cols, 'rows': grid.rows, 'cell_size': grid.cell_size},
            'noise_scale': list(noise_scale) if noise_scale else None,
            'seed': self.seed,
        }
