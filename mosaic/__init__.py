"""
Noise-colored triangle mosaic
"""

from mosaic.colorizer import (
    Color,
    NoiseScale,
    color_at,
    colors_at,
    hue_from_noise,
    noise_scale_for,
)
from mosaic.geometry import Point, Subdivision, Triangle, subdivide, time_factor
from mosaic.grid import GridConfig, Viewport, compute_grid
from mosaic.noise import ValueNoise
from mosaic.renderer import BACKGROUND, DrawCommand, iter_draw_commands, render_frame
from mosaic.sketch import MosaicSketch
