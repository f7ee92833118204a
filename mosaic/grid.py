"""
Grid sizing - derives the cell grid from the current viewport
"""

import math
from collections import namedtuple

# Cells grow once the viewport is wider than this many base cells
CELLS_ACROSS = 50

Viewport = namedtuple('Viewport', ['width', 'height'])
GridConfig = namedtuple('GridConfig', ['cols', 'rows', 'cell_size'])


def compute_grid(viewport, base_cell_size):
    """Compute column/row counts and the dynamic cell size for a viewport.

    The cell size never drops below base_cell_size, so the division
    below is always safe. A 0-sized viewport gives an empty grid.

    Args:
        viewport: Viewport (or any (width, height) pair) in pixels
        base_cell_size: Lower bound for the cell size, must be > 0

    Returns:
        GridConfig(cols, rows, cell_size)
    """
    if base_cell_size <= 0:
        raise ValueError(f"base_cell_size must be positive, got {base_cell_size}")

    width, height = viewport
    width = max(0, width)
    height = max(0, height)

    cell_size = max(base_cell_size, width / CELLS_ACROSS)
    cols = math.floor(width / cell_size)
    rows = math.floor(height / cell_size)
    return GridConfig(cols, rows, cell_size)
