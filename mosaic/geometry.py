"""
Cell subdivision - splits one grid cell into 8 triangles around an
oscillating center point
"""

import math
from collections import namedtuple

# Radians per frame for the center oscillation
OSCILLATION_RATE = 0.05
# Maximum center offset as a fraction of the cell size
OSCILLATION_AMPLITUDE = 0.1

Point = namedtuple('Point', ['x', 'y'])

# vertices: 3 Points, sample: the vertex whose color is used for the fill
Triangle = namedtuple('Triangle', ['vertices', 'sample'])

# corners: (top_left, top_right, bottom_left, bottom_right)
# midpoints: (top, left, right, bottom)
Subdivision = namedtuple('Subdivision', ['corners', 'midpoints', 'center', 'triangles'])


def time_factor(frame):
    """Oscillation shared by every cell in a frame, in [-1, 1]"""
    return math.sin(frame * OSCILLATION_RATE)


def midpoint(a, b):
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def subdivide(px, py, size, frame):
    """Subdivide the cell whose top-left pixel is (px, py).

    Each diagonal quadrant of the cell is split in two by its edge
    midpoint, giving 8 triangles that all share the same center.

    Args:
        px, py: Top-left corner of the cell in pixels
        size: Cell edge length in pixels
        frame: Current frame counter

    Returns:
        Subdivision with the triangles in drawing order
    """
    top_left = Point(px, py)
    top_right = Point(px + size, py)
    bottom_left = Point(px, py + size)
    bottom_right = Point(px + size, py + size)

    offset = time_factor(frame) * size * OSCILLATION_AMPLITUDE
    center = Point(px + size / 2 + offset, py + size / 2 + offset)

    mid_top = midpoint(top_left, top_right)
    mid_left = midpoint(top_left, bottom_left)
    mid_right = midpoint(top_right, bottom_right)
    mid_bottom = midpoint(bottom_left, bottom_right)

    triangles = (
        Triangle((top_left, mid_top, center), top_left),
        Triangle((mid_top, top_right, center), mid_top),
        Triangle((top_left, center, mid_left), mid_left),
        Triangle((mid_left, center, bottom_left), mid_left),
        Triangle((top_right, mid_right, center), mid_right),
        Triangle((mid_right, bottom_right, center), mid_right),
        Triangle((bottom_left, center, mid_bottom), bottom_left),
        Triangle((mid_bottom, bottom_right, center), mid_bottom),
    )

    return Subdivision(
        corners=(top_left, top_right, bottom_left, bottom_right),
        midpoints=(mid_top, mid_left, mid_right, mid_bottom),
        center=center,
        triangles=triangles,
    )
