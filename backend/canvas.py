"""
Sketch-style drawing surface for the mosaic simulator
Renders HSB fill/stroke/triangle commands to a PIL Image instead of a display
"""

import colorsys

from PIL import Image, ImageDraw

# HSB(A) channel maxima, same ranges the mosaic colors use
HUE_MAX = 360
SATURATION_MAX = 100
BRIGHTNESS_MAX = 100
ALPHA_MAX = 100

DEFAULT_STROKE = (0, 0, 0, 255)


def hsb_to_rgba(color):
    """Convert an (h, s, b[, a]) color to an 8-bit RGBA tuple.

    Hue wraps around the circle; the other channels are clamped to
    their range, so over-range saturation is drawn as full saturation.
    """
    if len(color) == 4:
        hue, saturation, brightness, alpha = color
    else:
        hue, saturation, brightness = color
        alpha = ALPHA_MAX

    h = (hue % HUE_MAX) / HUE_MAX
    s = max(0.0, min(1.0, saturation / SATURATION_MAX))
    v = max(0.0, min(1.0, brightness / BRIGHTNESS_MAX))
    a = max(0.0, min(1.0, alpha / ALPHA_MAX))

    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return (round(r * 255), round(g * 255), round(b * 255), round(a * 255))


class Canvas:
    def __init__(self, size):
        self.width, self.height = size
        self.fill_color = (255, 255, 255, 255)
        self.stroke_color = DEFAULT_STROKE
        self.stroke_weight = 1
        self._new_image()

    def _new_image(self, color=(0, 0, 0)):
        self.image = Image.new('RGB', (self.width, self.height), color)
        # RGBA draw mode blends semi-opaque fills onto the RGB image
        self.draw = ImageDraw.Draw(self.image, 'RGBA')

    def create_canvas(self, width, height):
        """Start a fresh canvas at the given size"""
        self.width, self.height = int(width), int(height)
        self._new_image()

    def resize(self, width, height):
        """Change the canvas size; contents are discarded"""
        if (int(width), int(height)) != (self.width, self.height):
            self.create_canvas(width, height)

    def background(self, color):
        """Clear the canvas to an HSB color"""
        r, g, b, a = hsb_to_rgba(color)
        self._new_image((r, g, b))

    def fill(self, color):
        """Set the HSB fill color for following shapes"""
        self.fill_color = hsb_to_rgba(color)

    def stroke(self, color, weight=1):
        """Set the HSB outline color for following shapes.

        The mosaic only ever calls no_stroke(); this re-enables outlines so
        the canvas covers the full fill/stroke pair of a sketch surface.
        """
        self.stroke_color = hsb_to_rgba(color)
        self.stroke_weight = weight

    def no_stroke(self):
        """Disable outlines for following shapes"""
        self.stroke_color = None

    def triangle(self, p1, p2, p3):
        """Draw a filled triangle with the current fill and stroke"""
        if self.width == 0 or self.height == 0:
            return

        points = [(p1[0], p1[1]), (p2[0], p2[1]), (p3[0], p3[1])]
        if self.stroke_color is None:
            self.draw.polygon(points, fill=self.fill_color)
        else:
            self.draw.polygon(points, fill=self.fill_color,
                              outline=self.stroke_color, width=self.stroke_weight)

    def get_size(self):
        """Return canvas dimensions"""
        return (self.width, self.height)

    def get_image(self):
        """Get PIL Image for export"""
        return self.image
