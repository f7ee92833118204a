"""
Noise colorizer - maps a point and frame to an HSB color.

Three noise samples with different offsets drive hue, saturation and
brightness independently. Hue is split into a warm band (0-24 degrees)
and a near-constant cool band around 180 degrees with a little random
sparkle.
"""

import random
from collections import namedtuple

import numpy as np

# HSB(A) color with ranges 360 / 100 / 100 / 100
Color = namedtuple('Color', ['hue', 'saturation', 'brightness', 'alpha'])
NoiseScale = namedtuple('NoiseScale', ['x', 'y'])

# Hue band split
WARM_THRESHOLD = 0.3
WARM_HUE_RANGE = 80
COOL_HUE = 180
COOL_PIVOT = 0.6
COOL_JITTER = 0.01

# Pixels the hue sampling window scrolls per frame
HUE_SCROLL = 10
SATURATION_SCALE = 0.1
SATURATION_GAIN = 140
BRIGHTNESS_SCALE = 0.1
BRIGHTNESS_DRIFT = 0.01
BRIGHTNESS_Y_OFFSET = 100

FILL_ALPHA = 90


def noise_scale_for(cell_size):
    """Noise scale matching a cell size; larger cells stretch the color bands less"""
    return NoiseScale(0.1 / cell_size, 0.1 / cell_size)


def _clamp(value, low, high):
    return max(low, min(high, value))


def hue_from_noise(n, rng=None):
    """Map a hue noise sample to a hue in degrees.

    Args:
        n: Noise sample in [0, 1)
        rng: Object with a random() method, defaults to the random module

    Returns:
        n * 80 for n < 0.3, otherwise 180 jittered by at most 0.004
    """
    if n < WARM_THRESHOLD:
        return n * WARM_HUE_RANGE
    if rng is None:
        rng = random
    return COOL_HUE + (n - COOL_PIVOT) * rng.random() * COOL_JITTER


def color_at(point, frame, noise_scale, noise, rng=None):
    """Sample the fill color for a point on a given frame.

    Args:
        point: (x, y) pixel position
        frame: Current frame counter
        noise_scale: NoiseScale fixed at setup
        noise: Callable noise(x, y) returning a float in [0, 1)
        rng: Random source for the cool-band jitter

    Returns:
        Color with alpha fixed at 90
    """
    x, y = point

    n = noise((x + frame * HUE_SCROLL) * noise_scale.x,
              (y + frame * HUE_SCROLL) * noise_scale.y)
    saturation = noise(x * SATURATION_SCALE, y * SATURATION_SCALE) * SATURATION_GAIN
    brightness = noise(x * BRIGHTNESS_SCALE + frame * BRIGHTNESS_DRIFT,
                       y * BRIGHTNESS_SCALE + BRIGHTNESS_Y_OFFSET) * 100

    return Color(
        hue=hue_from_noise(n, rng),
        saturation=_clamp(saturation, 0, 100),
        brightness=_clamp(brightness, 0, 100),
        alpha=FILL_ALPHA,
    )


def _random_array(rng, size):
    if rng is None:
        return np.random.random_sample(size)
    if isinstance(rng, np.random.Generator):
        return rng.random(size)
    if isinstance(rng, np.random.RandomState):
        return rng.random_sample(size)
    return np.fromiter((rng.random() for _ in range(size)), dtype=float, count=size)


def _noise_array(noise, x, y):
    # Stub noise sources may answer an array query with a single float
    return np.broadcast_to(np.asarray(noise(x, y), dtype=float), x.shape)


def colors_at(points, frame, noise_scale, noise, rng=None):
    """Sample fill colors for many points of one frame in a single pass.

    Same mapping as color_at, with each channel computed over numpy
    arrays. Each point in the cool band gets its own jitter draw.

    Args:
        points: Sequence of (x, y) pixel positions
        frame: Current frame counter
        noise_scale: NoiseScale fixed at setup
        noise: Noise source accepting numpy arrays, or a scalar callable
            that returns a constant
        rng: Random source for the cool-band jitter; numpy generators are
            used directly, anything else is asked once per point

    Returns:
        List of Colors in the same order as points
    """
    if len(points) == 0:
        return []

    xy = np.asarray(points, dtype=float)
    x = xy[:, 0]
    y = xy[:, 1]

    n = _noise_array(noise, (x + frame * HUE_SCROLL) * noise_scale.x,
                     (y + frame * HUE_SCROLL) * noise_scale.y)
    saturation = _noise_array(noise, x * SATURATION_SCALE, y * SATURATION_SCALE) * SATURATION_GAIN
    brightness = _noise_array(noise, x * BRIGHTNESS_SCALE + frame * BRIGHTNESS_DRIFT,
                              y * BRIGHTNESS_SCALE + BRIGHTNESS_Y_OFFSET) * 100

    warm = n < WARM_THRESHOLD
    jitter = np.zeros(n.shape)
    cool_count = int(np.count_nonzero(~warm))
    if cool_count:
        jitter[~warm] = _random_array(rng, cool_count)
    hue = np.where(warm, n * WARM_HUE_RANGE, COOL_HUE + (n - COOL_PIVOT) * jitter * COOL_JITTER)

    return [
        Color(h, s, b, FILL_ALPHA)
        for h, s, b in zip(hue.tolist(),
                           np.clip(saturation, 0, 100).tolist(),
                           np.clip(brightness, 0, 100).tolist())
    ]
