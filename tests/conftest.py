import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


class RecordingSurface:
    """Surface stub that records every drawing call in order."""

    def __init__(self):
        self.calls = []
        self.size = None

    def create_canvas(self, width, height):
        self.size = (width, height)
        self.calls.append(('create_canvas', width, height))

    def resize(self, width, height):
        self.size = (width, height)
        self.calls.append(('resize', width, height))

    def background(self, color):
        self.calls.append(('background', color))

    def fill(self, color):
        self.calls.append(('fill', color))

    def no_stroke(self):
        self.calls.append(('no_stroke',))

    def triangle(self, p1, p2, p3):
        self.calls.append(('triangle', (p1, p2, p3)))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def constant_noise(value):
    def noise(x, y):
        return value
    return noise


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)
