import base64
import threading
import time
from io import BytesIO

import pytest
from PIL import Image

from backend.mosaic_engine import MosaicEngine


def _decode(data_url):
    prefix = "data:image/jpeg;base64,"
    assert data_url.startswith(prefix)
    return Image.open(BytesIO(base64.b64decode(data_url[len(prefix):])))


def test_render_frame_returns_jpeg():
    engine = MosaicEngine(width=100, height=60, seed=0)

    image_data, error = engine.render_frame()

    assert error is None
    assert _decode(image_data).size == (100, 60)


def test_frame_counter_advances():
    engine = MosaicEngine(width=40, height=40, seed=0)

    for _ in range(3):
        engine.render_frame()

    assert engine.frame_count == 3
    assert engine.is_initialized


def test_frames_animate():
    engine = MosaicEngine(width=60, height=60, seed=0)

    first, _ = engine.render_frame()
    for _ in range(20):
        last, _ = engine.render_frame()

    assert first != last


def test_resize_applies_on_next_frame():
    engine = MosaicEngine(width=100, height=100, seed=0)
    engine.render_frame()
    scale = engine.sketch.noise_scale

    engine.set_viewport(2000, 100)
    image_data, error = engine.render_frame()

    assert error is None
    assert _decode(image_data).size == (2000, 100)
    assert engine.get_status()['grid'] == {'cols': 50, 'rows': 2, 'cell_size': 40.0}
    assert engine.sketch.noise_scale == scale


def test_empty_viewport_is_a_no_op_frame():
    engine = MosaicEngine(width=100, height=100, seed=0)
    engine.set_viewport(0, 0)

    assert engine.render_frame() == (None, None)
    assert engine.frame_count == 1


def test_invalid_viewport_rejected():
    engine = MosaicEngine(seed=0)

    with pytest.raises(ValueError):
        engine.set_viewport("wide", None)


def test_draw_failure_reported_as_error():
    engine = MosaicEngine(width=40, height=40, seed=0)

    def broken_noise(x, y):
        raise ZeroDivisionError("boom")

    engine.sketch.noise = broken_noise
    image_data, error = engine.render_frame()

    assert image_data is None
    assert "boom" in error


def test_reseed_keeps_noise_scale():
    engine = MosaicEngine(width=100, height=100, seed=0)
    engine.render_frame()
    scale = engine.sketch.noise_scale

    engine.reseed(42)

    assert engine.seed == 42
    assert engine.sketch.noise.seed == 42
    assert engine.sketch.noise_scale == scale


def test_status_before_first_frame():
    status = MosaicEngine(width=100, height=100, seed=0).get_status()

    assert status['initialized'] is False
    assert status['frame_count'] == 0
    assert status['viewport'] == [100, 100]
    assert status['noise_scale'] is None


def test_concurrent_render_calls_are_serialized():
    engine = MosaicEngine(width=40, height=40, seed=0)
    engine.render_frame()
    active = []
    peak = []

    def slow_draw(surface, viewport, frame):
        active.append(frame)
        peak.append(len(active))
        time.sleep(0.05)
        active.remove(frame)
        return 0

    engine.sketch.draw = slow_draw
    threads = [threading.Thread(target=engine.render_frame) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert max(peak) == 1
    assert engine.frame_count == 5
