import time

import pytest

import backend.app as server
from backend.app import create_app, socketio


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


def _events(client, name):
    return [event['args'][0] for event in client.get_received() if event['name'] == name]


def test_index_served(app):
    response = app.test_client().get('/')

    assert response.status_code == 200
    assert b'socket.io' in response.data


def test_connect_reports_status(client):
    statuses = _events(client, 'status')

    assert statuses[0]['type'] == 'success'


def test_snapshot_emits_frame(client):
    client.get_received()
    client.emit('snapshot')

    frames = _events(client, 'frame')
    assert frames[0]['image'].startswith('data:image/jpeg;base64,')


def test_resize_then_status(client):
    client.emit('resize', {'width': 300, 'height': 200})
    client.get_received()
    client.emit('get_status')

    status = _events(client, 'engine_status')[0]
    assert status['viewport'] == [300, 200]
    assert status['grid']['cols'] == 15


def test_bad_resize_reports_error(client):
    client.get_received()
    client.emit('resize', {'width': 'wide', 'height': 10})

    assert _events(client, 'status')[0]['type'] == 'error'


def test_empty_viewport_snapshot(client):
    client.emit('resize', {'width': 0, 'height': 0})
    client.get_received()
    client.emit('snapshot')

    assert _events(client, 'frame') == []


def test_reseed(client):
    client.get_received()
    client.emit('reseed', {'seed': 5})

    assert _events(client, 'status')[0]['type'] == 'success'
    client.emit('get_status')
    assert _events(client, 'engine_status')[0]['seed'] == 5


def test_stop_rendering_when_idle(client):
    client.get_received()
    client.emit('stop_rendering')

    assert _events(client, 'status')[0]['type'] == 'info'


def test_restart_waits_for_previous_render_loop(client, monkeypatch):
    active = []
    peak = []

    def slow_render():
        active.append(1)
        peak.append(len(active))
        time.sleep(0.1)
        active.pop()
        return None, None

    monkeypatch.setattr(server.engine, 'render_frame', slow_render)

    client.emit('start_rendering')
    time.sleep(0.02)
    client.emit('stop_rendering')
    client.emit('start_rendering')
    time.sleep(0.3)
    client.emit('stop_rendering')
    server.render_thread.join(timeout=2)

    assert not server.render_thread.is_alive()
    assert max(peak) == 1
