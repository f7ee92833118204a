"""
Flask app for the mosaic simulator
"""

import logging
import os
import threading
import time

from flask import Flask, render_template, request
from flask_socketio import SocketIO, emit

from backend.mosaic_engine import MosaicEngine
from config import config

logger = logging.getLogger(__name__)

app = Flask(__name__, template_folder='../frontend/templates')

socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading')

engine = None
is_running = False
render_thread = None


def build_engine(app_config):
    """Create an engine from the mosaic settings of a Flask config"""
    return MosaicEngine(
        width=app_config['CANVAS_WIDTH'],
        height=app_config['CANVAS_HEIGHT'],
        base_cell_size=app_config['BASE_CELL_SIZE'],
        seed=app_config['NOISE_SEED'],
        jpeg_quality=app_config['JPEG_QUALITY'],
    )


def create_app(config_name=None):
    """Application factory pattern"""
    global engine

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app.config.from_object(config[config_name]())
    engine = build_engine(app.config)
    return app


@app.route('/')
def index():
    """Serve the full-window mosaic view"""
    return render_template('index.html')

@socketio.on('connect')
def handle_connect():
    """Handle client connection"""
    logger.info("Client connected: %s", request.sid)
    emit('status', {'message': 'Connected to mosaic simulator', 'type': 'success'})

@socketio.on('disconnect')
def handle_disconnect():
    """Handle client disconnection"""
    logger.info("Client disconnected: %s", request.sid)

@socketio.on('resize')
def handle_resize(data):
    """Window size reported by the browser, used from the next frame on"""
    try:
        engine.set_viewport(data.get('width'), data.get('height'))
        logger.debug("Viewport set to %s", engine.viewport)
    except Exception as e:
        emit('status', {'message': f'Error resizing: {str(e)}', 'type': 'error'})

@socketio.on('start_rendering')
def handle_start_rendering():
    """Start the rendering loop"""
    global is_running, render_thread

    if is_running:
        emit('status', {'message': 'Already running', 'type': 'info'})
        return

    # A stopped loop may still be inside its last frame
    if render_thread is not None and render_thread.is_alive():
        render_thread.join()

    is_running = True
    render_thread = threading.Thread(target=render_loop)
    render_thread.daemon = True
    render_thread.start()

    emit('status', {'message': 'Rendering started', 'type': 'success'})

@socketio.on('stop_rendering')
def handle_stop_rendering():
    """Stop the rendering loop"""
    global is_running

    is_running = False
    emit('status', {'message': 'Rendering stopped', 'type': 'info'})

@socketio.on('snapshot')
def handle_snapshot():
    """Render a single frame for the requesting client"""
    image_data, error = engine.render_frame()
    if image_data:
        emit('frame', {'image': image_data})
    elif error:
        emit('status', {'message': error, 'type': 'error'})
    else:
        emit('status', {'message': 'Viewport is empty, nothing to draw', 'type': 'info'})

@socketio.on('reseed')
def handle_reseed(data):
    """Switch to a new noise field"""
    try:
        seed = data.get('seed') if data else None
        if seed is not None:
            seed = int(seed)
        engine.reseed(seed)
        emit('status', {'message': f'Noise reseeded ({seed})', 'type': 'success'})
    except Exception as e:
        emit('status', {'message': f'Error reseeding: {str(e)}', 'type': 'error'})

@socketio.on('get_status')
def handle_get_status():
    """Report frame count, grid and noise settings"""
    emit('engine_status', engine.get_status())


def render_loop():
    """Main rendering loop that runs in a separate thread"""
    global is_running

    frame_time = 1.0 / app.config['TARGET_FPS']
    frame_count = 0

    logger.info("Render loop started")

    while is_running:
        start_time = time.time()

        try:
            image_data, error = engine.render_frame()

            if image_data:
                socketio.emit('frame', {'image': image_data})
                frame_count += 1
                if frame_count % 300 == 0:
                    logger.info("Rendered %d frames", frame_count)
            elif error:
                logger.error("Render error: %s", error)
                socketio.emit('status', {'message': error, 'type': 'error'})
                is_running = False

        except Exception as e:
            logger.exception("Exception in render loop")
            socketio.emit('status', {'message': f'Render error: {str(e)}', 'type': 'error'})
            is_running = False

        # Maintain target FPS
        elapsed = time.time() - start_time
        time.sleep(max(0, frame_time - elapsed))

    logger.info("Render loop stopped")


create_app()

if __name__ == '__main__':
    logging.basicConfig(
        level=logging.DEBUG if app.config['DEBUG'] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting mosaic simulator...")

    port = int(os.environ.get('PORT', 5001))
    host = os.environ.get('HOST', '0.0.0.0')

    if app.config['DEBUG']:
        logger.info("Development mode: http://localhost:%d", port)
        socketio.run(app, host=host, port=port, debug=True, allow_unsafe_werkzeug=True)
    else:
        logger.info("Production mode: http://%s:%d", host, port)
        socketio.run(app, host=host, port=port, debug=False)
