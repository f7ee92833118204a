import os


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value not in (None, '') else default


def _env_float(name, default):
    value = os.environ.get(name)
    return float(value) if value not in (None, '') else default


class Config:
    """Base configuration"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'mosaic_simulator_secret_change_in_production'

    # Mosaic settings
    BASE_CELL_SIZE = _env_float('MOSAIC_BASE_CELL_SIZE', 20)
    # Initial canvas size, replaced once the browser reports its window size
    CANVAS_WIDTH = _env_int('MOSAIC_CANVAS_WIDTH', 1280)
    CANVAS_HEIGHT = _env_int('MOSAIC_CANVAS_HEIGHT', 720)
    TARGET_FPS = _env_int('MOSAIC_TARGET_FPS', 30)
    JPEG_QUALITY = _env_int('MOSAIC_JPEG_QUALITY', 85)
    # None gives a different noise field on every start
    NOISE_SEED = _env_int('MOSAIC_NOISE_SEED', None)

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    def __init__(self):
        if not os.environ.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable must be set in production")
        self.SECRET_KEY = os.environ.get('SECRET_KEY')

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True
    NOISE_SEED = 0
    CANVAS_WIDTH = 100
    CANVAS_HEIGHT = 100

config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
