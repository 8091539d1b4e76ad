# /medprosana/config.py
import os
import secrets
import logging
from logging.handlers import RotatingFileHandler


class Config:
    """Base configuration settings"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///medprosana.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
    }

    # CORS - the browser client is served from a different origin
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', '*').split(',')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Hemodialysis protocol seeded for every new patient
    DEFAULT_PROTOCOL = {
        'dialyzer': 'F8HPS',
        'access': 'Fistula',
        'dialysateFlow': '500 ml/min',
        'bloodFlow': '300 ml/min',
        'duration': '4 hours',
    }

    # Client
    API_BASE = os.environ.get('MEDPROSANA_API_BASE', 'http://127.0.0.1:5000/api')
    CLIENT_TIMEOUT = float(os.environ.get('MEDPROSANA_CLIENT_TIMEOUT', 10))
    CLIENT_MAX_WORKERS = 5

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration"""
        if not app.debug and not app.testing:
            log_dir = app.config['LOG_DIR']
            if not os.path.exists(log_dir):
                os.mkdir(log_dir)

            # Production logging setup with rotation
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'medprosana.log'), maxBytes=10240000, backupCount=10
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(app.config['LOG_LEVEL'])
            app.logger.addHandler(file_handler)
            app.logger.setLevel(app.config['LOG_LEVEL'])
            app.logger.info('MedProSana application startup')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or 'sqlite:///medprosana-dev.db'

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        if not app.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
        app.logger.setLevel(logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    API_BASE = 'http://localhost/api'
    CLIENT_MAX_WORKERS = 1

    @staticmethod
    def init_app(app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        if not os.environ.get('DATABASE_URL'):
            app.logger.error('DATABASE_URL not set in production!')
            raise ValueError('DATABASE_URL must be set in production')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
