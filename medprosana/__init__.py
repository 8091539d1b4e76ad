import os
from flask import Flask
from medprosana.extensions import db, migrate, cors
from medprosana.utils.error_handlers import register_error_handlers
from medprosana.commands import register_commands
from medprosana.config import config


def create_app(config_name=None):
    app = Flask(__name__)
    config_name = config_name or os.environ.get('FLASK_CONFIG', 'default')
    config_class = config[config_name]
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        origins=app.config['ALLOWED_ORIGINS'],
        send_wildcard=True,
        allow_headers=['Content-Type'],
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    )

    # Initialize app with config
    config_class.init_app(app)

    # Register blueprints
    from medprosana.api import api_bp
    app.register_blueprint(api_bp, url_prefix='/api')

    # Register error handlers and commands
    register_error_handlers(app)
    register_commands(app)

    return app
