# /medprosana/utils/error_handlers.py
from flask import jsonify, current_app, request
from werkzeug.exceptions import HTTPException
from medprosana.extensions import db


def register_error_handlers(app):
    @app.before_request
    def answer_preflight():
        # Any path accepts OPTIONS; CORS headers are added on the way out
        if request.method == 'OPTIONS':
            return '', 204

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(error):
        return jsonify({'error': 'Route not found'}), 404

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        current_app.logger.exception(f"Internal server error on {request.method} {request.path}: {error}")
        return jsonify({'error': 'Internal Server Error'}), 500
