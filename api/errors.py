from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


def register_error_handlers(app: Flask) -> None:
    """Render framework errors as JSON and hide details of unexpected failures."""

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({
            "error": e.description,
            "status": e.code
        }), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e: Exception):
        # Log error without exposing sensitive details
        app.logger.error(f"Unhandled error: {type(e).__name__}")
        return jsonify({
            "error": "Internal server error",
            "status": 500
        }), 500
