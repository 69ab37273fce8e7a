from typing import Optional

from flask import Flask
from flask_cors import CORS

from api.errors import register_error_handlers
from api.handlers import root_handler
from app_core.config import Settings, load_settings
from app_core.json_body import install_json_body_parser


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app: JSON body parser, error handlers and the home route."""
    if settings is None:
        settings = load_settings()

    app = Flask(__name__)
    app.config['DEBUG'] = settings.debug
    CORS(app, origins=list(settings.cors_origins))

    # Middleware to parse JSON requests
    install_json_body_parser(app, limit=settings.json_body_limit)
    register_error_handlers(app)

    # Home route
    app.add_url_rule('/', 'root', root_handler, methods=['GET'])

    return app

