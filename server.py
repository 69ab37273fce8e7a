#!/usr/bin/env python3
"""
Starts the HTTP service: one Flask app with a JSON body parser and a single
home route, served by Werkzeug on the configured port (3000 by default).
"""

import logging
from typing import Optional

from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server

from api.index import create_app
from app_core.config import Settings, load_settings
from app_core.log import setup_logging

logger = logging.getLogger(__name__)


def listen(app: Flask, settings: Settings) -> BaseWSGIServer:
    """
    Bind the listener. Werkzeug reports a failed bind (e.g. port already in use)
    by exiting with status 1; address resolution errors surface as OSError.
    """
    try:
        server = make_server(settings.host, settings.port, app, threaded=True)
    except (OSError, SystemExit):
        logger.error(f"Error starting server on {settings.host}:{settings.port}")
        raise

    logger.info(f"Server is running on http://localhost:{server.server_port}")
    return server


def main(settings: Optional[Settings] = None):
    if settings is None:
        settings = load_settings()

    setup_logging(settings.log_level)

    app = create_app(settings)
    server = listen(app, settings)
    server.serve_forever()


if __name__ == '__main__':
    main()
