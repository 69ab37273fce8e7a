"""
JSON body parsing for Flask apps.

Registered as a before_request hook so the body is parsed (or rejected) ahead of
the route handler. Handlers read the result from ``g.json_body``.

Rules:
  - only requests with a JSON content type are parsed, others get ``{}``
  - charsets other than utf-8/16/32 are rejected with 415
  - bodies over the byte limit are rejected with 413 (MAX_CONTENT_LENGTH)
  - an empty body parses to ``{}``
  - invalid JSON, or a top-level value that is not an object/array, is a 400
"""

import codecs
import logging
from typing import Any

from flask import Flask, g, request
from werkzeug.exceptions import BadRequest, UnsupportedMediaType

from app_core.config import DEFAULT_JSON_BODY_LIMIT

logger = logging.getLogger(__name__)


def _check_charset() -> None:
    charset = request.mimetype_params.get('charset', 'utf-8').strip().lower()
    if not charset.startswith('utf-'):
        raise UnsupportedMediaType(f"Unsupported charset '{charset.upper()}'")
    try:
        codecs.lookup(charset)
    except LookupError:
        raise UnsupportedMediaType(f"Unsupported charset '{charset.upper()}'")


def read_json_body(strict: bool = True) -> Any:
    """Parse the current request body as JSON. Raises BadRequest on bad input."""
    if not request.get_data(cache=True):
        return {}

    try:
        value = request.get_json(force=True, cache=True)
    except BadRequest as e:
        raise BadRequest("Malformed JSON body") from e

    if strict and not isinstance(value, (dict, list)):
        raise BadRequest("JSON body must be an object or an array")

    return value


def install_json_body_parser(app: Flask, limit: int = DEFAULT_JSON_BODY_LIMIT, strict: bool = True) -> None:
    """Attach the JSON body parser to every request handled by ``app``."""
    # Werkzeug stops reading the input stream once it passes this size
    app.config['MAX_CONTENT_LENGTH'] = limit

    @app.before_request
    def _parse_json_body():
        g.json_body = {}

        if not request.is_json:
            return None

        _check_charset()
        g.json_body = read_json_body(strict=strict)
        logger.debug(f"Parsed JSON body for {request.method} {request.path}")
        return None
