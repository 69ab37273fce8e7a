"""
Runtime settings for the HTTP service, read from the environment (.env supported)
"""
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_PORT = 3000
DEFAULT_JSON_BODY_LIMIT = 100 * 1024


@dataclass(frozen=True)
class Settings:
    host: str = '0.0.0.0'
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = 'INFO'
    json_body_limit: int = DEFAULT_JSON_BODY_LIMIT
    cors_origins: Tuple[str, ...] = ('*',)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.
    Values already present in the environment win over the .env file.
    """
    load_dotenv(dotenv_path)

    port = _int_env('PORT', DEFAULT_PORT)
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT must be between 0 and 65535, got {port}")

    json_body_limit = _int_env('JSON_BODY_LIMIT', DEFAULT_JSON_BODY_LIMIT)
    if json_body_limit <= 0:
        raise ValueError(f"JSON_BODY_LIMIT must be positive, got {json_body_limit}")

    origins = tuple(
        o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()
    ) or ('*',)

    return Settings(
        host=os.getenv('HOST', '0.0.0.0').strip() or '0.0.0.0',
        port=port,
        debug=_bool_env('DEBUG', False),
        log_level=os.getenv('LOG_LEVEL', 'INFO').strip().upper() or 'INFO',
        json_body_limit=json_body_limit,
        cors_origins=origins,
    )
