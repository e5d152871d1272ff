"""
Configuration setup for the session service.

This module handles all configuration initialization including:
- Session cookie options
- Session backend selection
- Environment variables parsing
"""
import os
import logging

from session import SameSite, SessionOptions

logger = logging.getLogger('sessions.service.config')

BACKEND_REDIS = "redis"
BACKEND_MEMORY = "memory"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def get_session_options() -> SessionOptions:
    """
    Parse and return the session options from environment variables.

    Returns:
        Frozen SessionOptions instance

    Raises:
        ValueError: if SESSION_MAX_AGE or SESSION_SAMESITE hold invalid values
    """
    max_age_raw = os.getenv("SESSION_MAX_AGE", "1800")
    try:
        max_age = int(max_age_raw)
    except ValueError:
        raise ValueError(f"SESSION_MAX_AGE must be an integer number of seconds, got '{max_age_raw}'")
    if max_age <= 0:
        raise ValueError(f"SESSION_MAX_AGE must be a positive number of seconds, got {max_age}")

    samesite_raw = os.getenv("SESSION_SAMESITE", "lax").strip().lower()
    try:
        same_site = SameSite(samesite_raw)
    except ValueError:
        valid = ", ".join(s.value for s in SameSite)
        raise ValueError(f"SESSION_SAMESITE must be one of [{valid}], got '{samesite_raw}'")

    # For development, allow insecure cookies over HTTP
    secure = _env_flag("SECURE_COOKIES", "true")
    if not secure:
        logger.warning("SECURE_COOKIES is false, session cookies will be sent over plain HTTP")

    options = SessionOptions(
        name=os.getenv("SESSION_COOKIE_NAME", "session"),
        domain=os.getenv("SESSION_COOKIE_DOMAIN") or None,  # Set to .example.com for subdomain sharing
        path=os.getenv("SESSION_PATH", "/"),
        max_age=max_age,
        http_only=_env_flag("SESSION_HTTP_ONLY", "true"),
        secure=secure,
        same_site=same_site,
        prefix=os.getenv("SESSION_ID_PREFIX", "sess:"),
    )

    if not options.name:
        logger.warning("SESSION_COOKIE_NAME is empty, sessions are disabled")

    logger.info(f"Session cookie '{options.name}' configured for path '{options.path}' with max-age {options.max_age}s")
    return options


def get_session_backend_kind() -> str:
    """
    Return which session backend to use, 'redis' (default) or 'memory'.
    """
    kind = os.getenv("SESSION_BACKEND", BACKEND_REDIS).strip().lower()
    if kind not in (BACKEND_REDIS, BACKEND_MEMORY):
        raise ValueError(f"SESSION_BACKEND must be '{BACKEND_REDIS}' or '{BACKEND_MEMORY}', got '{kind}'")
    return kind


def get_redis_url() -> str:
    return os.getenv("REDIS_URL", "redis://localhost:6379")


__all__ = [
    'get_session_options',
    'get_session_backend_kind',
    'get_redis_url',
    'BACKEND_REDIS',
    'BACKEND_MEMORY',
]
