"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    AUTH_FAIL_URL,
    CLIENT_URL,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DATABASE_URL,
    DB_RESET,
    GITHUB_CALLBACK_URL,
    GITHUB_CLIENT_ID,
    GITHUB_CLIENT_SECRET,
    GITHUB_SCOPE,
    HOST,
    LOG_LEVEL,
    PORT,
    SESSION_MAX_AGE,
    SESSION_SECRET,
)
from .database import engine, get_session
from .log import configure_logging
from .time import isoformat, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "AUTH_FAIL_URL",
    "CLIENT_URL",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DATABASE_URL",
    "DB_RESET",
    "GITHUB_CALLBACK_URL",
    "GITHUB_CLIENT_ID",
    "GITHUB_CLIENT_SECRET",
    "GITHUB_SCOPE",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "SESSION_MAX_AGE",
    "SESSION_SECRET",
    "configure_logging",
    "engine",
    "get_session",
    "isoformat",
    "utcnow",
]
