"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# GitHub OAuth configuration -------------------------------------------------
GITHUB_CLIENT_ID = _require_env("GITHUB_CLIENT_ID")
GITHUB_CLIENT_SECRET = _require_env("GITHUB_CLIENT_SECRET")
GITHUB_CALLBACK_URL = _require_env("GITHUB_CALLBACK_URL")
GITHUB_SCOPE = os.getenv("GITHUB_SCOPE", "read:user")


# Client application ---------------------------------------------------------
CLIENT_URL = _require_env("CLIENT_URL").rstrip("/")
AUTH_FAIL_URL = f"{CLIENT_URL}/auth-fail"

_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))
ALLOWED_CORS_ORIGINS = _unique([CLIENT_URL, *_additional_origins])


# Sessions -------------------------------------------------------------------
SESSION_SECRET = _require_env("SESSION_SECRET")
SESSION_MAX_AGE = _env_int("SESSION_MAX_AGE", 14 * 24 * 60 * 60)

COOKIE_DOMAIN = os.getenv("COOKIE_DOMAIN") or None
COOKIE_SECURE = _env_bool("COOKIE_SECURE", False)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")


# Runtime behaviour ----------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{_PROJECT_ROOT / 'data' / 'app.db'}"
DB_RESET = _env_bool("DB_RESET", False)

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 5050)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


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
]
