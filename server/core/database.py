"""Database configuration and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator

from sqlalchemy.engine import make_url
from sqlmodel import Session, create_engine

from .config import DATABASE_URL


def _build_engine(url: str):
    connect_args: Dict[str, Any] = {}
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args)


engine = _build_engine(DATABASE_URL)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["engine", "get_session"]
