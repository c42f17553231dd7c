"""Database model for GitHub-backed accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Account created on the first GitHub login for a given GitHub id.

    ``github_id`` carries a UNIQUE constraint so that two simultaneous first
    logins can never leave two rows behind for the same identity.
    """

    id: Optional[int] = ORMField(default=None, primary_key=True)
    github_id: str = ORMField(index=True, unique=True, nullable=False)
    username: str
    avatar_url: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User"]
