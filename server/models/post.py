"""Database model for posts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Post(SQLModel, table=True):
    """Post written by a logged-in user."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    title: str
    content: str
    user_id: int = ORMField(foreign_key="user.id", index=True)
    created_at: datetime = ORMField(default_factory=utcnow)
    updated_at: Optional[datetime] = None


__all__ = ["Post"]
