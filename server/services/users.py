"""Helpers for user domain objects."""

from __future__ import annotations

from typing import Any, Dict

from ..core.time import isoformat
from ..models import User


def user_to_dict(user: User) -> Dict[str, Any]:
    """Serialise a user model to API-friendly dict."""

    return {
        "id": user.id,
        "github_id": user.github_id,
        "username": user.username,
        "avatar_url": user.avatar_url,
        "created_at": isoformat(user.created_at),
    }


__all__ = ["user_to_dict"]
