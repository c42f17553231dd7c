"""Helpers for post domain objects."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.time import isoformat
from ..models import Post, User
from .users import user_to_dict


def post_to_dict(post: Post, author: Optional[User] = None) -> Dict[str, Any]:
    """Serialise a post model, embedding its author when given."""

    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "user_id": post.user_id,
        "author": user_to_dict(author) if author else None,
        "created_at": isoformat(post.created_at),
        "updated_at": isoformat(post.updated_at),
    }


__all__ = ["post_to_dict"]
