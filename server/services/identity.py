"""Resolve GitHub identities to local users."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..models import User
from .github import GitHubProfile

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """A session referenced a user id that no longer resolves to a row."""

    def __init__(self, user_id: Any) -> None:
        super().__init__(f"User {user_id!r} not found")
        self.user_id = user_id


def _find_by_github_id(session: Session, github_id: str) -> Optional[User]:
    return session.exec(select(User).where(User.github_id == github_id)).first()


def find_or_create_user(session: Session, profile: GitHubProfile) -> int:
    """Return the id of the user for ``profile``, creating the row on first login.

    Existing rows are returned untouched; the username and avatar captured on
    the first login are kept. If a concurrent login inserts the same GitHub id
    first, the unique constraint rejects our insert and the winner's row is
    returned instead.
    """

    user = _find_by_github_id(session, profile.github_id)
    if user:
        return user.id

    user = User(
        github_id=profile.github_id,
        username=profile.username,
        avatar_url=profile.avatar_url,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        existing = _find_by_github_id(session, profile.github_id)
        if existing is None:
            raise
        logger.info(
            "GitHub id %s was registered concurrently; reusing user %s",
            profile.github_id,
            existing.id,
        )
        return existing.id

    session.refresh(user)
    logger.info("Created user %s for GitHub id %s", user.id, profile.github_id)
    return user.id


def load_user(session: Session, user_id: Any) -> User:
    """Fetch the user stored in a session, raising if it cannot be resolved."""

    try:
        pk = int(user_id)
    except (TypeError, ValueError) as exc:
        raise UserNotFoundError(user_id) from exc

    user = session.get(User, pk)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


__all__ = ["UserNotFoundError", "find_or_create_user", "load_user"]
