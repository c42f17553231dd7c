"""Request-scoped authentication dependencies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from ..core import get_session
from ..models import User
from ..services.identity import UserNotFoundError, load_user
from .errors import NotAuthenticatedError

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"


@dataclass
class AuthContext:
    """Authentication state resolved for a single request."""

    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


def serialize_user(request: Request, user_id: int) -> None:
    """Remember the logged-in user by storing only its id in the session."""

    request.session[SESSION_USER_KEY] = user_id


def clear_session(request: Request) -> None:
    request.session.clear()


def get_auth_context(
    request: Request, session: Session = Depends(get_session)
) -> AuthContext:
    """Resolve the session's user id into a full user for this request.

    A reference that no longer resolves clears the session and leaves the
    request anonymous. Database errors are not caught.
    """

    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return AuthContext()

    try:
        user = load_user(session, user_id)
    except UserNotFoundError:
        logger.info("Dropping session for unknown user %r", user_id)
        clear_session(request)
        return AuthContext()
    return AuthContext(user=user)


def require_user(context: AuthContext = Depends(get_auth_context)) -> User:
    """Gate a route on a resolved user."""

    if context.user is None:
        raise NotAuthenticatedError()
    return context.user


__all__ = [
    "AuthContext",
    "SESSION_USER_KEY",
    "clear_session",
    "get_auth_context",
    "require_user",
    "serialize_user",
]
