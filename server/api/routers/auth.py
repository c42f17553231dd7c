"""GitHub OAuth authentication routes."""

from __future__ import annotations

import logging

import httpx
from authlib.integrations.base_client import OAuthError
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from ...core import AUTH_FAIL_URL, CLIENT_URL, get_session
from ...models import User
from ...services.github import fetch_github_profile, github_authorize_redirect
from ...services.identity import find_or_create_user
from ...services.users import user_to_dict
from ..deps import clear_session, require_user, serialize_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/github")
async def auth_github(request: Request):
    """Start the OAuth handshake by redirecting to GitHub."""

    return await github_authorize_redirect(request)


@router.get("/github/callback")
async def auth_github_callback(
    request: Request, session: Session = Depends(get_session)
):
    """Finish the handshake, resolve the local user and open a session."""

    try:
        profile = await fetch_github_profile(request)
    except (OAuthError, httpx.HTTPError) as exc:
        logger.warning("GitHub authentication failed: %s", exc)
        return RedirectResponse(AUTH_FAIL_URL, status_code=302)

    try:
        user_id = await run_in_threadpool(find_or_create_user, session, profile)
    except SQLAlchemyError:
        logger.exception("Could not resolve user for GitHub id %s", profile.github_id)
        return RedirectResponse(AUTH_FAIL_URL, status_code=302)

    serialize_user(request, user_id)
    logger.info("User %s logged in", user_id)
    return RedirectResponse(CLIENT_URL, status_code=302)


@router.get("/profile")
def auth_profile(user: User = Depends(require_user)):
    return user_to_dict(user)


@router.get("/logout")
def auth_logout(request: Request):
    clear_session(request)
    return RedirectResponse(CLIENT_URL, status_code=302)


__all__ = ["router"]
