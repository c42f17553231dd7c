"""GitHub OAuth client and profile retrieval."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from authlib.integrations.base_client import OAuthError
from authlib.integrations.starlette_client import OAuth
from starlette.requests import Request
from starlette.responses import RedirectResponse

from ..core import (
    GITHUB_CALLBACK_URL,
    GITHUB_CLIENT_ID,
    GITHUB_CLIENT_SECRET,
    GITHUB_SCOPE,
)

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
ACCESS_TOKEN_URL = "https://github.com/login/oauth/access_token"
API_BASE = "https://api.github.com/"

oauth = OAuth()
oauth.register(
    name="github",
    client_id=GITHUB_CLIENT_ID,
    client_secret=GITHUB_CLIENT_SECRET,
    access_token_url=ACCESS_TOKEN_URL,
    authorize_url=AUTHORIZE_URL,
    api_base_url=API_BASE,
    client_kwargs={
        "scope": GITHUB_SCOPE,
        "token_endpoint_auth_method": "client_secret_post",
    },
)


@dataclass(frozen=True)
class GitHubProfile:
    """The subset of a GitHub user we keep locally."""

    github_id: str
    username: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "GitHubProfile":
        """Build a profile from a ``GET /user`` response body."""

        raw_id = payload.get("id")
        if raw_id is None:
            raise OAuthError(
                error="invalid_profile", description="GitHub profile has no id"
            )
        username = payload.get("login") or payload.get("name") or str(raw_id)
        return cls(
            github_id=str(raw_id),
            username=username,
            avatar_url=payload.get("avatar_url"),
        )


async def github_authorize_redirect(request: Request) -> RedirectResponse:
    """Redirect the browser to GitHub's consent screen."""

    return await oauth.github.authorize_redirect(request, GITHUB_CALLBACK_URL)


async def fetch_github_profile(request: Request) -> GitHubProfile:
    """Exchange the callback's authorization code and load the GitHub profile.

    Raises ``OAuthError`` when GitHub reports an error (including a denied
    consent or a state mismatch) and ``httpx.HTTPError`` when either round
    trip fails.
    """

    token = await oauth.github.authorize_access_token(request)
    response = await oauth.github.get("user", token=token)
    response.raise_for_status()
    profile = GitHubProfile.from_api(response.json())
    logger.debug("GitHub profile received for %s", profile.username)
    return profile


__all__ = [
    "GitHubProfile",
    "fetch_github_profile",
    "github_authorize_redirect",
    "oauth",
]
