"""Post management endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ...core import get_session, utcnow
from ...models import Post, User
from ...services.posts import post_to_dict
from ..deps import require_user

router = APIRouter(prefix="/posts", tags=["posts"])

MAX_TITLE_LENGTH = 200


def _clean_title(value: Any) -> str:
    title = value.strip() if isinstance(value, str) else ""
    if not title:
        raise HTTPException(400, "Title is required")
    if len(title) > MAX_TITLE_LENGTH:
        raise HTTPException(400, f"Title must be {MAX_TITLE_LENGTH} characters or less")
    return title


def _clean_content(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(400, "Content is required")
    return value


def _get_owned_post(session: Session, post_id: int, user: User) -> Post:
    post = session.get(Post, post_id)
    if not post:
        raise HTTPException(404, "Post not found")
    if post.user_id != user.id:
        raise HTTPException(403, "Cannot modify another user's post")
    return post


@router.get("")
def list_posts(session: Session = Depends(get_session)):
    """List all posts, newest first."""

    posts = session.exec(select(Post).order_by(Post.id.desc())).all()
    author_ids = {post.user_id for post in posts}
    authors: Dict[int, User] = {}
    if author_ids:
        users = session.exec(select(User).where(User.id.in_(author_ids))).all()
        authors = {user.id: user for user in users}
    return [post_to_dict(post, authors.get(post.user_id)) for post in posts]


@router.get("/{post_id}")
def get_post(post_id: int, session: Session = Depends(get_session)):
    """Get a specific post by ID."""

    post = session.get(Post, post_id)
    if not post:
        raise HTTPException(404, "Post not found")
    return post_to_dict(post, session.get(User, post.user_id))


@router.post("", status_code=201)
def create_post(
    body: Dict[str, Any],
    user: User = Depends(require_user),
    session: Session = Depends(get_session),
):
    """Create a post owned by the logged-in user."""

    post = Post(
        title=_clean_title(body.get("title")),
        content=_clean_content(body.get("content")),
        user_id=user.id,
    )
    session.add(post)
    session.commit()
    session.refresh(post)
    return post_to_dict(post, user)


@router.patch("/{post_id}")
def update_post(
    post_id: int,
    body: Dict[str, Any],
    user: User = Depends(require_user),
    session: Session = Depends(get_session),
):
    """Update the title and/or content of one of the user's posts."""

    post = _get_owned_post(session, post_id, user)
    if "title" not in body and "content" not in body:
        raise HTTPException(400, "Nothing to update")
    if "title" in body:
        post.title = _clean_title(body["title"])
    if "content" in body:
        post.content = _clean_content(body["content"])
    post.updated_at = utcnow()
    session.add(post)
    session.commit()
    session.refresh(post)
    return post_to_dict(post, user)


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    user: User = Depends(require_user),
    session: Session = Depends(get_session),
):
    """Delete one of the user's posts."""

    post = _get_owned_post(session, post_id, user)
    session.delete(post)
    session.commit()
    return {"ok": True, "deleted_post": post_id}


__all__ = ["router"]
