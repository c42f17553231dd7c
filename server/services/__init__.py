"""Service layer helpers."""

from .identity import UserNotFoundError, find_or_create_user, load_user
from .posts import post_to_dict
from .users import user_to_dict

__all__ = [
    "UserNotFoundError",
    "find_or_create_user",
    "load_user",
    "post_to_dict",
    "user_to_dict",
]
