"""User domain models."""

from app.models.user.user import USER_DDL, User

__all__ = [
    "USER_DDL",
    "User",
]
