"""User repositories."""

from app.repositories.user.user import UserRepository

__all__ = [
    "UserRepository",
]
