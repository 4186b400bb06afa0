"""User services."""

from app.services.user.service import UserService, UserWithUniversity

__all__ = [
    "UserService",
    "UserWithUniversity",
]
