"""Services package - service class exports."""

from app.services.university import RefreshResult, UniversityService
from app.services.user import UserService, UserWithUniversity

__all__ = [
    "RefreshResult",
    "UniversityService",
    "UserService",
    "UserWithUniversity",
]
