"""University services."""

from app.services.university.service import RefreshResult, UniversityService

__all__ = [
    "RefreshResult",
    "UniversityService",
]
