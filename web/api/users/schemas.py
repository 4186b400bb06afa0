"""Users API request/response schemas."""

from datetime import datetime

from pydantic import BaseModel

from web.api.universities.schemas import UniversityItem


class AuthenticateRequest(BaseModel):
    """Sign-in request."""

    email: str


class UserItem(BaseModel):
    """User info."""

    id: str
    email: str
    university_domain: str | None
    created_at: datetime


class AuthenticateResponse(BaseModel):
    """Sign-in response."""

    user: UserItem
    university: UniversityItem | None
    is_new_user: bool


class DashboardResponse(BaseModel):
    """User dashboard response."""

    user: UserItem
    university: UniversityItem | None


class MyUniversityResponse(BaseModel):
    """Signed-in user's university."""

    university: UniversityItem | None
    message: str | None = None
