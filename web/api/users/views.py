"""Users API views - thin layer over services."""

from fastapi import Depends

from app.container import container
from app.models.user import User
from web.api.auth import AuthenticatedUser, current_user
from web.api.errors import NotFoundError, validate_email
from web.api.universities.views import to_item

from .schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    DashboardResponse,
    MyUniversityResponse,
    UserItem,
)


def _user_item(user: User) -> UserItem:
    return UserItem(
        id=user.id,
        email=user.email,
        university_domain=user.university_domain,
        created_at=user.created_at,
    )


async def get_my_university(user: AuthenticatedUser = Depends(current_user)) -> MyUniversityResponse:
    """University of the signed-in user, registering them on first call."""
    if not user.email:
        raise NotFoundError("User not found")

    record, _ = await container.users.find_or_create(user.email)
    university = await container.users.university_for(record)
    if university is None:
        return MyUniversityResponse(university=None, message="No university assigned")

    return MyUniversityResponse(university=to_item(university))


async def authenticate_user(body: AuthenticateRequest) -> AuthenticateResponse:
    """Find or create a user by email and resolve their university."""
    email = validate_email(body.email)
    data = await container.users.authenticate(email)

    return AuthenticateResponse(
        user=_user_item(data.user),
        university=to_item(data.university) if data.university else None,
        is_new_user=data.is_new_user,
    )


async def get_user_dashboard(user_id: str) -> DashboardResponse:
    """Dashboard data for a user."""
    data = await container.users.dashboard(user_id)
    if data is None:
        raise NotFoundError("User not found")

    return DashboardResponse(
        user=_user_item(data.user),
        university=to_item(data.university) if data.university else None,
    )
