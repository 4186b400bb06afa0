"""User service - registration on first sign-in and dashboard data."""

from dataclasses import dataclass

from loguru import logger

from app.models.university import University
from app.models.user import User
from app.repositories.user import UserRepository
from app.services.university import UniversityService


@dataclass
class UserWithUniversity:
    """A user with the university their stored domain resolves to."""

    user: User
    university: University | None
    is_new_user: bool = False


class UserService:
    """User business logic."""

    def __init__(self, user_repo: UserRepository, university_service: UniversityService):
        self._users = user_repo
        self._universities = university_service

    async def find_or_create(self, email: str) -> tuple[User, bool]:
        """Existing user by email, or a new one matched to a university by domain."""
        user = self._users.find_by_email(email)
        if user is not None:
            return user, False

        university = await self._universities.find_by_domain_or_email(email)
        user = self._users.create(email, university.domain if university else None)
        return user, True

    async def university_for(self, user: User) -> University | None:
        if not user.has_university():
            return None
        university = await self._universities.find_by_domain(user.university_domain)
        if university is None:
            logger.warning("Stored domain {} of user {} not in current dataset", user.university_domain, user.id)
        return university

    async def authenticate(self, email: str) -> UserWithUniversity:
        user, created = await self.find_or_create(email)
        university = await self.university_for(user)
        return UserWithUniversity(user=user, university=university, is_new_user=created)

    async def dashboard(self, user_id: str) -> UserWithUniversity | None:
        user = self._users.find_by_id(user_id)
        if user is None:
            return None
        return UserWithUniversity(user=user, university=await self.university_for(user))
