"""User repository - the users table."""

import uuid
from datetime import datetime, timezone

from loguru import logger

from app.models.user import User
from app.repositories.base import BaseRepository

_COLUMNS = "id, email, university_domain, created_at"


def _to_user(row) -> User:
    return User(id=row[0], email=row[1], university_domain=row[2], created_at=row[3])


class UserRepository(BaseRepository):
    """Repository for user data access."""

    def find_by_id(self, user_id: str) -> User | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM users WHERE id = ?", [user_id])
        return _to_user(row) if row else None

    def find_by_email(self, email: str) -> User | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM users WHERE email = ?", [email.lower()])
        return _to_user(row) if row else None

    def create(self, email: str, university_domain: str | None = None) -> User:
        """Insert a user; email is stored lowercase."""
        user = User(
            id=uuid.uuid4().hex,
            email=email.lower(),
            university_domain=university_domain,
            created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        self.execute(
            "INSERT INTO users (id, email, university_domain, created_at) VALUES (?, ?, ?, ?)",
            [user.id, user.email, user.university_domain, user.created_at],
        )
        logger.info("User created: {} (university={})", user.email, university_domain)
        return user
