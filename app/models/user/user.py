"""User model - students signed in through Cognito."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity

USER_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id VARCHAR PRIMARY KEY,
    email VARCHAR NOT NULL UNIQUE,
    university_domain VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class User(BaseEntity):
    """A registered user; the university is referenced by domain."""

    id: str
    email: str
    university_domain: str | None
    created_at: datetime

    @property
    def email_domain(self) -> str:
        _, _, domain = self.email.partition("@")
        return domain.lower()

    def has_university(self) -> bool:
        return self.university_domain is not None
