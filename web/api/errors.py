"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


class AuthError(Exception):
    """Missing (401) or rejected (403) credentials."""

    def __init__(self, message: str = "Invalid or expired token", status_code: int = 403):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def validate_limit(limit: int | None) -> None:
    """Validate limit is positive when given."""
    if limit is not None and limit < 1:
        raise ValidationError(f"Invalid limit: {limit}. Must be a positive integer")


def validate_offset(offset: int | None) -> None:
    """Validate offset is not negative."""
    if offset is not None and offset < 0:
        raise ValidationError(f"Invalid offset: {offset}. Must be zero or greater")


def validate_email(email: str | None) -> str:
    """Return the normalized email or raise."""
    email = (email or "").strip().lower()
    if not email:
        raise ValidationError("Email is required")
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise ValidationError("Invalid email address")
    return email
