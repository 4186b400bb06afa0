"""Users API."""

from web.api.users.views import authenticate_user, get_my_university, get_user_dashboard

__all__ = [
    "get_my_university",
    "authenticate_user",
    "get_user_dashboard",
]
