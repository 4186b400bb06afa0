"""Route table - maps HTTP paths to API views."""

from fastapi import APIRouter

from web.api import health, universities, users
from web.api.universities.schemas import (
    DatasetStatusResponse,
    MessageResponse,
    SearchItem,
    UniversitiesResponse,
    UniversityItem,
    UpdateResponse,
)
from web.api.users.schemas import AuthenticateResponse, DashboardResponse, MyUniversityResponse


def create_router() -> APIRouter:
    """Routes mounted under /api."""
    router = APIRouter()

    # Health
    router.add_api_route("/health", health.check_health, methods=["GET"], tags=["health"])
    router.add_api_route("/ready", health.check_readiness, methods=["GET"], tags=["health"])

    # Universities (status before the catch-all lookup)
    router.add_api_route(
        "/universities",
        universities.list_universities,
        methods=["GET"],
        response_model=UniversitiesResponse,
        tags=["universities"],
    )
    router.add_api_route(
        "/universities/status",
        universities.get_status,
        methods=["GET"],
        response_model=DatasetStatusResponse,
        tags=["universities"],
    )
    router.add_api_route(
        "/universities/refresh-cache",
        universities.refresh_cache,
        methods=["POST"],
        response_model=MessageResponse,
        tags=["universities"],
    )
    router.add_api_route(
        "/universities/{value}",
        universities.get_university,
        methods=["GET"],
        response_model=UniversityItem,
        tags=["universities"],
    )
    router.add_api_route(
        "/search",
        universities.search_universities,
        methods=["GET"],
        response_model=list[SearchItem],
        tags=["universities"],
    )
    router.add_api_route(
        "/update",
        universities.update_dataset,
        methods=["GET", "POST"],
        response_model=UpdateResponse,
        tags=["universities"],
    )

    # Users
    router.add_api_route(
        "/me/university",
        users.get_my_university,
        methods=["GET"],
        response_model=MyUniversityResponse,
        tags=["users"],
    )
    router.add_api_route(
        "/users/authenticate",
        users.authenticate_user,
        methods=["POST"],
        response_model=AuthenticateResponse,
        tags=["users"],
    )
    router.add_api_route(
        "/users/{user_id}/dashboard",
        users.get_user_dashboard,
        methods=["GET"],
        response_model=DashboardResponse,
        tags=["users"],
    )

    return router
