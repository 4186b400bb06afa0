"""Universities API views - thin layer over services."""

from fastapi.responses import JSONResponse

from app.container import container
from app.models.university import University
from web.api.errors import NotFoundError, validate_limit, validate_offset

from .schemas import (
    DatasetStatusResponse,
    MessageResponse,
    SearchItem,
    UniversitiesResponse,
    UniversityItem,
    UpdateResponse,
)


def to_item(university: University) -> UniversityItem:
    return UniversityItem(
        id=university.id,
        name=university.name,
        country=university.country,
        domain=university.domain,
    )


async def list_universities(limit: int | None = None, offset: int = 0) -> UniversitiesResponse:
    """List universities from the cached dataset."""
    validate_limit(limit)
    validate_offset(offset)
    data = await container.universities.find_all(limit=limit, offset=offset)
    source = container.universities.source()

    return UniversitiesResponse(
        source=source.value if source else None,
        universities=[to_item(u) for u in data],
    )


def get_status() -> DatasetStatusResponse:
    """Dataset cache status; does not load the dataset."""
    status = container.universities.status()
    return DatasetStatusResponse(**status.to_dict())


def refresh_cache() -> MessageResponse:
    """Clear the dataset cache; the next request reloads it."""
    container.universities.clear_cache()
    return MessageResponse(message="Universities cache cleared")


async def get_university(value: str) -> UniversityItem:
    """University for a domain or an email address."""
    university = await container.universities.find_by_domain_or_email(value)
    if university is None:
        raise NotFoundError(f"No university found for {value}")
    return to_item(university)


async def search_universities(
    name: str | None = None,
    country: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[SearchItem]:
    """Search by name substring and exact country."""
    validate_limit(limit)
    validate_offset(offset)
    data = await container.universities.search(name=name, country=country, limit=limit, offset=offset)

    return [
        SearchItem(
            web_page=u.web_page,
            country=u.country,
            domain=u.domain,
            name=u.name,
        )
        for u in data
    ]


async def update_dataset() -> UpdateResponse | JSONResponse:
    """Force a reload of the dataset."""
    result = await container.universities.refresh()
    if not result.ok:
        return JSONResponse(status_code=500, content=result.to_dict())
    return UpdateResponse(status=result.status, message=result.message)
