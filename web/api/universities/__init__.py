"""Universities API."""

from web.api.universities.views import (
    get_status,
    get_university,
    list_universities,
    refresh_cache,
    search_universities,
    update_dataset,
)

__all__ = [
    "list_universities",
    "get_status",
    "refresh_cache",
    "get_university",
    "search_universities",
    "update_dataset",
]
