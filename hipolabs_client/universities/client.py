"""Universities API client."""

from hipolabs_client.base import BaseClient


class UniversitiesClient(BaseClient):
    """Client for the Hipolabs universities search endpoint."""

    async def search(self, name: str | None = None, country: str | None = None) -> list[dict]:
        """GET /search - universities, the full list when no filter is given."""
        params = {}
        if name:
            params["name"] = name
        if country:
            params["country"] = country
        return await self._get("search", params=params or None)
