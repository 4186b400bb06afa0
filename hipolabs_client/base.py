"""Base HTTP client with retry logic."""

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
)

# Default settings
API_BASE_URL = "https://universities.hipolabs.com"
API_TIMEOUT = 30


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url.rstrip("/")
    API_TIMEOUT = timeout


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with exponential backoff."""

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        self._client: httpx.AsyncClient | None = None
        self._base_url = (base_url or API_BASE_URL).rstrip("/")
        self._timeout = timeout or API_TIMEOUT
        self._request_count = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self._timeout)
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} request(s) to {}", self.__class__.__name__, self._request_count, self._base_url)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=_is_retryable_error,
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        self._request_count += 1
        resp = await self._client.get(f"{self._base_url}/{path}", params=params)
        resp.raise_for_status()
        return resp.json()
