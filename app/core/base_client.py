from typing import Any

import httpx
from loguru import logger


class BaseClient:
    """
    Base asynchronous HTTP client with a lazily created, reusable connection pool.

    Requests are sent exactly once; callers decide how to degrade on failure.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, headers: dict[str, str] | None = None):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, headers=self.headers, follow_redirects=True
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        client = await self.get_client()
        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.warning(f"Request failed ({method} {url}): HTTP {e.response.status_code}")
            raise
        except httpx.RequestError as e:
            logger.warning(f"Request failed ({method} {url}): {e!r}")
            raise

    async def post(self, url: str, json: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a POST request and return the decoded JSON response."""
        response = await self._request("POST", url, json=json, **kwargs)
        return response.json()
