"""Bearer-authenticated HTTP transport."""

import logging
from typing import Any

import httpx

from sonar_cleaner.http.models import HttpResult

logger = logging.getLogger(__name__)


class HttpTransport:
    """Thin wrapper around ``httpx.AsyncClient`` that never raises on I/O errors.

    Every call returns an :class:`HttpResult`; callers branch on its status.
    """

    def __init__(self) -> None:
        """Initialize the transport."""
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpTransport":
        """Async context manager entry.

        Returns:
            Self
        """
        self._client = httpx.AsyncClient()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type
            exc_val: Exception value
            exc_tb: Exception traceback
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get(self, url: str, token: str) -> HttpResult:
        """Send a GET request.

        Args:
            url: Absolute URL
            token: Bearer token

        Returns:
            Request outcome
        """
        return await self._request("GET", url, token)

    async def post(self, url: str, token: str) -> HttpResult:
        """Send a POST request without a body.

        Args:
            url: Absolute URL
            token: Bearer token

        Returns:
            Request outcome
        """
        return await self._request("POST", url, token)

    async def _request(self, method: str, url: str, token: str) -> HttpResult:
        if not self._client:
            raise RuntimeError("Transport not initialized. Use async context manager.")

        try:
            response = await self._client.request(
                method,
                url,
                headers={"Authorization": f"Bearer {token}"},
            )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.debug(f"{method} {url} failed: {e!r}")
            return HttpResult(error=str(e) or type(e).__name__)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return HttpResult(status_code=response.status_code, body=response.text)
