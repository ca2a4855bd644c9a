"""HTTP fetcher for documentation pages.

All network I/O goes through a single Fetcher instance shared across tool
calls. The Fetcher receives an httpx.AsyncClient via constructor injection;
the lifespan owns the client lifecycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import structlog

from docsmcp import __version__
from docsmcp.errors import FetchError

if TYPE_CHECKING:
    from docsmcp.config import FetcherSettings

log = structlog.get_logger()


def build_http_client(settings: FetcherSettings | None = None) -> httpx.AsyncClient:
    """Create the shared httpx client. Called once at startup."""
    timeout = settings.timeout_seconds if settings is not None else 30.0
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": f"docsmcp/{__version__}"},
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        ),
    )


class Fetcher:
    """Plain GET fetcher that maps HTTP failures onto FetchError."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> str:
        """Fetch a URL and return the response body text.

        Raises FetchError on network errors and non-2xx responses.
        """
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Network error fetching {url}: {exc}") from exc

        if not response.is_success:
            raise FetchError(
                f"HTTP {response.status_code} fetching {url}",
                status_code=response.status_code,
            )

        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            content_length=len(response.text),
        )
        return response.text
