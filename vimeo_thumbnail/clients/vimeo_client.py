"""HTTP client for the Vimeo simple API."""

import asyncio
import logging

import httpx

from vimeo_thumbnail.config import settings

logger = logging.getLogger(__name__)


async def create_http_client() -> httpx.AsyncClient:
    """Create and return HTTP async client.

    Returns:
        httpx AsyncClient instance
    """
    client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    logger.info("HTTP client created")
    return client


async def close_http_client(client: httpx.AsyncClient | None) -> None:
    """Close HTTP client."""
    if client is not None:
        await client.aclose()
        logger.info("HTTP client closed")


class VimeoClient:
    """Fetches raw video metadata from ``/api/v2/video/<id>.json``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str | None = None,
        total_timeout: float | None = None,
    ) -> None:
        self.http_client = http_client
        self.base_url = (base_url or settings.vimeo_api_base_url).rstrip("/")
        # httpx timeouts apply per phase; this bounds the whole request
        self.total_timeout = settings.http_timeout_seconds if total_timeout is None else total_timeout

    def data_url(self, video_id: str) -> str:
        """Return the metadata URL for a video id."""
        return f"{self.base_url}/api/v2/video/{video_id}.json"

    async def fetch_video_data(self, video_id: str) -> str:
        """Fetch the raw metadata body for a video.

        The status code is not inspected: a non-2xx answer still returns its
        body, which then fails metadata parsing.

        Args:
            video_id: Vimeo video id

        Returns:
            Response body as text

        Raises:
            httpx.RequestError: If the request fails (connection, DNS, timeout)
            asyncio.TimeoutError: If the whole request takes longer than ``total_timeout``
        """
        url = self.data_url(video_id)
        response = await asyncio.wait_for(self.http_client.get(url), self.total_timeout)
        if not response.is_success:
            logger.warning("Vimeo API returned HTTP %s for %s", response.status_code, url)
        logger.debug("Fetched video data for %s from Vimeo API", video_id)
        return response.text
