"""Business logic for thumbnail resolution with caching."""

import asyncio
import logging
import re

import httpx

from vimeo_thumbnail.cache.redis_client import ThumbnailCache
from vimeo_thumbnail.clients.vimeo_client import VimeoClient
from vimeo_thumbnail.exceptions import (
    CacheError,
    InvalidVideoIdError,
    ThumbnailNotFoundError,
    UpstreamDataError,
    UpstreamTransportError,
)
from vimeo_thumbnail.models.schemas import RequestOptions
from vimeo_thumbnail.services.metadata_parser import parse_metadata
from vimeo_thumbnail.services.thumbnail_selector import select_thumbnail

logger = logging.getLogger(__name__)

_VIDEO_ID_PATTERN = re.compile(r"[0-9]+")
_CACHED_URL_PATTERN = re.compile(r"^https?://")
_MAX_ERROR_BODY_LENGTH = 200


def validate_video_id(video_id: str) -> str:
    """Check that a video id is a non-empty string of decimal digits.

    Args:
        video_id: Raw id taken from the request path

    Returns:
        The id, unchanged

    Raises:
        InvalidVideoIdError: If the id is empty or contains a non-digit
    """
    if not _VIDEO_ID_PATTERN.fullmatch(video_id):
        logger.debug("Video id not a number: %s", video_id)
        raise InvalidVideoIdError(video_id)
    return video_id


def _is_cacheable_url(value: str | None) -> bool:
    """Check that a cached value looks like an absolute http(s) URL."""
    return bool(value) and _CACHED_URL_PATTERN.match(value) is not None


class ThumbnailResolver:
    """Resolves a video id to a thumbnail URL, consulting the cache first."""

    def __init__(self, cache: ThumbnailCache, vimeo_client: VimeoClient) -> None:
        self.cache = cache
        self.vimeo_client = vimeo_client

    async def resolve(self, video_id: str, options: RequestOptions) -> str:
        """Resolve the thumbnail URL to redirect to.

        Logic:
        1. Validate the video id
        2. Return a cached http(s) URL if caching is enabled and one exists
        3. Fetch metadata from Vimeo, parse it and select a thumbnail
        4. Cache the selected URL (best-effort)

        Args:
            video_id: Video identifier from the request path
            options: Size and caching options from the query string

        Returns:
            Thumbnail URL

        Raises:
            InvalidVideoIdError: If the video id is not a number
            UpstreamTransportError: If Vimeo could not be reached
            UpstreamDataError: If Vimeo returned no usable video data
            ThumbnailNotFoundError: If no thumbnail matches the requested size
        """
        validate_video_id(video_id)

        if options.use_cache:
            cached = await self._read_cache(video_id, options.size)
            if _is_cacheable_url(cached):
                logger.info("Using cached redirect for %s to %s", video_id, cached)
                return cached
            if cached is not None:
                logger.debug("Ignoring malformed cached value for %s: %r", video_id, cached)
        else:
            logger.debug("Cache disabled for request on %s", video_id)

        data_url = self.vimeo_client.data_url(video_id)
        try:
            body = await self.vimeo_client.fetch_video_data(video_id)
        except (httpx.RequestError, asyncio.TimeoutError) as e:
            logger.error("Error fetching data from Vimeo api (%s): %s", data_url, e)
            raise UpstreamTransportError(data_url) from e

        metadata = parse_metadata(body)
        if metadata is None:
            logger.warning("Received invalid response from Vimeo api (%s): %s", data_url, body)
            raise UpstreamDataError(data_url, body[:_MAX_ERROR_BODY_LENGTH])

        img_url = select_thumbnail(metadata, options.size, options.size_fallback)
        if not img_url:
            logger.info(
                "No %s thumbnail (fallback=%s) for %s from %s",
                options.size,
                options.size_fallback,
                video_id,
                data_url,
            )
            raise ThumbnailNotFoundError(data_url, options.size)

        await self._write_cache(video_id, options.size, img_url)
        logger.info("Resolved %s (%s) to %s", video_id, options.size, img_url)
        return img_url

    async def _read_cache(self, video_id: str, size: str) -> str | None:
        try:
            return await self.cache.get(video_id, size)
        except CacheError as exc:
            logger.warning("%s; treating as cache miss", exc)
            return None

    async def _write_cache(self, video_id: str, size: str, url: str) -> None:
        try:
            await self.cache.set(video_id, size, url)
        except CacheError as exc:
            logger.warning("%s; skipping cache write", exc)
