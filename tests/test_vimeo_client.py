"""Tests for the Vimeo API client."""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from vimeo_thumbnail.clients.vimeo_client import VimeoClient, close_http_client
from vimeo_thumbnail.config import settings


class TestVimeoClient:
    """Tests for VimeoClient."""

    def test_data_url(self, vimeo_client):
        """Metadata URL follows /api/v2/video/<id>.json."""
        assert vimeo_client.data_url("12345") == "https://vimeo.com/api/v2/video/12345.json"

    def test_base_url_trailing_slash_is_dropped(self, mock_http_client):
        """A trailing slash on the base URL does not double up."""
        client = VimeoClient(mock_http_client, base_url="http://vimeo.test/")

        assert client.data_url("1") == "http://vimeo.test/api/v2/video/1.json"

    async def test_fetch_returns_body(self, vimeo_client, mock_http_client):
        """Successful fetch returns the body text."""
        mock_http_client.get = AsyncMock(return_value=httpx.Response(200, text="[]"))

        body = await vimeo_client.fetch_video_data("12345")

        assert body == "[]"
        mock_http_client.get.assert_awaited_once_with("https://vimeo.com/api/v2/video/12345.json")

    async def test_fetch_returns_body_on_error_status(self, vimeo_client, mock_http_client):
        """Non-2xx answers are not raised; their body is returned."""
        mock_http_client.get = AsyncMock(return_value=httpx.Response(404, text="1 not found."))

        assert await vimeo_client.fetch_video_data("1") == "1 not found."

    async def test_fetch_propagates_transport_errors(self, vimeo_client, mock_http_client):
        """Transport errors propagate to the caller."""
        mock_http_client.get = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(httpx.ConnectError):
            await vimeo_client.fetch_video_data("1")


class TestHttpLifecycle:
    """Tests for HTTP client close helper."""

    async def test_close_calls_aclose(self):
        """Closing an open client releases its connections."""
        client = AsyncMock()

        await close_http_client(client)

        client.aclose.assert_awaited_once()


class TestVimeoClientTimeout:
    """Tests for the overall request deadline."""

    async def test_slow_response_times_out(self, mock_http_client):
        """A request outliving total_timeout raises asyncio.TimeoutError."""

        async def slow_get(url):
            await asyncio.sleep(1)

        mock_http_client.get = AsyncMock(side_effect=slow_get)
        client = VimeoClient(mock_http_client, base_url="https://vimeo.com", total_timeout=0.01)

        with pytest.raises(asyncio.TimeoutError):
            await client.fetch_video_data("1")

    def test_total_timeout_defaults_to_setting(self, mock_http_client):
        """Without an override the HTTP timeout setting bounds the whole request."""
        client = VimeoClient(mock_http_client)

        assert client.total_timeout == settings.http_timeout_seconds
