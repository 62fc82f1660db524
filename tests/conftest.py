"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from vimeo_thumbnail.cache.redis_client import ThumbnailCache
from vimeo_thumbnail.clients.vimeo_client import VimeoClient
from vimeo_thumbnail.main import app

VIMEO_BASE_URL = "https://vimeo.com"


@pytest.fixture
def mock_redis():
    """Mock Redis client backed by a dict.

    ``store`` holds cached values and ``expirations`` the ``exat`` passed on write.
    """
    cache_store = {}
    expirations = {}

    async def mock_get(key):
        return cache_store.get(key)

    async def mock_set(key, value, exat=None):
        cache_store[key] = value
        expirations[key] = exat

    mock_client = AsyncMock()
    mock_client.get = AsyncMock(side_effect=mock_get)
    mock_client.set = AsyncMock(side_effect=mock_set)
    mock_client.store = cache_store
    mock_client.expirations = expirations
    yield mock_client
    cache_store.clear()


@pytest.fixture
def mock_http_client():
    """Mock HTTP client for testing."""
    return AsyncMock()


@pytest.fixture
def thumbnail_cache(mock_redis) -> ThumbnailCache:
    """Thumbnail cache over the mocked Redis client."""
    return ThumbnailCache(mock_redis)


@pytest.fixture
def vimeo_client(mock_http_client) -> VimeoClient:
    """Vimeo client over the mocked HTTP client."""
    return VimeoClient(mock_http_client, base_url=VIMEO_BASE_URL)


@pytest.fixture
async def client(
    mock_redis, mock_http_client, thumbnail_cache, vimeo_client
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with mocked dependencies.

    ASGITransport does not run the lifespan, so the cache and Vimeo client are
    placed on app.state directly. The create/close functions imported in
    vimeo_thumbnail.main are patched anyway so a lifespan run would reuse the mocks.
    """
    app.state.thumbnail_cache = thumbnail_cache
    app.state.vimeo_client = vimeo_client
    with patch(
        "vimeo_thumbnail.main.create_redis_client", new=AsyncMock(return_value=mock_redis)
    ), patch(
        "vimeo_thumbnail.main.create_http_client", new=AsyncMock(return_value=mock_http_client)
    ), patch(
        "vimeo_thumbnail.main.close_redis_client", new=AsyncMock()
    ), patch(
        "vimeo_thumbnail.main.close_http_client", new=AsyncMock()
    ):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    del app.state.thumbnail_cache
    del app.state.vimeo_client
