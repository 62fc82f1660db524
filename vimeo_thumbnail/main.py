"""Vimeo Thumbnail Redirect: FastAPI app and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vimeo_thumbnail.cache.redis_client import (
    ThumbnailCache,
    close_redis_client,
    create_redis_client,
)
from vimeo_thumbnail.clients.vimeo_client import (
    VimeoClient,
    close_http_client,
    create_http_client,
)
from vimeo_thumbnail.routes import thumbnails, usage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage app lifespan: startup Redis and HTTP client, shutdown cleanup."""
    logger.info("Vimeo Thumbnail Redirect starting")
    redis_client = None
    http_client = None
    try:
        redis_client = await create_redis_client()
        http_client = await create_http_client()
        app.state.thumbnail_cache = ThumbnailCache(redis_client)
        app.state.vimeo_client = VimeoClient(http_client)
        yield
    finally:
        logger.info("Vimeo Thumbnail Redirect shutting down")
        await close_http_client(http_client)
        await close_redis_client(redis_client)


app = FastAPI(
    title="Vimeo Thumbnail Redirect",
    description="Redirects to Vimeo video thumbnails, caching resolved URLs in Redis",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Return service health status."""
    return {"status": "ok"}


app.include_router(thumbnails.router)
# Catch-all, must stay last
app.include_router(usage.router)
