"""FastAPI dependency injection: thumbnail resolver built from app-scoped clients."""

from fastapi import HTTPException, Request, status

from vimeo_thumbnail.cache.redis_client import ThumbnailCache
from vimeo_thumbnail.clients.vimeo_client import VimeoClient
from vimeo_thumbnail.services.thumbnail_service import ThumbnailResolver


def get_thumbnail_resolver(request: Request) -> ThumbnailResolver:
    """Build a resolver from the cache and Vimeo client opened at startup.

    Raises:
        HTTPException: If the app lifespan has not initialized the clients (503)
    """
    cache: ThumbnailCache | None = getattr(request.app.state, "thumbnail_cache", None)
    vimeo_client: VimeoClient | None = getattr(request.app.state, "vimeo_client", None)
    if cache is None or vimeo_client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return ThumbnailResolver(cache, vimeo_client)
