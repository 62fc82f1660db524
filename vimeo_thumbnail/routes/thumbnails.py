"""Thumbnail redirect routes for Vimeo Thumbnail Redirect."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from vimeo_thumbnail.dependencies import get_thumbnail_resolver
from vimeo_thumbnail.exceptions import ThumbnailResolutionError
from vimeo_thumbnail.models.schemas import RequestOptions
from vimeo_thumbnail.services.thumbnail_service import ThumbnailResolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["thumbnails"])


def _log_detached_result(task: asyncio.Task) -> None:
    """Report how a resolution ended after its client went away."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is None:
        logger.debug("Detached resolution finished with %s", task.result())
    elif isinstance(exc, ThumbnailResolutionError):
        logger.info("Detached resolution failed: %s", exc)
    else:
        logger.error("Detached resolution crashed", exc_info=exc)


@router.get(
    "/v/{video_id:path}",
    status_code=status.HTTP_301_MOVED_PERMANENTLY,
    response_class=RedirectResponse,
    summary="Redirect to a Vimeo video thumbnail",
    description="Resolves the thumbnail image of a Vimeo video and redirects to it, with Redis caching.",
    responses={
        400: {"description": "Video id is not a number"},
        404: {"description": "No thumbnail could be resolved"},
    },
)
async def redirect_to_thumbnail_endpoint(
    video_id: str,
    s: str | None = Query(None, description="Thumbnail size: large, medium or small"),
    sfb: str | None = Query(None, description="Set to 'false' to disable size fallback"),
    c: str | None = Query(None, description="Set to 'false' to bypass the cache read"),
    resolver: ThumbnailResolver = Depends(get_thumbnail_resolver),
) -> Response:
    """Redirect to the thumbnail of a Vimeo video.

    - 301 to the image URL on success
    - 400 if the video id is not a number
    - 404 with a diagnostic message if Vimeo data or the thumbnail is unavailable
    """
    options = RequestOptions.from_query(s=s, sfb=sfb, c=c)
    # Shielded so a client disconnect does not abort the upstream call or cache write
    task = asyncio.ensure_future(resolver.resolve(video_id, options))
    try:
        img_url = await asyncio.shield(task)
    except asyncio.CancelledError:
        task.add_done_callback(_log_detached_result)
        raise
    except ThumbnailResolutionError as e:
        return PlainTextResponse(str(e), status_code=e.status_code)
    return RedirectResponse(img_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
