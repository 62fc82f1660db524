"""Selection of a thumbnail URL with the large -> medium -> small fallback chain."""

import logging

from vimeo_thumbnail.models.enums import ThumbnailSize
from vimeo_thumbnail.models.schemas import VideoMetadata

logger = logging.getLogger(__name__)


def select_thumbnail(metadata: VideoMetadata, size: str, fallback: bool) -> str | None:
    """Pick the thumbnail URL for the requested size.

    When the requested size is missing and ``fallback`` is set, the next
    smaller size is tried, never a larger one.

    Args:
        metadata: Parsed video metadata
        size: Requested size name
        fallback: Whether smaller sizes may be used

    Returns:
        Thumbnail URL, or None if nothing matches
    """
    try:
        current: ThumbnailSize | None = ThumbnailSize(size)
    except ValueError:
        logger.debug("%s not resolved.", size)
        return None

    while current is not None:
        url = metadata.thumbnail_for(current)
        if url:
            return url
        if not fallback:
            return None
        logger.debug(
            "%s not found, falling back to %s.",
            current.value,
            current.next_smaller.value if current.next_smaller else "nothing",
        )
        current = current.next_smaller
    return None
