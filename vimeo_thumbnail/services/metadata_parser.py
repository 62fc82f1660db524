"""Parsing of Vimeo metadata responses."""

import json
import logging

from vimeo_thumbnail.models.schemas import VideoMetadata

logger = logging.getLogger(__name__)


def parse_metadata(body: str | bytes) -> VideoMetadata | None:
    """Parse a Vimeo metadata body into its first video record.

    Vimeo answers with a JSON array holding one object per video. Only the
    first element is used. Parsing never raises: invalid JSON, a payload that
    is not an array, an empty array or a falsy first element all return None.

    Args:
        body: Raw response body

    Returns:
        VideoMetadata for the first element, or None when there is no data
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as exc:
        logger.debug("Invalid json response: %s", exc)
        return None

    if not isinstance(data, list) or not data or not data[0]:
        logger.debug("No video data found in json.")
        return None

    first = data[0]
    if not isinstance(first, dict):
        logger.debug("First element is not an object; no thumbnails available.")
        return VideoMetadata()

    logger.debug("Data found in json.")
    return VideoMetadata.model_validate(first)
