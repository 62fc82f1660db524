"""Business exceptions for Vimeo Thumbnail Redirect."""


class ThumbnailResolutionError(Exception):
    """Base class for errors that end a thumbnail resolution.

    The message is the plain-text body sent back to the client.
    """

    status_code: int = 404


class InvalidVideoIdError(ThumbnailResolutionError):
    """Raised when the requested video id is not made of digits only."""

    status_code = 400

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__("Video id must be a number.")


class UpstreamTransportError(ThumbnailResolutionError):
    """Raised when the Vimeo API could not be reached (network, DNS, timeout)."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Could not get data from vimeo: {url}")


class UpstreamDataError(ThumbnailResolutionError):
    """Raised when the Vimeo API answered with a body holding no usable video data."""

    def __init__(self, url: str, body: str):
        self.url = url
        self.body = body
        super().__init__(f"Received invalid response from Vimeo api ({url}): {body}")


class ThumbnailNotFoundError(ThumbnailResolutionError):
    """Raised when no thumbnail matches the requested size and fallback policy."""

    def __init__(self, url: str, size: str):
        self.url = url
        self.size = size
        super().__init__(f"Received invalid img url from Vimeo api ({url})")


class CacheError(Exception):
    """Raised by the cache layer when Redis is unreachable or a command fails.

    Never surfaced to clients: reads degrade to a miss, writes are skipped.
    """

    def __init__(self, operation: str, key: str, reason: Exception):
        self.operation = operation
        self.key = key
        self.reason = reason
        super().__init__(f"Redis {operation} failed for key '{key}': {reason}")
