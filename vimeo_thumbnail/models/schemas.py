"""Pydantic schemas for request options and upstream metadata."""

from typing import Any

from pydantic import BaseModel, field_validator

from vimeo_thumbnail.models.enums import ThumbnailSize


class RequestOptions(BaseModel):
    """Per-request resolution options derived from the query string.

    ``size`` keeps the raw requested value: anything outside the known
    thumbnail sizes is accepted here and simply never resolves.
    """

    size: str = ThumbnailSize.LARGE.value
    size_fallback: bool = True
    use_cache: bool = True

    model_config = {"frozen": True}

    @classmethod
    def from_query(
        cls,
        s: str | None = None,
        sfb: str | None = None,
        c: str | None = None,
    ) -> "RequestOptions":
        """Build options from the ``s``, ``sfb`` and ``c`` query parameters.

        Boolean flags are only switched off by the literal string ``"false"``.
        An empty ``s`` falls back to the default size.
        """
        return cls(
            size=s or ThumbnailSize.LARGE.value,
            size_fallback=sfb != "false",
            use_cache=c != "false",
        )


class VideoMetadata(BaseModel):
    """Thumbnail fields of a Vimeo video metadata record.

    Other upstream fields are ignored. Values that are not strings are
    treated as absent.
    """

    thumbnail_large: str | None = None
    thumbnail_medium: str | None = None
    thumbnail_small: str | None = None

    model_config = {"extra": "ignore"}

    @field_validator("thumbnail_large", "thumbnail_medium", "thumbnail_small", mode="before")
    @classmethod
    def _drop_non_string(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    def thumbnail_for(self, size: ThumbnailSize) -> str | None:
        """Return the URL stored for ``size``, or None when absent or empty."""
        return getattr(self, size.field_name) or None
