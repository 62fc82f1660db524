"""Enumerations for the thumbnail domain."""

from enum import Enum


class ThumbnailSize(str, Enum):
    """Thumbnail resolution tiers published by Vimeo, largest first."""

    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @property
    def field_name(self) -> str:
        """Name of the metadata field holding this size's image URL."""
        return f"thumbnail_{self.value}"

    @property
    def next_smaller(self) -> "ThumbnailSize | None":
        """Next size in the fallback chain, or None once the chain is exhausted."""
        return _FALLBACK_CHAIN.get(self)


_FALLBACK_CHAIN = {
    ThumbnailSize.LARGE: ThumbnailSize.MEDIUM,
    ThumbnailSize.MEDIUM: ThumbnailSize.SMALL,
}
