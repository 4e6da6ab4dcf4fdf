"""
YouTube media type data structures.

Dataclasses passed between the resolver, the metadata client and the fetcher.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ThumbnailDescriptor:
    """A preview image for a video, local path or remote URL."""

    uri: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class VideoMetadata:
    """Metadata document retrieved for a single video."""

    video_id: str
    title: str = ""
    thumbnails: List[ThumbnailDescriptor] = field(default_factory=list)  # Remote listing order

    def first_thumbnail(self) -> Optional[ThumbnailDescriptor]:
        """Return the first thumbnail as listed by the remote."""
        return self.thumbnails[0] if self.thumbnails else None

    def best_thumbnail(self) -> Optional[ThumbnailDescriptor]:
        """
        Return the widest thumbnail.

        Thumbnails without a width count as zero wide. Ties keep the
        earlier entry.
        """
        best = None
        size = -1
        for thumb in self.thumbnails:
            width = thumb.width or 0
            if width > size:
                size = width
                best = thumb
        return best


@dataclass
class EmbedAttributes:
    """Player attributes read from an embed snippet."""

    src: str
    width: Optional[int] = None
    height: Optional[int] = None
    autoplay: bool = False
    privacy_mode: bool = False


@dataclass
class FetchedImage:
    """Downloaded image bytes plus what Pillow could tell about them."""

    data: bytes
    content_type: str
    width: Optional[int] = None
    height: Optional[int] = None
