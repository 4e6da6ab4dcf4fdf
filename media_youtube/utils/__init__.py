"""Utility modules for the YouTube media type."""

from .embed import is_embed_code, parse_embed_attributes
from .fetcher import fetch_image
from .metadata_client import YouTubeMetadataClient

__all__ = [
    "is_embed_code",
    "parse_embed_attributes",
    "fetch_image",
    "YouTubeMetadataClient",
]
