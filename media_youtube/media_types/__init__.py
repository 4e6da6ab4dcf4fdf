"""
Media types package.
"""
from .base import BaseMediaType
from .registry import MediaTypeRegistry, get_media_type
from .youtube import YouTubeMediaType

__all__ = ['BaseMediaType', 'MediaTypeRegistry', 'YouTubeMediaType', 'get_media_type']
