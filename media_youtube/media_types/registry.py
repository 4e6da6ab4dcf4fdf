"""
Media type registry to map plugin ids to media type classes.
"""

from typing import Any, Dict, Optional, Type

from .base import BaseMediaType
from .youtube import YouTubeMediaType


class MediaTypeRegistry:
    """Registry for media type classes."""

    _registry: Dict[str, Type[BaseMediaType]] = {
        YouTubeMediaType.plugin_id: YouTubeMediaType,
    }

    @classmethod
    def get(cls, plugin_id: str) -> Type[BaseMediaType]:
        """
        Get media type class for the given plugin id.

        Args:
            plugin_id: The media type id (e.g., 'youtube')

        Returns:
            Media type class

        Raises:
            KeyError: If the plugin id is not found
        """
        if plugin_id not in cls._registry:
            raise KeyError(f"Unknown media type: {plugin_id}")
        return cls._registry[plugin_id]

    @classmethod
    def get_all(cls) -> Dict[str, Type[BaseMediaType]]:
        """Get all registered media types."""
        return cls._registry.copy()


def get_media_type(plugin_id: str, configuration: Optional[Dict[str, Any]] = None) -> BaseMediaType:
    """
    Get media type instance for a plugin id.

    Args:
        plugin_id: The media type id
        configuration: Plugin configuration dict

    Returns:
        Instantiated media type
    """
    media_type_class = MediaTypeRegistry.get(plugin_id)
    return media_type_class(configuration)
