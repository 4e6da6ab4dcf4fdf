"""
Configuration for the YouTube media type.

Centralized configuration for thumbnail storage, HTTP requests and external APIs.
Settings can be overridden via Django settings (MEDIA_YOUTUBE_* variables) and
per media type through the plugin configuration dict.
"""

import logging
import os
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

# ==================== Storage Settings ====================

# Directory below MEDIA_ROOT used when MEDIA_YOUTUBE_LOCAL_IMAGES is not set
DEFAULT_LOCAL_IMAGES_DIR = "youtube_thumbnails"

# Directory below STATIC_URL holding the generic icons
DEFAULT_ICON_DIR = "media_youtube/icons"

# Icon file returned when no thumbnail is available
FALLBACK_ICON = "youtube.png"

# ==================== HTTP Settings ====================

# Request timeout in seconds
DEFAULT_HTTP_TIMEOUT = 10

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

# ==================== External API Endpoints ====================

# Conventional thumbnail location, <base>/<id>/maxresdefault.jpg
DEFAULT_THUMBNAIL_BASE = "https://img.youtube.com/vi"

YOUTUBE_DATA_API_BASE = "https://www.googleapis.com/youtube/v3"

YOUTUBE_OEMBED_URL = "https://www.youtube.com/oembed"


class ResolverConfig(BaseModel):
    """
    Explicit configuration handed to the YouTube resolver.

    Attributes:
        source_field: Name of the host field holding the YouTube URL/embed code
        local_images: Directory where thumbnails are cached
        icon_base: Directory (or URL prefix) holding the generic fallback icon
        api_key: Optional YouTube Data API key; oEmbed is used without one
        http_timeout: Timeout in seconds for every outbound request
        thumbnail_base: Base URL of the conventional thumbnail location
        user_agent: User-Agent header for outbound requests
        use_default_storage: Store thumbnails through Django's default_storage
    """

    source_field: str = Field(default="", description="Host field with the source value")
    local_images: str = Field(..., min_length=1, description="Thumbnail cache directory")
    icon_base: str = Field(..., description="Fallback icon directory")
    api_key: Optional[str] = Field(default=None, description="YouTube Data API key")
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)
    thumbnail_base: str = Field(default=DEFAULT_THUMBNAIL_BASE)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    use_default_storage: bool = Field(default=False)

    @field_validator("local_images", "icon_base", "thumbnail_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined with '/', so drop trailing separators (but keep a bare '/')."""
        stripped = v.rstrip("/")
        return stripped or v

    @field_validator("api_key")
    @classmethod
    def empty_api_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def storage_paths_are_relative(self) -> "ResolverConfig":
        """Storage names must be relative to the storage root."""
        if self.use_default_storage and (
            os.path.isabs(self.local_images) or self.local_images.startswith("/")
        ):
            raise ValueError(
                f"local_images must be relative to the storage root, got {self.local_images!r}"
            )
        return self

    @classmethod
    def from_settings(cls, configuration: Optional[Dict[str, Any]] = None) -> "ResolverConfig":
        """
        Build the configuration from Django settings and plugin configuration.

        Plugin configuration keys win over Django settings.

        Args:
            configuration: Plugin configuration dict (source_field, local_images, icon_base)

        Returns:
            Validated ResolverConfig

        Raises:
            ImproperlyConfigured: If a value fails validation
        """
        configuration = configuration or {}

        media_root = getattr(settings, "MEDIA_ROOT", "") or "media"
        static_url = getattr(settings, "STATIC_URL", None) or "/static/"
        use_default_storage = getattr(settings, "MEDIA_YOUTUBE_USE_DEFAULT_STORAGE", False)

        # Storage names are relative to the storage root
        if use_default_storage:
            default_local_images = DEFAULT_LOCAL_IMAGES_DIR
        else:
            default_local_images = os.path.join(str(media_root), DEFAULT_LOCAL_IMAGES_DIR)

        values = {
            "source_field": configuration.get("source_field") or "",
            # Empty values count as unset
            "local_images": configuration.get("local_images")
            or getattr(settings, "MEDIA_YOUTUBE_LOCAL_IMAGES", None)
            or default_local_images,
            "icon_base": configuration.get("icon_base")
            or getattr(settings, "MEDIA_YOUTUBE_ICON_BASE", None)
            or f"{static_url.rstrip('/')}/{DEFAULT_ICON_DIR}",
            "api_key": getattr(settings, "MEDIA_YOUTUBE_API_KEY", None),
            "http_timeout": getattr(settings, "MEDIA_YOUTUBE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            "thumbnail_base": getattr(
                settings, "MEDIA_YOUTUBE_THUMBNAIL_BASE", DEFAULT_THUMBNAIL_BASE
            ),
            "user_agent": getattr(settings, "MEDIA_YOUTUBE_USER_AGENT", DEFAULT_USER_AGENT),
            "use_default_storage": use_default_storage,
        }

        try:
            return cls(**values)
        except ValidationError as e:
            logger.error(f"Invalid YouTube media configuration: {e}")
            raise ImproperlyConfigured(f"Invalid YouTube media configuration: {e}") from e
