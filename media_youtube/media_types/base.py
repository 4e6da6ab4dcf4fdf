"""Base media type class for implementing media source providers."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from django import forms


class BaseMediaType(ABC):
    """Base class for all media types."""

    plugin_id = ""
    label = ""
    description = ""

    # Form class rendered on the media type settings page
    settings_form_class: Optional[type] = None

    def __init__(self, configuration: Optional[Dict[str, Any]] = None):
        """
        Initialize media type with its configuration.

        Args:
            configuration: Plugin configuration dict (e.g. {"source_field": "url"})
        """
        self.configuration = dict(configuration or {})
        self.logger = logging.getLogger(f"media_type.{self.plugin_id}")

    @property
    def source_field(self) -> str:
        return self.configuration.get("source_field") or ""

    @classmethod
    def provided_fields(cls) -> Dict[str, str]:
        """
        Fields this media type can resolve.

        Returns:
            Mapping of field name to human readable description
        """
        return {}

    def get_source_value(self, media: Any) -> Optional[str]:
        """
        Read the raw source value off a media item.

        Supports model instances (attribute access) and plain dicts.

        Args:
            media: Media item

        Returns:
            Source value as string, or None if unset
        """
        if not self.source_field:
            self.logger.warning("No source field configured")
            return None

        if isinstance(media, dict):
            value = media.get(self.source_field)
        else:
            value = getattr(media, self.source_field, None)

        if value is None:
            return None
        return str(value)

    @abstractmethod
    def get_field(self, media: Any, name: str) -> Any:
        """
        Resolve a provided field for a media item.

        Returns:
            Field value, or None when it is not available
        """
        pass

    @abstractmethod
    def validate(self, media: Any) -> None:
        """
        Validate the media item's source value.

        Raises:
            MediaValidationError: If the value is not acceptable
        """
        pass

    @abstractmethod
    def thumbnail(self, media: Any) -> str:
        """Return the thumbnail path or URL to display for a media item."""
        pass

    def settings_form(self, model: Any = None, data: Optional[Dict[str, Any]] = None) -> forms.Form:
        """
        Build the settings form for this media type.

        Args:
            model: Host model class whose fields can be selected
            data: Bound form data, if any

        Returns:
            Form instance initialized from the current configuration
        """
        if self.settings_form_class is None:
            return forms.Form(data=data)
        return self.settings_form_class(data=data, model=model, initial=self.configuration)
