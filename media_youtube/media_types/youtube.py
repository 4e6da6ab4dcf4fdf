"""YouTube media type."""

from typing import Any, Dict, Optional

from ..choices import PROVIDED_FIELDS
from ..config import ResolverConfig
from ..exceptions import UnsupportedFieldError
from ..forms import YouTubeSettingsForm
from ..resolver import YouTubeResolver
from ..storage import FileStore
from ..utils.metadata_client import YouTubeMetadataClient
from .base import BaseMediaType


class YouTubeMediaType(BaseMediaType):
    """Provides business logic and metadata for YouTube videos."""

    plugin_id = "youtube"
    label = "YouTube video"
    description = "Provides business logic and metadata for YouTube videos."
    settings_form_class = YouTubeSettingsForm

    def __init__(
        self,
        configuration: Optional[Dict[str, Any]] = None,
        file_store: Optional[FileStore] = None,
        metadata_client: Optional[YouTubeMetadataClient] = None,
    ):
        super().__init__(configuration)
        self.resolver = YouTubeResolver(
            ResolverConfig.from_settings(self.configuration),
            file_store=file_store,
            metadata_client=metadata_client,
        )

    @classmethod
    def provided_fields(cls) -> Dict[str, str]:
        return {field.value: description for field, description in PROVIDED_FIELDS.items()}

    def get_field(self, media: Any, name: str) -> Any:
        try:
            return self.resolver.resolve_field(self.get_source_value(media), name)
        except UnsupportedFieldError:
            self.logger.debug(f"Field {name} is not provided")
            return None

    def validate(self, media: Any) -> None:
        self.resolver.validate(self.get_source_value(media))

    def thumbnail(self, media: Any) -> str:
        return self.resolver.thumbnail(self.get_source_value(media))
