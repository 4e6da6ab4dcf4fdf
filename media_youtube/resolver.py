"""
YouTube reference resolver.

Classifies a stored URL/embed code as a YouTube video, extracts the video ID
and derives the supplementary fields (thumbnails, player attributes).
"""

import logging
import re
from typing import Any, Dict, Optional, Union

from django.core.exceptions import SuspiciousFileOperation

from .choices import MediaField
from .config import FALLBACK_ICON, ResolverConfig
from .exceptions import MediaValidationError, MetadataFetchError, UnsupportedFieldError
from .storage import FileStore, get_file_store
from .types import VideoMetadata
from .utils.embed import parse_embed_attributes
from .utils.fetcher import fetch_image
from .utils.metadata_client import YouTubeMetadataClient

logger = logging.getLogger(__name__)

# Ordered; the first matching pattern wins
EXTRACTION_PATTERNS = (
    re.compile(r"(http|https)://www\.youtube(-nocookie)?\.com/embed/(?P<id>[a-z0-9_-]+)", re.I),
    re.compile(r"(http|https)://www\.youtube(-nocookie)?\.com/v/(?P<id>[a-z0-9_-]+)", re.I),
    re.compile(r"//www\.youtube(-nocookie)?\.com/embed/(?P<id>[a-z0-9_-]+)", re.I),
    re.compile(r"//www\.youtube(-nocookie)?\.com/v/(?P<id>[a-z0-9_-]+)", re.I),
    re.compile(r"(http|https)://www\.youtube\.com/watch\?v=(?P<id>[a-z0-9_-]+)", re.I),
)

INVALID_REFERENCE_MESSAGE = "Not valid URL/embed code."

FieldName = Union[MediaField, str]


def extract_video_id(reference: Optional[str]) -> Optional[str]:
    """
    Extract the YouTube video ID from a URL or embed code.

    Args:
        reference: Stored URL or embed snippet

    Returns:
        Video ID as captured, or None if no pattern matches
    """
    if not reference:
        return None

    for pattern in EXTRACTION_PATTERNS:
        match = pattern.search(reference)
        if match:
            return match.group("id")

    return None


class YouTubeResolver:
    """
    Resolves fields of a YouTube media reference.

    Instances keep a metadata cache keyed by video ID, so one resolver can
    serve any number of videos. Instances are not meant to be shared between
    threads.
    """

    def __init__(
        self,
        config: ResolverConfig,
        file_store: Optional[FileStore] = None,
        metadata_client: Optional[YouTubeMetadataClient] = None,
    ):
        self.config = config
        self.file_store = file_store or get_file_store(config)
        self.metadata_client = metadata_client or YouTubeMetadataClient(
            api_key=config.api_key, timeout=config.http_timeout
        )
        self._metadata: Dict[str, Optional[VideoMetadata]] = {}

    def extract_video_id(self, reference: Optional[str]) -> Optional[str]:
        return extract_video_id(reference)

    def validate(self, reference: Optional[str]) -> None:
        """
        Check that the reference identifies a YouTube video.

        Raises:
            MediaValidationError: If no video ID can be extracted
        """
        if self.extract_video_id(reference):
            return

        raise MediaValidationError(self.config.source_field, INVALID_REFERENCE_MESSAGE)

    def resolve_field(self, reference: Optional[str], field: FieldName) -> Any:
        """
        Resolve a named field for the reference.

        Args:
            reference: Stored URL or embed snippet
            field: MediaField or its string value

        Returns:
            The field value, or None when it is not available

        Raises:
            UnsupportedFieldError: If the field name is not a MediaField
        """
        try:
            field = MediaField(field)
        except ValueError:
            raise UnsupportedFieldError(str(field)) from None

        video_id = self.extract_video_id(reference)
        if not video_id:
            return None

        if field == MediaField.VIDEO_ID:
            return video_id

        if field in (MediaField.LOCAL_THUMBNAIL, MediaField.IMAGE_LOCAL):
            return self.fetch_local_thumbnail(video_id)

        if field == MediaField.IMAGE_LOCAL_URI:
            return self.get_local_uri(video_id)

        if field == MediaField.REMOTE_THUMBNAIL:
            return self.get_remote_thumbnail(video_id)

        # Remaining fields are player attributes, only present in embed code
        attributes = parse_embed_attributes(reference)
        if attributes is None:
            return None

        if field == MediaField.WIDTH:
            return attributes.width
        if field == MediaField.HEIGHT:
            return attributes.height
        if field == MediaField.AUTOPLAY:
            return attributes.autoplay
        if field == MediaField.PRIVACY_MODE:
            return attributes.privacy_mode

        raise UnsupportedFieldError(field.value)

    def get_local_uri(self, video_id: str) -> str:
        """Deterministic path of the cached thumbnail for a video."""
        return f"{self.config.local_images}/{video_id}.jpg"

    def get_maxres_thumbnail_url(self, video_id: str) -> str:
        return f"{self.config.thumbnail_base}/{video_id}/maxresdefault.jpg"

    def get_metadata(self, video_id: str) -> Optional[VideoMetadata]:
        """
        Return remote metadata for a video, fetching it at most once.

        Failures are logged and cached as None.
        """
        if video_id in self._metadata:
            return self._metadata[video_id]

        try:
            metadata = self.metadata_client.fetch_video_metadata(video_id)
        except MetadataFetchError as e:
            logger.warning(
                f"Metadata for video {video_id} unavailable ({type(e).__name__}): {e.message}"
            )
            metadata = None

        self._metadata[video_id] = metadata
        return metadata

    def get_remote_thumbnail(self, video_id: str) -> Optional[str]:
        """URL of the first thumbnail listed in the remote metadata."""
        metadata = self.get_metadata(video_id)
        if metadata is None:
            return None

        thumb = metadata.first_thumbnail()
        return thumb.uri if thumb else None

    def fetch_local_thumbnail(self, video_id: str) -> Optional[str]:
        """
        Copy the video thumbnail to the local store.

        Tries the conventional max resolution URL first, then the widest
        thumbnail listed in the remote metadata.

        Returns:
            Path of the newly written file as reported by the store, or None
            if the file already exists or nothing could be fetched or written
        """
        local_uri = self.get_local_uri(video_id)
        if self.file_store.exists(local_uri):
            return None

        try:
            self.file_store.prepare_directory(local_uri)
        except (OSError, SuspiciousFileOperation) as e:
            logger.warning(f"Cannot prepare thumbnail directory for {local_uri}: {e}")
            return None

        image = fetch_image(
            self.get_maxres_thumbnail_url(video_id),
            timeout=self.config.http_timeout,
            user_agent=self.config.user_agent,
        )
        if image is None:
            metadata = self.get_metadata(video_id)
            best = metadata.best_thumbnail() if metadata else None
            if best is None:
                logger.warning(f"No thumbnail available for video {video_id}")
                return None

            image = fetch_image(
                best.uri,
                timeout=self.config.http_timeout,
                user_agent=self.config.user_agent,
            )
            if image is None:
                return None

        try:
            stored = self.file_store.save(local_uri, image.data)
        except (OSError, SuspiciousFileOperation) as e:
            logger.warning(f"Cannot write thumbnail for video {video_id} to {local_uri}: {e}")
            return None

        logger.info(f"Stored thumbnail for video {video_id} at {stored}")
        return stored

    def thumbnail(self, reference: Optional[str]) -> str:
        """
        Thumbnail to display for the reference.

        Returns:
            Local thumbnail path when cached or fetchable, else the generic icon
        """
        video_id = self.extract_video_id(reference)
        if video_id:
            local_uri = self.get_local_uri(video_id)
            if self.file_store.exists(local_uri):
                return local_uri
            fetched = self.fetch_local_thumbnail(video_id)
            if fetched:
                return fetched

        return f"{self.config.icon_base}/{FALLBACK_ICON}"
