import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import DEFAULT_HTTP_TIMEOUT, YOUTUBE_DATA_API_BASE, YOUTUBE_OEMBED_URL
from ..exceptions import (
    MetadataFetchError,
    MetadataNetworkError,
    MetadataResponseError,
    NoThumbnailsError,
    VideoNotFoundError,
)
from ..types import ThumbnailDescriptor, VideoMetadata

logger = logging.getLogger(__name__)

# oEmbed answers 401 for private videos and 404 for missing ones
NOT_FOUND_STATUSES = {401, 404}


class YouTubeMetadataClient:
    """
    Client for per-video YouTube metadata.

    Uses the YouTube Data API v3 when an API key is available, otherwise the
    keyless oEmbed endpoint. Both answers are normalized to VideoMetadata.
    """

    DATA_API_URL = YOUTUBE_DATA_API_BASE
    OEMBED_URL = YOUTUBE_OEMBED_URL

    def __init__(self, api_key: Optional[str] = None, timeout: float = DEFAULT_HTTP_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout

    def _get(self, url: str, params: Dict[str, Any], video_id: str) -> Dict[str, Any]:
        """Execute a GET request and decode the JSON body."""
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status in NOT_FOUND_STATUSES:
                raise VideoNotFoundError(
                    f"Video {video_id} not found (HTTP {status})", video_id, e
                ) from e
            if status is not None and status >= 500:
                raise MetadataNetworkError(
                    f"Metadata endpoint failed with HTTP {status}", video_id, e
                ) from e
            raise MetadataFetchError(
                f"Metadata request rejected with HTTP {status}", video_id, e
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"YouTube metadata request for {video_id} failed: {str(e)}")
            raise MetadataNetworkError(
                f"YouTube metadata request failed: {str(e)}", video_id, e
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise MetadataResponseError(
                f"Metadata response for {video_id} is not JSON", video_id, e
            ) from e

        if not isinstance(data, dict):
            raise MetadataResponseError(
                f"Unexpected metadata document for {video_id}: {type(data).__name__}", video_id
            )
        return data

    def fetch_video_metadata(self, video_id: str) -> VideoMetadata:
        """
        Fetch metadata for a video.

        Raises:
            MetadataFetchError: (or a subclass) when the metadata is unusable
        """
        if self.api_key:
            metadata = self._fetch_via_data_api(video_id)
        else:
            metadata = self._fetch_via_oembed(video_id)

        if not metadata.thumbnails:
            raise NoThumbnailsError(f"No thumbnails listed for video {video_id}", video_id)

        logger.debug(
            f"Fetched metadata for video {video_id}: {len(metadata.thumbnails)} thumbnail(s)"
        )
        return metadata

    def _fetch_via_data_api(self, video_id: str) -> VideoMetadata:
        """Fetch snippet data from the Data API videos endpoint."""
        data = self._get(
            f"{self.DATA_API_URL}/videos",
            {"part": "snippet", "id": video_id, "key": self.api_key},
            video_id,
        )

        items = data.get("items")
        if not isinstance(items, list):
            raise MetadataResponseError(f"Data API response has no items list for {video_id}", video_id)
        if not items:
            raise VideoNotFoundError(f"Video not found: {video_id}", video_id)
        if not isinstance(items[0], dict):
            raise MetadataResponseError(f"Malformed Data API item for {video_id}", video_id)

        snippet = items[0].get("snippet") or {}
        if not isinstance(snippet, dict):
            raise MetadataResponseError(f"Malformed Data API snippet for {video_id}", video_id)
        if not isinstance(snippet.get("thumbnails") or {}, dict):
            raise MetadataResponseError(f"Malformed thumbnail map for {video_id}", video_id)
        thumbnails = self._parse_thumbnail_map(snippet.get("thumbnails") or {})
        return VideoMetadata(
            video_id=video_id,
            title=snippet.get("title", ""),
            thumbnails=thumbnails,
        )

    def _fetch_via_oembed(self, video_id: str) -> VideoMetadata:
        """Fetch the oEmbed document; it lists a single thumbnail."""
        data = self._get(
            self.OEMBED_URL,
            {"url": f"https://www.youtube.com/watch?v={video_id}", "format": "json"},
            video_id,
        )

        thumbnails = []
        if data.get("thumbnail_url"):
            thumbnails.append(
                ThumbnailDescriptor(
                    uri=data["thumbnail_url"],
                    width=_to_int(data.get("thumbnail_width")),
                    height=_to_int(data.get("thumbnail_height")),
                )
            )

        return VideoMetadata(
            video_id=video_id,
            title=data.get("title", ""),
            thumbnails=thumbnails,
        )

    @staticmethod
    def _parse_thumbnail_map(thumbnails: Dict[str, Any]) -> List[ThumbnailDescriptor]:
        """Convert the Data API thumbnail map, keeping its listing order."""
        result = []
        for entry in thumbnails.values():
            if not isinstance(entry, dict) or not entry.get("url"):
                continue
            result.append(
                ThumbnailDescriptor(
                    uri=entry["url"],
                    width=_to_int(entry.get("width")),
                    height=_to_int(entry.get("height")),
                )
            )
        return result


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
