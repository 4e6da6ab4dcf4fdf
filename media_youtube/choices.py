"""Field choices for the YouTube media type."""

from enum import Enum


class MediaField(str, Enum):
    """Fields the YouTube media type can resolve for a media item."""

    VIDEO_ID = "video_id"
    LOCAL_THUMBNAIL = "local_thumbnail"
    IMAGE_LOCAL = "image_local"
    IMAGE_LOCAL_URI = "image_local_uri"
    REMOTE_THUMBNAIL = "remote_thumbnail"
    WIDTH = "width"
    HEIGHT = "height"
    AUTOPLAY = "autoplay"
    PRIVACY_MODE = "privacy_mode"


PROVIDED_FIELDS = {
    MediaField.VIDEO_ID: "Video ID.",
    MediaField.LOCAL_THUMBNAIL: "Copies video thumbnail to the local filesystem and returns the URI.",
    MediaField.IMAGE_LOCAL: "Copies video thumbnail to the local filesystem and returns the URI.",
    MediaField.IMAGE_LOCAL_URI: "Gets URI of the locally saved thumbnail.",
    MediaField.REMOTE_THUMBNAIL: "Link to remotely hosted video thumbnail.",
    MediaField.WIDTH: "Video width (extracted from embed code).",
    MediaField.HEIGHT: "Video height (extracted from embed code).",
    MediaField.AUTOPLAY: "Autoplay status (extracted from embed code).",
    MediaField.PRIVACY_MODE: "Privacy mode status (extracted from embed code).",
}

# Fields that download and write files when resolved
FETCHING_FIELDS = frozenset({MediaField.LOCAL_THUMBNAIL, MediaField.IMAGE_LOCAL})

# Host model field types that may hold a YouTube URL or embed code
# (plain string, long text and link)
SOURCE_FIELD_TYPES = ["CharField", "TextField", "URLField"]
