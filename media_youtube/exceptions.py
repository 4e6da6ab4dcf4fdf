"""
Media type exceptions.

Custom exceptions used by the YouTube media type for validation and
remote metadata error handling.
"""


class MediaTypeError(Exception):
    """Base exception for all media type errors."""

    pass


class MediaValidationError(MediaTypeError):
    """
    Exception raised when a media item's source value is not acceptable.

    Reported to the user at save/edit time. The host should refuse to persist
    the media item.

    Attributes:
        field: Name of the host field holding the offending value
        message: Error description
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self):
        return f"{self.field}: {self.message}"


class UnsupportedFieldError(MediaTypeError):
    """Exception raised when a field name is not provided by the media type."""

    def __init__(self, field_name: str):
        super().__init__(f"Unsupported field: {field_name}")
        self.field_name = field_name


class MetadataFetchError(MediaTypeError):
    """
    Exception raised when remote video metadata cannot be retrieved.

    Attributes:
        message: Error description
        video_id: Video the metadata was requested for
        original_error: Original exception that caused this error
    """

    def __init__(self, message: str, video_id: str = None, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.video_id = video_id
        self.original_error = original_error


class MetadataNetworkError(MetadataFetchError):
    """The metadata endpoint could not be reached (timeout, DNS, 5xx)."""

    pass


class MetadataResponseError(MetadataFetchError):
    """The metadata endpoint answered with something we cannot parse."""

    pass


class VideoNotFoundError(MetadataFetchError):
    """The remote reports the video as missing or private."""

    pass


class NoThumbnailsError(MetadataFetchError):
    """The metadata document lists no thumbnails."""

    pass
