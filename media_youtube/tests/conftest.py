"""Pytest fixtures for YouTube media type tests."""

import io
from unittest.mock import MagicMock

import pytest
import requests
from PIL import Image

from media_youtube.config import ResolverConfig
from media_youtube.resolver import YouTubeResolver
from media_youtube.storage import LocalFileStore
from media_youtube.types import ThumbnailDescriptor, VideoMetadata


def make_jpeg_bytes(width: int = 320, height: int = 180) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), "red").save(buffer, format="JPEG")
    return buffer.getvalue()


def make_image_response(data: bytes = None, content_type: str = "image/jpeg"):
    response = MagicMock()
    response.status_code = 200
    response.headers = {"Content-Type": content_type}
    response.content = make_jpeg_bytes() if data is None else data
    response.raise_for_status.return_value = None
    return response


def make_json_response(payload, status_code: int = 200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def make_error_response(status_code: int = 404):
    return make_json_response({}, status_code=status_code)


@pytest.fixture
def jpeg_bytes():
    return make_jpeg_bytes()


@pytest.fixture
def thumbs_dir(tmp_path):
    return tmp_path / "thumbs"


@pytest.fixture
def config(thumbs_dir):
    return ResolverConfig(
        source_field="field_media_video",
        local_images=str(thumbs_dir),
        icon_base="/static/media_youtube/icons",
    )


@pytest.fixture
def metadata():
    return VideoMetadata(
        video_id="abc123",
        title="Test Video",
        thumbnails=[
            ThumbnailDescriptor("https://i.ytimg.com/vi/abc123/default.jpg", 120, 90),
            ThumbnailDescriptor("https://i.ytimg.com/vi/abc123/hqdefault.jpg", 480, 360),
            ThumbnailDescriptor("https://i.ytimg.com/vi/abc123/mqdefault.jpg", 320, 180),
        ],
    )


@pytest.fixture
def metadata_client(metadata):
    client = MagicMock()
    client.fetch_video_metadata.return_value = metadata
    return client


@pytest.fixture
def resolver(config, metadata_client):
    return YouTubeResolver(config, file_store=LocalFileStore(), metadata_client=metadata_client)
