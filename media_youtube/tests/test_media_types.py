from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from media_youtube.exceptions import MediaValidationError
from media_youtube.forms import YouTubeSettingsForm
from media_youtube.media_types import (
    BaseMediaType,
    MediaTypeRegistry,
    YouTubeMediaType,
    get_media_type,
)
from media_youtube.storage import LocalFileStore

from .conftest import make_image_response


@pytest.fixture
def media_type(tmp_path, metadata_client):
    return YouTubeMediaType(
        {
            "source_field": "field_media_video",
            "local_images": str(tmp_path / "thumbs"),
            "icon_base": "/static/icons",
        },
        file_store=LocalFileStore(),
        metadata_client=metadata_client,
    )


def make_media(value):
    return SimpleNamespace(field_media_video=value)


class TestMediaTypeRegistry:
    def test_get_existing_media_type(self):
        assert MediaTypeRegistry.get("youtube") is YouTubeMediaType

    def test_get_unknown_media_type(self):
        with pytest.raises(KeyError):
            MediaTypeRegistry.get("vimeo")

    def test_get_all(self):
        registry = MediaTypeRegistry.get_all()
        assert registry == {"youtube": YouTubeMediaType}

        # Returned dict is a copy
        registry["other"] = object
        assert "other" not in MediaTypeRegistry.get_all()

    def test_get_media_type_factory(self, tmp_path):
        media_type = get_media_type(
            "youtube", {"source_field": "url", "local_images": str(tmp_path)}
        )

        assert isinstance(media_type, BaseMediaType)
        assert isinstance(media_type, YouTubeMediaType)
        assert media_type.source_field == "url"
        assert media_type.resolver.config.source_field == "url"


class TestYouTubeMediaType:
    def test_metadata(self):
        assert YouTubeMediaType.plugin_id == "youtube"
        assert YouTubeMediaType.label == "YouTube video"

    def test_provided_fields(self):
        fields = YouTubeMediaType.provided_fields()

        assert fields["video_id"] == "Video ID."
        assert set(fields) == {
            "video_id",
            "local_thumbnail",
            "image_local",
            "image_local_uri",
            "remote_thumbnail",
            "width",
            "height",
            "autoplay",
            "privacy_mode",
        }

    def test_get_field(self, media_type, tmp_path):
        media = make_media("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

        assert media_type.get_field(media, "video_id") == "dQw4w9WgXcQ"
        assert media_type.get_field(media, "image_local_uri") == (
            f"{tmp_path / 'thumbs'}/dQw4w9WgXcQ.jpg"
        )

    def test_get_field_from_dict(self, media_type):
        media = {"field_media_video": "//www.youtube.com/v/xyz789"}
        assert media_type.get_field(media, "video_id") == "xyz789"

    def test_get_unknown_field_returns_none(self, media_type):
        media = make_media("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        assert media_type.get_field(media, "duration") is None

    def test_validate(self, media_type):
        media_type.validate(make_media("https://www.youtube-nocookie.com/embed/abc123_-XY"))

        with pytest.raises(MediaValidationError) as exc_info:
            media_type.validate(make_media("not a url"))
        assert exc_info.value.field == "field_media_video"

    def test_validate_empty_value(self, media_type):
        with pytest.raises(MediaValidationError):
            media_type.validate(make_media(None))

    def test_missing_source_field_configuration(self, tmp_path):
        media_type = YouTubeMediaType({"local_images": str(tmp_path)})

        assert media_type.get_source_value(make_media("https://www.youtube.com/embed/x")) is None
        assert media_type.get_field(make_media("https://www.youtube.com/embed/x"), "video_id") is None

    @patch("requests.get")
    def test_thumbnail(self, mock_get, media_type, tmp_path):
        mock_get.return_value = make_image_response()

        thumbnail = media_type.thumbnail(make_media("https://www.youtube.com/embed/abc123"))

        assert thumbnail == f"{tmp_path / 'thumbs'}/abc123.jpg"

    def test_thumbnail_for_invalid_value(self, media_type):
        assert media_type.thumbnail(make_media("not a url")) == "/static/icons/youtube.png"

    def test_settings_form(self, media_type):
        model = MagicMock()
        model._meta.get_fields.return_value = []

        form = media_type.settings_form(model)

        assert isinstance(form, YouTubeSettingsForm)
        assert form.model is model
        assert form.initial["source_field"] == "field_media_video"
