from unittest.mock import patch

import requests

from media_youtube.utils.fetcher import (
    fetch_image,
    get_image_headers,
    is_image_content_type,
    read_image_size,
)

from .conftest import make_error_response, make_image_response, make_jpeg_bytes


def test_get_image_headers_sets_referer():
    headers = get_image_headers("https://img.youtube.com/vi/abc/maxresdefault.jpg", "TestAgent")

    assert headers["User-Agent"] == "TestAgent"
    assert headers["Referer"] == "https://img.youtube.com"


def test_get_image_headers_without_url():
    assert "Referer" not in get_image_headers()


def test_is_image_content_type():
    assert is_image_content_type("image/jpeg")
    assert is_image_content_type("image/webp; charset=binary")
    assert not is_image_content_type("text/html")
    assert not is_image_content_type(None)


def test_read_image_size():
    assert read_image_size(make_jpeg_bytes(64, 48)) == {"width": 64, "height": 48}
    assert read_image_size(b"definitely not an image" * 10) is None


@patch("requests.get")
def test_fetch_image(mock_get):
    data = make_jpeg_bytes(1280, 720)
    mock_get.return_value = make_image_response(data, content_type="image/jpeg; charset=binary")

    image = fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg", timeout=3)

    assert image.data == data
    assert image.content_type == "image/jpeg"
    assert (image.width, image.height) == (1280, 720)
    assert mock_get.call_args[1]["timeout"] == 3


@patch("requests.get")
def test_fetch_image_http_error(mock_get):
    mock_get.return_value = make_error_response(404)

    assert fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg") is None


@patch("requests.get")
def test_fetch_image_timeout(mock_get):
    mock_get.side_effect = requests.exceptions.Timeout()

    assert fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg") is None


@patch("requests.get")
def test_fetch_image_rejects_html(mock_get):
    mock_get.return_value = make_image_response(b"<html>" * 50, content_type="text/html")

    assert fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg") is None


@patch("requests.get")
def test_fetch_image_rejects_tiny_payload(mock_get):
    mock_get.return_value = make_image_response(b"\xff\xd8\xff")

    assert fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg") is None


@patch("requests.get")
def test_fetch_image_rejects_corrupt_image(mock_get):
    mock_get.return_value = make_image_response(b"\x00" * 500)

    assert fetch_image("https://img.youtube.com/vi/abc/maxresdefault.jpg") is None


def test_fetch_image_empty_url():
    assert fetch_image("") is None
