"""
HTTP image fetching utilities.

Handles downloading thumbnail images from URLs with proper:
- HTTP headers (User-Agent, Referer)
- MIME type detection and validation
- Timeout handling
- Error handling
"""

import io
import logging
from typing import Dict, Optional
from urllib.parse import urlparse

import requests
from PIL import Image, UnidentifiedImageError

from ..config import DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT
from ..types import FetchedImage

logger = logging.getLogger(__name__)

# Accepted image MIME types
ACCEPTED_IMAGE_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
}

# Anything smaller is an error page or a tracking pixel
MIN_IMAGE_BYTES = 100


def get_image_headers(url: Optional[str] = None, user_agent: str = DEFAULT_USER_AGENT) -> Dict[str, str]:
    """
    Get HTTP headers for image fetching.

    Args:
        url: Optional URL to extract referer from
        user_agent: User-Agent header value

    Returns:
        Dict of HTTP headers
    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "image/avif,image/webp,image/apng,image/*,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    if url:
        parsed = urlparse(url)
        if parsed.scheme and parsed.netloc:
            headers["Referer"] = f"{parsed.scheme}://{parsed.netloc}"

    return headers


def is_image_content_type(content_type: Optional[str]) -> bool:
    """
    Check if content type is a valid image MIME type.

    Args:
        content_type: HTTP Content-Type header value

    Returns:
        True if valid image MIME type
    """
    if not content_type:
        return False

    base_type = content_type.split(";")[0].strip().lower()
    return base_type in ACCEPTED_IMAGE_TYPES


def read_image_size(image_data: bytes) -> Optional[Dict[str, int]]:
    """
    Validate image data using Pillow and return its dimensions.

    Args:
        image_data: Raw image bytes

    Returns:
        Dict with width and height if valid, None otherwise
    """
    try:
        with Image.open(io.BytesIO(image_data)) as img:
            img.load()
            return {"width": img.width, "height": img.height}
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.debug(f"Pillow validation failed: {e}")
        return None


def fetch_image(
    url: str,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Optional[FetchedImage]:
    """
    Fetch a single image from URL with validation.

    Args:
        url: URL to fetch image from
        timeout: Request timeout in seconds
        user_agent: User-Agent header value

    Returns:
        FetchedImage, or None if the fetch fails or the payload is not an image
    """
    if not url:
        logger.warning("Empty URL provided to fetch_image")
        return None

    try:
        logger.debug(f"Fetching image from {url}")

        headers = get_image_headers(url, user_agent)
        response = requests.get(url, headers=headers, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        logger.warning(f"HTTP {status} fetching image {url}")
        return None
    except requests.exceptions.Timeout:
        logger.warning(f"Timeout fetching image: {url}")
        return None
    except requests.exceptions.ConnectionError:
        logger.warning(f"Connection error fetching image: {url}")
        return None
    except requests.exceptions.RequestException as e:
        logger.warning(f"Error fetching image {url}: {e}")
        return None

    content_type = response.headers.get("Content-Type", "")
    if not is_image_content_type(content_type):
        logger.warning(f"Invalid content type for image {url}: {content_type}")
        return None

    image_data = response.content
    if len(image_data) < MIN_IMAGE_BYTES:
        logger.debug(f"Image too small ({len(image_data)} bytes): {url}")
        return None

    size = read_image_size(image_data)
    if size is None:
        logger.warning(f"Fetched data is not a readable image: {url}")
        return None

    logger.debug(f"Successfully fetched image ({len(image_data)} bytes): {url}")
    return FetchedImage(
        data=image_data,
        content_type=content_type.split(";")[0].strip(),
        width=size["width"],
        height=size["height"],
    )
