"""
Embed code utilities.

Provides functions for:
- Detecting whether a source value is an HTML embed snippet
- Reading player attributes (size, autoplay, privacy mode) from it
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup, Tag

from ..types import EmbedAttributes

logger = logging.getLogger(__name__)

PRIVACY_DOMAIN = "youtube-nocookie.com"


def is_embed_code(reference: Optional[str]) -> bool:
    """Check if the value looks like HTML markup rather than a bare URL."""
    return bool(reference) and "<" in reference and ">" in reference


def _find_player(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the first tag pointing at a YouTube player."""
    for tag in soup.find_all(["iframe", "embed"]):
        if "youtube" in (tag.get("src") or ""):
            return tag

    # Legacy <object><param name="movie" value="..."></object> snippets
    for param in soup.find_all("param"):
        if (param.get("name") or "").lower() == "movie" and "youtube" in (param.get("value") or ""):
            return param

    return None


def _player_src(tag: Tag) -> str:
    if tag.name == "param":
        return tag.get("value") or ""
    return tag.get("src") or ""


def _parse_dimension(value: Optional[str]) -> Optional[int]:
    """Parse '560' or '560px'; relative sizes such as '100%' are not dimensions."""
    if not value:
        return None
    value = value.strip().lower()
    if value.endswith("px"):
        value = value[:-2]
    try:
        return int(value)
    except ValueError:
        return None


def _query_params(src: str) -> Dict[str, List[str]]:
    """
    Parse player parameters from the src URL.

    Legacy /v/ URLs append parameters with '&' directly after the id,
    without a '?'.
    """
    parsed = urlparse(src)
    params = parse_qs(parsed.query)
    if "&" in parsed.path:
        for key, values in parse_qs(parsed.path.split("&", 1)[1]).items():
            params.setdefault(key, values)
    return params


def parse_embed_attributes(reference: Optional[str]) -> Optional[EmbedAttributes]:
    """
    Read player attributes from a YouTube embed snippet.

    Args:
        reference: Source value; only HTML embed snippets are parsed

    Returns:
        EmbedAttributes, or None for plain URLs and snippets without a
        YouTube player
    """
    if not is_embed_code(reference):
        return None

    soup = BeautifulSoup(reference, "html.parser")
    player = _find_player(soup)
    if player is None:
        logger.debug("Embed code contains no YouTube player")
        return None

    src = _player_src(player)

    # Size lives on the player tag, or on the wrapping <object> for legacy snippets
    sized = player
    if player.name == "param" or not (player.get("width") or player.get("height")):
        container = player.find_parent("object")
        if container is not None:
            sized = container

    params = _query_params(src)
    autoplay = params.get("autoplay", ["0"])[0] == "1"

    netloc = urlparse(src).netloc.lower()
    privacy_mode = netloc == PRIVACY_DOMAIN or netloc.endswith("." + PRIVACY_DOMAIN)

    return EmbedAttributes(
        src=src,
        width=_parse_dimension(sized.get("width")),
        height=_parse_dimension(sized.get("height")),
        autoplay=autoplay,
        privacy_mode=privacy_mode,
    )
