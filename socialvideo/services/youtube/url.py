"""YouTube URL parsing.

Supports formats:
- https://youtu.be/VIDEO_ID
- https://youtube.com/watch?v=VIDEO_ID
- https://www.youtube.com/watch?v=VIDEO_ID&other=params
- https://m.youtube.com/watch?v=VIDEO_ID
"""

from typing import Optional
from urllib.parse import parse_qs, urlparse

from .models import VideoReference

SHORT_LINK_DOMAIN = "youtu.be"
CANONICAL_DOMAIN = "youtube.com"


def _matches_domain(host: str, domain: str) -> bool:
    """True if host is the domain itself or one of its subdomains."""
    return host == domain or host.endswith("." + domain)


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL.

    The ID is not validated against a character set. Short links return the
    path without its leading slash, which may be an empty string.

    Args:
        url: User-supplied video URL

    Returns:
        Video ID, or None if the URL is unparsable or not a YouTube URL

    Example:
        >>> extract_video_id("https://youtu.be/dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://www.youtube.com/watch?t=10&v=dQw4w9WgXcQ")
        'dQw4w9WgXcQ'
        >>> extract_video_id("https://vimeo.com/12345") is None
        True
    """
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except (AttributeError, TypeError, ValueError):
        return None

    if not parsed.scheme or not host:
        return None

    if _matches_domain(host, SHORT_LINK_DOMAIN):
        return parsed.path[1:] if parsed.path.startswith("/") else parsed.path

    if _matches_domain(host, CANONICAL_DOMAIN):
        video_ids = parse_qs(parsed.query, keep_blank_values=True).get("v", [])
        return video_ids[0] if video_ids else None

    return None


def extract_video_reference(url: str) -> Optional[VideoReference]:
    """Build a VideoReference from a URL, or None if no usable ID is found."""
    video_id = extract_video_id(url)
    if not video_id:
        return None
    return VideoReference(id=video_id)
