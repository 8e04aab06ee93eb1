"""YouTube Data API v3 metadata fetching service.

This module wraps the videos.list endpoint of the YouTube Data API and maps
the first result into a normalized VideoMetadata record.
"""

import logging
from typing import Any, Optional, Tuple

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .duration import iso_duration_to_seconds
from .models import ChannelInfo, VideoMetadata

logger = logging.getLogger(__name__)

METADATA_PARTS = "snippet,statistics,contentDetails"

# Failures at the transport or HTTP level; anything else propagates
UPSTREAM_ERRORS = (HttpError, httplib2.HttpLib2Error, OSError)


class VideoUnavailableError(ValueError):
    """Raised when the metadata endpoint returns no item for a video ID."""


def _count(statistics: dict, key: str) -> int:
    """Numeric coercion for a statistics field, 0 when the key is absent."""
    return int(statistics.get(key) or 0)


class YouTubeMetadataService:
    """Service for fetching YouTube video metadata using Data API v3.

    Each call to fetch_metadata() issues exactly one videos.list request.

    Example:
        >>> service = YouTubeMetadataService(api_key="...")
        >>> metadata, error = service.fetch_metadata_safe("dQw4w9WgXcQ")
        >>> if metadata:
        ...     print(f"Title: {metadata.title}")
        ...     print(f"Views: {metadata.views}")
    """

    def __init__(self, api_key: str, youtube: Optional[Any] = None):
        """Initialize YouTube metadata service.

        Args:
            api_key: YouTube Data API v3 key, sent as the ``key`` query parameter
            youtube: Optional prebuilt API resource (built from api_key if omitted)
        """
        if not api_key:
            raise ValueError("YouTube API key not provided")

        self.api_key = api_key
        self.youtube = youtube or build("youtube", "v3", developerKey=self.api_key)

    def fetch_metadata(self, video_id: str) -> VideoMetadata:
        """Fetch metadata for a YouTube video.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoMetadata built from the first result item

        Raises:
            HttpError: If the API request fails
            VideoUnavailableError: If the response holds no items
            KeyError: If the result item lacks required fields
        """
        request = self.youtube.videos().list(
            part=METADATA_PARTS,
            id=video_id,
        )
        response = request.execute()

        items = response.get("items") if response else None
        if not items:
            raise VideoUnavailableError(f"Video not found: {video_id}")

        return self._to_metadata(items[0])

    def fetch_metadata_safe(
        self, video_id: str
    ) -> Tuple[Optional[VideoMetadata], Optional[str]]:
        """Fetch metadata, absorbing upstream failures.

        Malformed result items are not absorbed and still raise.

        Args:
            video_id: YouTube video ID

        Returns:
            Tuple of (metadata, error_string)
            - If successful: (metadata, None)
            - If failed: (None, error_message)
        """
        try:
            return self.fetch_metadata(video_id), None
        except HttpError as e:
            error_msg = f"YouTube API error: {e}"
        except VideoUnavailableError as e:
            error_msg = str(e)
        except UPSTREAM_ERRORS as e:
            error_msg = f"YouTube API transport error: {e}"

        logger.warning(f"Metadata unavailable for {video_id}: {error_msg}")
        return None, error_msg

    @staticmethod
    def _to_metadata(video: dict) -> VideoMetadata:
        """Map a videos.list item to VideoMetadata."""
        snippet = video["snippet"]
        statistics = video.get("statistics", {})
        content_details = video["contentDetails"]

        return VideoMetadata(
            title=snippet["title"],
            description=snippet.get("description", ""),
            duration_seconds=iso_duration_to_seconds(content_details["duration"]),
            views=_count(statistics, "viewCount"),
            likes=_count(statistics, "likeCount"),
            comments=_count(statistics, "commentCount"),
            publish_date=snippet["publishedAt"].split("T")[0],
            channel=ChannelInfo(name=snippet["channelTitle"], subscribers=None),
        )
