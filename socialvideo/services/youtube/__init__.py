"""YouTube services for video metadata and caption retrieval.

This module provides:
- extract_video_id / extract_video_reference: Parse YouTube URLs to get video IDs
- iso_duration_to_seconds: Normalize ISO 8601 durations
- YouTubeMetadataService: videos.list metadata fetching
- YouTubeTranscriptService: captions.list + captions.download fetching
- select_caption_track: Caption language preference rule

Example:
    >>> from socialvideo.services.youtube import extract_video_id, YouTubeMetadataService
    >>> video_id = extract_video_id("https://youtu.be/dQw4w9WgXcQ")
    >>> metadata, error = YouTubeMetadataService(api_key="...").fetch_metadata_safe(video_id)
"""

from .duration import format_duration, iso_duration_to_seconds
from .metadata_service import VideoUnavailableError, YouTubeMetadataService
from .models import (
    SUPPORTED_PLATFORM,
    CaptionTrack,
    ChannelInfo,
    TranscriptResult,
    VideoMetadata,
    VideoReference,
)
from .transcript_service import YouTubeTranscriptService, select_caption_track
from .url import extract_video_id, extract_video_reference

__all__ = [
    "SUPPORTED_PLATFORM",
    "CaptionTrack",
    "ChannelInfo",
    "TranscriptResult",
    "VideoMetadata",
    "VideoReference",
    "VideoUnavailableError",
    "YouTubeMetadataService",
    "YouTubeTranscriptService",
    "extract_video_id",
    "extract_video_reference",
    "format_duration",
    "iso_duration_to_seconds",
    "select_caption_track",
]
