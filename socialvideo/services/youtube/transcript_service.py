"""YouTube caption track retrieval through the Data API v3 captions endpoints.

A transcript is fetched as a small pipeline:
1. list the caption tracks of a video (captions.list)
2. select one track, preferring English
3. download that track as SRT text (captions.download)

A failure at any step yields no transcript at all.
"""

import logging
from typing import Any, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .metadata_service import UPSTREAM_ERRORS
from .models import CaptionTrack, TranscriptResult

logger = logging.getLogger(__name__)

PREFERRED_LANGUAGE = "en"
SUBTITLE_FORMAT = "srt"
STANDARD_TRACK_KIND = "standard"


def select_caption_track(
    tracks: list[CaptionTrack], preferred_language: str = PREFERRED_LANGUAGE
) -> Optional[CaptionTrack]:
    """Pick the first track in the preferred language, else the first track.

    Args:
        tracks: Caption tracks in the order returned by the API
        preferred_language: Language tag to prefer

    Returns:
        Selected track, or None for an empty list
    """
    if not tracks:
        return None

    for track in tracks:
        if track.language == preferred_language:
            return track
    return tracks[0]


def to_transcript_result(track: CaptionTrack, text: str) -> TranscriptResult:
    """Build the transcript record for a downloaded track."""
    transcript_type = "official" if track.track_kind == STANDARD_TRACK_KIND else "auto"
    return TranscriptResult(available=True, type=transcript_type, text=text)


class YouTubeTranscriptService:
    """Fetch a video's captions with the YouTube Data API.

    Example:
        >>> service = YouTubeTranscriptService(api_key="...")
        >>> transcript, error = service.fetch_transcript_safe("dQw4w9WgXcQ")
        >>> if transcript:
        ...     print(transcript.type, len(transcript.text))
    """

    def __init__(
        self,
        api_key: str,
        youtube: Optional[Any] = None,
        preferred_language: str = PREFERRED_LANGUAGE,
    ):
        """Initialize YouTube transcript service.

        Args:
            api_key: YouTube Data API v3 key
            youtube: Optional prebuilt API resource (built from api_key if omitted)
            preferred_language: Caption language to prefer when several exist
        """
        if not api_key:
            raise ValueError("YouTube API key not provided")

        self.api_key = api_key
        self.preferred_language = preferred_language
        self.youtube = youtube or build("youtube", "v3", developerKey=self.api_key)

    def list_caption_tracks(self, video_id: str) -> list[CaptionTrack]:
        """List the caption tracks of a video.

        Raises:
            HttpError: If the API request fails
        """
        response = self.youtube.captions().list(
            part="snippet",
            videoId=video_id,
        ).execute()

        tracks = []
        for item in (response or {}).get("items") or []:
            snippet = item.get("snippet", {})
            tracks.append(
                CaptionTrack(
                    id=item["id"],
                    language=snippet.get("language", ""),
                    track_kind=snippet.get("trackKind", ""),
                )
            )
        return tracks

    def download_caption(self, track_id: str) -> str:
        """Download one caption track as raw SRT text.

        Raises:
            HttpError: If the API request fails
        """
        body = self.youtube.captions().download_media(
            id=track_id,
            tfmt=SUBTITLE_FORMAT,
        ).execute()

        if isinstance(body, bytes):
            return body.decode("utf-8", errors="replace")
        return body or ""

    def fetch_transcript(self, video_id: str) -> Optional[TranscriptResult]:
        """Run list → select → download for a video.

        Returns:
            TranscriptResult, or None when the video has no caption tracks

        Raises:
            HttpError: If either API request fails
        """
        track = select_caption_track(
            self.list_caption_tracks(video_id), self.preferred_language
        )
        if track is None:
            return None

        logger.debug(
            f"Selected caption track {track.id} ({track.language}, {track.track_kind}) for {video_id}"
        )
        return to_transcript_result(track, self.download_caption(track.id))

    def fetch_transcript_safe(
        self, video_id: str
    ) -> tuple[Optional[TranscriptResult], Optional[str]]:
        """Fetch transcript with error handling.

        Args:
            video_id: YouTube video ID

        Returns:
            Tuple of (transcript, error_message)
            - If successful: (transcript, None)
            - If failed: (None, error_message)
        """
        try:
            transcript = self.fetch_transcript(video_id)
        except HttpError as e:
            return None, f"YouTube API error: {e}"
        except UPSTREAM_ERRORS as e:
            return None, f"YouTube API transport error: {e}"

        if transcript is None:
            return None, f"No caption tracks for video: {video_id}"
        return transcript, None
