"""Social video analysis pipeline.

Assembles one normalized payload for a video URL:

    extract id → fetch metadata (required) → fetch transcript (optional) → assemble

Every request runs against an explicit AnalysisContext; nothing in the
pipeline reads global configuration.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, Field

from socialvideo.lib.logging_config import log_with_context
from socialvideo.services.youtube import (
    SUPPORTED_PLATFORM,
    TranscriptResult,
    VideoMetadata,
    YouTubeMetadataService,
    YouTubeTranscriptService,
    extract_video_reference,
)

logger = logging.getLogger(__name__)

LIMITATIONS = (
    "No CTR data",
    "No retention graph access",
    "No impressions data",
)


# =============================================================================
# Errors
# =============================================================================


class AnalysisError(Exception):
    """Request-level failure with the HTTP status it maps to."""

    status_code: int = 500
    message: str = "Analysis failed"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnsupportedPlatformError(AnalysisError):
    status_code = 400
    message = "Unsupported platform or missing URL"


class InvalidVideoUrlError(AnalysisError):
    status_code = 400
    message = "Invalid YouTube URL"


class VideoNotFoundError(AnalysisError):
    status_code = 404
    message = "Video not found or unavailable"


class MissingCredentialError(AnalysisError):
    status_code = 500
    message = "YouTube API key not configured"


# =============================================================================
# Context and result
# =============================================================================


@dataclass(frozen=True)
class AnalysisContext:
    """Everything one analysis request needs."""

    video_url: str
    api_key: str
    include_transcript: bool = True
    correlation_id: Optional[str] = None


class AnalysisResponse(BaseModel):
    """Normalized analysis payload returned to the caller."""

    platform: Literal["youtube"] = SUPPORTED_PLATFORM
    video_id: str
    metadata: VideoMetadata
    transcript: TranscriptResult = Field(default_factory=TranscriptResult.none)
    analysis_ready: bool = True
    limitations: list[str] = Field(default_factory=lambda: list(LIMITATIONS))


# =============================================================================
# Pipeline
# =============================================================================


def validate_request(platform: Optional[str], video_url: Optional[str]) -> None:
    """Reject requests for other platforms or without a URL.

    Raises:
        UnsupportedPlatformError: If platform is not "youtube" or video_url is empty
    """
    if platform != SUPPORTED_PLATFORM or not video_url:
        raise UnsupportedPlatformError()


def create_services(
    api_key: str,
) -> tuple[YouTubeMetadataService, YouTubeTranscriptService]:
    """Create metadata and transcript services sharing one API resource."""
    metadata_service = YouTubeMetadataService(api_key=api_key)
    transcript_service = YouTubeTranscriptService(
        api_key=api_key, youtube=metadata_service.youtube
    )
    return metadata_service, transcript_service


def analyze_video(
    context: AnalysisContext,
    metadata_service: Optional[YouTubeMetadataService] = None,
    transcript_service: Optional[YouTubeTranscriptService] = None,
) -> AnalysisResponse:
    """Run the analysis pipeline for one video URL.

    Args:
        context: Request values (URL, credential, options)
        metadata_service: Optional service override (created from context.api_key if omitted)
        transcript_service: Optional service override (created from context.api_key if omitted)

    Returns:
        AnalysisResponse with metadata and, if requested and available, a transcript

    Raises:
        InvalidVideoUrlError: If no video ID can be extracted from the URL
        MissingCredentialError: If no API key is available and no services are given
        VideoNotFoundError: If the metadata lookup fails or returns nothing
    """
    reference = extract_video_reference(context.video_url)
    if reference is None:
        raise InvalidVideoUrlError()

    if metadata_service is None or transcript_service is None:
        if not context.api_key:
            raise MissingCredentialError()
        default_metadata, default_transcript = create_services(context.api_key)
        metadata_service = metadata_service or default_metadata
        transcript_service = transcript_service or default_transcript

    metadata, error = metadata_service.fetch_metadata_safe(reference.id)
    if metadata is None:
        logger.info(f"Metadata lookup failed for {reference.id}: {error}")
        raise VideoNotFoundError()

    transcript = TranscriptResult.none()
    if context.include_transcript:
        fetched, error = transcript_service.fetch_transcript_safe(reference.id)
        if fetched is not None:
            transcript = fetched
        else:
            logger.debug(f"No transcript for {reference.id}: {error}")

    log_with_context(
        logger,
        "info",
        "Video analyzed",
        correlation_id=context.correlation_id,
        video_id=reference.id,
        transcript_type=transcript.type,
    )

    return AnalysisResponse(
        platform=reference.platform,
        video_id=reference.id,
        metadata=metadata,
        transcript=transcript,
    )
