"""Request and response models for the API."""

from typing import Optional

from pydantic import BaseModel, Field

from socialvideo.services.analysis import AnalysisResponse


class AnalyzeSocialVideoRequest(BaseModel):
    """Request to analyze a social video.

    platform and video_url are optional here so that missing values produce
    the service's own 400 error instead of a validation error.
    """

    platform: Optional[str] = Field(default=None, description='Must be "youtube"')
    video_url: Optional[str] = Field(default=None, description="Video URL")
    include_transcript: bool = Field(
        default=True,
        description="Fetch caption text in addition to metadata",
    )


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    error: str


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str
    checks: dict[str, dict]


__all__ = [
    "AnalysisResponse",
    "AnalyzeSocialVideoRequest",
    "ErrorResponse",
    "HealthCheckResponse",
]
