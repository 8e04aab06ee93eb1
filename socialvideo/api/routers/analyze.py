"""Social video analysis endpoint."""

import asyncio
import logging

from fastapi import APIRouter, Request

from socialvideo.api.models import AnalysisResponse, AnalyzeSocialVideoRequest, ErrorResponse
from socialvideo.lib.config_manager import get_config
from socialvideo.services.analysis import (
    AnalysisContext,
    AnalysisError,
    analyze_video,
    validate_request,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze_social_video",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_social_video(body: AnalyzeSocialVideoRequest, request: Request):
    """
    Aggregate metadata and captions for a YouTube video.

    This endpoint:
    1. Validates platform and URL
    2. Extracts the video ID from the URL
    3. Fetches metadata from the YouTube Data API (required)
    4. Fetches captions if include_transcript is true (best effort)
    """
    validate_request(body.platform, body.video_url)

    context = AnalysisContext(
        video_url=body.video_url,
        api_key=get_config("YOUTUBE_API_KEY"),
        include_transcript=body.include_transcript,
        correlation_id=getattr(request.state, "correlation_id", None),
    )

    try:
        # googleapiclient is blocking
        return await asyncio.to_thread(analyze_video, context)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception(f"Analysis failed for {body.video_url}")
        raise AnalysisError(f"Analysis failed: {str(e)}")
