"""Health check endpoints."""

from fastapi import APIRouter

from socialvideo.api.models import HealthCheckResponse
from socialvideo.lib.config_manager import config

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Check overall service health."""
    checks = {
        "youtube_api_key": check_youtube_api_key(),
    }

    all_ok = all(check["status"] == "ok" for check in checks.values())
    status = "ok" if all_ok else "degraded"

    return HealthCheckResponse(status=status, checks=checks)


def check_youtube_api_key() -> dict:
    """Check that an upstream credential is configured, without calling upstream."""
    api_key = config.get("YOUTUBE_API_KEY")
    if not api_key:
        return {"status": "error", "message": "YOUTUBE_API_KEY is not set"}

    return {
        "status": "ok",
        "message": "YouTube API key configured",
        "key": config.mask_value("YOUTUBE_API_KEY", api_key),
    }
