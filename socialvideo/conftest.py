"""
Pytest configuration and fixtures for socialvideo tests.

Provides:
- Environment setup
- Mock YouTube Data API resource factory
- Sample upstream payloads
- FastAPI test client
"""

import os
from collections.abc import Generator
from typing import Any, Optional
from unittest.mock import MagicMock

import httplib2
import pytest
from fastapi.testclient import TestClient
from googleapiclient.errors import HttpError


# ============ Environment Setup ============


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ.setdefault("YOUTUBE_API_KEY", "test-youtube-key")
    os.environ.setdefault("LOG_LEVEL", "WARNING")
    yield


# ============ Upstream Payloads ============


def make_http_error(status: int = 404, message: str = "Not Found") -> HttpError:
    """Build a googleapiclient HttpError with the given status."""
    resp = httplib2.Response({"status": str(status)})
    resp.reason = message
    content = f'{{"error": {{"code": {status}, "message": "{message}"}}}}'.encode()
    return HttpError(resp=resp, content=content)


@pytest.fixture
def http_error():
    """Factory for HttpError instances."""
    return make_http_error


@pytest.fixture
def video_item() -> dict[str, Any]:
    """A videos.list item with every mapped field present."""
    return {
        "id": "abc123",
        "snippet": {
            "title": "Test Video",
            "description": "A test description",
            "publishedAt": "2024-03-15T12:34:56Z",
            "channelId": "UC1234567890123456789012",
            "channelTitle": "Test Channel",
        },
        "statistics": {
            "viewCount": "1500",
            "likeCount": "120",
            "commentCount": "15",
        },
        "contentDetails": {"duration": "PT1H2M3S"},
    }


@pytest.fixture
def caption_items() -> list[dict[str, Any]]:
    """A captions.list result with a French ASR track before an English standard one."""
    return [
        {"id": "cap-fr", "snippet": {"language": "fr", "trackKind": "asr"}},
        {"id": "cap-en", "snippet": {"language": "en", "trackKind": "standard"}},
        {"id": "cap-es", "snippet": {"language": "es", "trackKind": "standard"}},
    ]


# ============ Mock YouTube Resource ============


def create_mock_youtube(
    video_items: Optional[list[dict]] = None,
    caption_items: Optional[list[dict]] = None,
    caption_body: bytes = b"1\n00:00:00,000 --> 00:00:01,000\nHello\n",
    videos_error: Optional[Exception] = None,
    captions_error: Optional[Exception] = None,
    download_error: Optional[Exception] = None,
) -> MagicMock:
    """Create a mock of the googleapiclient "youtube" v3 resource.

    Args:
        video_items: items returned by videos().list().execute()
        caption_items: items returned by captions().list().execute()
        caption_body: bytes returned by captions().download_media().execute()
        videos_error: raised by the videos.list request instead
        captions_error: raised by the captions.list request instead
        download_error: raised by the captions.download request instead

    Returns:
        MagicMock usable wherever the built API resource is expected
    """
    youtube = MagicMock()

    videos_request = youtube.videos.return_value.list.return_value
    if videos_error:
        videos_request.execute.side_effect = videos_error
    else:
        videos_request.execute.return_value = {"items": video_items or []}

    captions_resource = youtube.captions.return_value
    list_request = captions_resource.list.return_value
    if captions_error:
        list_request.execute.side_effect = captions_error
    else:
        list_request.execute.return_value = {"items": caption_items or []}

    download_request = captions_resource.download_media.return_value
    if download_error:
        download_request.execute.side_effect = download_error
    else:
        download_request.execute.return_value = caption_body

    return youtube


@pytest.fixture
def youtube_factory():
    """Factory for mock YouTube API resources."""
    return create_mock_youtube


# ============ FastAPI Test Client ============


@pytest.fixture
def app():
    """Create FastAPI app instance for testing."""
    from socialvideo.api.main import app

    return app


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Synchronous test client for FastAPI."""
    with TestClient(app) as c:
        yield c
