"""Unit tests for YouTube URL parsing.

Run with: uv run pytest socialvideo/services/tests/unit/test_youtube_url.py -v
"""

import pytest

from socialvideo.services.youtube.models import VideoReference
from socialvideo.services.youtube.url import extract_video_id, extract_video_reference


class TestShortLinks:
    """youtu.be links return the path without its leading slash."""

    @pytest.mark.unit
    @pytest.mark.parametrize("video_id", ["abc123", "dQw4w9WgXcQ", "a-B_c1D2e3F"])
    def test_short_link_returns_path(self, video_id):
        assert extract_video_id(f"https://youtu.be/{video_id}") == video_id

    @pytest.mark.unit
    def test_short_link_ignores_query(self):
        assert extract_video_id("https://youtu.be/abc123?t=42") == "abc123"

    @pytest.mark.unit
    def test_short_link_keeps_rest_of_path(self):
        """Only the first slash is stripped."""
        assert extract_video_id("https://youtu.be/abc123/extra") == "abc123/extra"

    @pytest.mark.unit
    def test_short_link_without_path_is_empty(self):
        assert extract_video_id("https://youtu.be/") == ""
        assert extract_video_id("https://youtu.be") == ""

    @pytest.mark.unit
    def test_short_link_host_is_case_insensitive(self):
        assert extract_video_id("https://YOUTU.BE/abc123") == "abc123"


class TestCanonicalLinks:
    """youtube.com links return the v query parameter."""

    @pytest.mark.unit
    def test_watch_url(self):
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=abc123&t=10s",
            "https://www.youtube.com/watch?t=10s&v=abc123",
            "https://www.youtube.com/watch?list=PL1&index=2&v=abc123&feature=share",
        ],
    )
    def test_other_query_params_do_not_matter(self, url):
        assert extract_video_id(url) == "abc123"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "host", ["youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"]
    )
    def test_subdomains_are_accepted(self, host):
        assert extract_video_id(f"https://{host}/watch?v=abc123") == "abc123"

    @pytest.mark.unit
    def test_first_v_parameter_wins(self):
        assert extract_video_id("https://youtube.com/watch?v=first&v=second") == "first"

    @pytest.mark.unit
    def test_missing_v_parameter(self):
        assert extract_video_id("https://www.youtube.com/channel/UC123") is None

    @pytest.mark.unit
    def test_blank_v_parameter(self):
        assert extract_video_id("https://www.youtube.com/watch?v=") == ""


class TestInvalidUrls:
    """Anything else is rejected."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        [
            "https://vimeo.com/12345",
            "https://example.com/watch?v=abc123",
            "https://notyoutube.com/watch?v=abc123",
            "https://youtube.com.evil.net/watch?v=abc123",
            "https://youtu.be.example.org/abc123",
        ],
    )
    def test_other_hosts(self, url):
        assert extract_video_id(url) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "",
            "youtube.com/watch?v=abc123",
            "http://[::1",
            "mailto:someone@youtube.com",
        ],
    )
    def test_unparsable(self, url):
        assert extract_video_id(url) is None

    @pytest.mark.unit
    def test_non_string_input(self):
        assert extract_video_id(12345) is None


class TestExtractVideoReference:
    """extract_video_reference wraps the ID into a VideoReference."""

    @pytest.mark.unit
    def test_returns_reference(self):
        reference = extract_video_reference("https://youtu.be/abc123")
        assert reference == VideoReference(platform="youtube", id="abc123")

    @pytest.mark.unit
    def test_same_url_same_reference(self):
        url = "https://www.youtube.com/watch?v=abc123&t=5"
        assert extract_video_reference(url) == extract_video_reference(url)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url",
        ["https://youtu.be/", "https://www.youtube.com/watch", "https://vimeo.com/1"],
    )
    def test_unusable_ids_return_none(self, url):
        assert extract_video_reference(url) is None

    @pytest.mark.unit
    def test_reference_is_frozen(self):
        reference = extract_video_reference("https://youtu.be/abc123")
        with pytest.raises(Exception):
            reference.id = "other"
