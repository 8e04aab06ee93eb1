"""Normalized YouTube data models."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

SUPPORTED_PLATFORM = "youtube"


class VideoReference(BaseModel):
    """A video on the supported platform, identified by its opaque id."""

    model_config = ConfigDict(frozen=True)

    platform: Literal["youtube"] = SUPPORTED_PLATFORM
    id: str = Field(min_length=1)


class ChannelInfo(BaseModel):
    """Channel that published a video."""

    name: str
    # Not exposed by videos.list, always None
    subscribers: Optional[int] = None


class VideoMetadata(BaseModel):
    """Normalized metadata for one video."""

    title: str
    description: str
    duration_seconds: int = Field(ge=0)
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    publish_date: str
    channel: ChannelInfo


class CaptionTrack(BaseModel):
    """One entry of a video's caption track listing."""

    id: str
    language: str = ""
    track_kind: str = ""


class TranscriptResult(BaseModel):
    """Transcript outcome for a video.

    The default value (``TranscriptResult.none()``) is used both when the caller
    declined transcripts and when none could be obtained.
    """

    available: bool = False
    type: Literal["none", "official", "auto"] = "none"
    text: str = ""

    @classmethod
    def none(cls) -> "TranscriptResult":
        """Return the 'no transcript' value."""
        return cls(available=False, type="none", text="")
