"""
Data models for the YouTube Thumbnail Studio application.
"""
import re
from enum import Enum
from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")


class ResolutionTier(str, Enum):
    """Thumbnail variants published by the image host for every video."""
    MAX = "max"
    HQ = "hq"
    MQ = "mq"
    SD = "sd"


class ThumbnailResolutions(BaseModel):
    """Thumbnail URL for each resolution tier."""
    max: str
    hq: str
    mq: str
    sd: str

    model_config = ConfigDict(frozen=True)

    def for_tier(self, tier: ResolutionTier) -> str:
        return getattr(self, ResolutionTier(tier).value)


class ThumbnailRecord(BaseModel):
    """One resolved video and the URLs of its thumbnails."""
    id: str
    url: str
    title: str
    thumbnail_url: str
    resolutions: ThumbnailResolutions

    model_config = ConfigDict(frozen=True)

    @field_validator('id')
    def validate_video_id(cls, v):
        if not VIDEO_ID_PATTERN.fullmatch(v):
            raise ValueError('Video ID must be 11 characters of [A-Za-z0-9_-]')
        return v


class DownloadStatus(str, Enum):
    """Result of one item of a batch download."""
    SAVED = "saved"
    FALLBACK = "fallback"
    SKIPPED = "skipped"


class DownloadOutcome(BaseModel):
    """Model describing what happened to one thumbnail download."""
    video_id: str
    url: str
    status: DownloadStatus
    path: Optional[str] = None
    error: Optional[str] = None


class AiAnalysis(BaseModel):
    """Batch content strategy returned by the AI backend."""
    suggested_titles: List[str] = Field(default_factory=list, alias="suggestedTitles")
    social_description: str = Field(default="", alias="socialDescription")
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class AppStatus(str, Enum):
    """State of the last fetch action."""
    IDLE = "IDLE"
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class AppTab(str, Enum):
    """Top-level navigation tabs."""
    DOWNLOADER = "DOWNLOADER"
    CREATIVE = "CREATIVE"
    VOICE = "VOICE"
    CHAT = "CHAT"


class GroundingUrl(BaseModel):
    """A web or maps source the chat answer was grounded on."""
    title: str = ""
    uri: str


class ChatMessage(BaseModel):
    """Model for one turn of the chat conversation."""
    role: Literal["user", "model"]
    text: str
    is_thinking: bool = False
    grounding_urls: List[GroundingUrl] = Field(default_factory=list)


class ChatReply(BaseModel):
    """Model for chat responses."""
    text: str = ""
    grounding: List[GroundingUrl] = Field(default_factory=list)


ASPECT_RATIOS = ("1:1", "2:3", "3:2", "3:4", "4:3", "9:16", "16:9", "21:9")
VIDEO_ASPECT_RATIOS = ("16:9", "9:16")
IMAGE_SIZES = ("1K", "2K", "4K")
