"""
Studio session state, decoupled from the UI framework and from persistence.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from thumbstudio.core.thumbnails import count_valid, resolve_batch
from thumbstudio.models.schemas import (
    AiAnalysis,
    AppStatus,
    AppTab,
    ChatMessage,
    ThumbnailRecord,
)
from thumbstudio.utils.logger import logging

URLS_KEY = "yt_urls"
THUMBNAILS_KEY = "yt_thumbnails"


class StudioSession(BaseModel):
    """Everything one user session holds between UI reruns."""
    raw_urls: str = ""
    thumbnails: List[ThumbnailRecord] = Field(default_factory=list)
    status: AppStatus = AppStatus.IDLE
    active_tab: AppTab = AppTab.DOWNLOADER
    analysis: Optional[AiAnalysis] = None
    chat_history: List[ChatMessage] = Field(default_factory=list)

    @property
    def valid_detected(self) -> int:
        """Live count of pasted fragments that resolve to a video."""
        return count_valid(self.raw_urls)

    @property
    def video_ids(self) -> List[str]:
        return [record.id for record in self.thumbnails]

    def fetch(self) -> List[ThumbnailRecord]:
        """
        Resolve the pasted text and replace the current batch.

        Blank input leaves the session untouched. A batch with no valid
        links sets the ERROR status instead of raising.

        Returns:
            The records of the new batch
        """
        if not self.raw_urls.strip():
            return self.thumbnails

        self.status = AppStatus.LOADING
        self.thumbnails = resolve_batch(self.raw_urls)
        self.analysis = None
        self.status = AppStatus.SUCCESS if self.thumbnails else AppStatus.ERROR
        logging.info(f"Resolved {len(self.thumbnails)} unique videos")
        return self.thumbnails

    def add_chat_message(self, message: ChatMessage) -> None:
        self.chat_history.append(message)

    def to_storage(self) -> Dict[str, Any]:
        """Serializable view handed to the key-value store."""
        return {
            URLS_KEY: self.raw_urls,
            THUMBNAILS_KEY: [record.model_dump() for record in self.thumbnails],
        }

    @classmethod
    def from_storage(cls, data: Dict[str, Any]) -> "StudioSession":
        """Restore a session from values saved by to_storage."""
        raw_urls = data.get(URLS_KEY) or ""
        if not isinstance(raw_urls, str):
            logging.warning(f"Ignoring stored {URLS_KEY} of type {type(raw_urls).__name__}")
            raw_urls = ""

        stored = data.get(THUMBNAILS_KEY) or []
        if not isinstance(stored, list):
            logging.warning(f"Ignoring stored {THUMBNAILS_KEY} of type {type(stored).__name__}")
            stored = []

        thumbnails = []
        for item in stored:
            try:
                thumbnails.append(ThumbnailRecord.model_validate(item))
            except ValidationError as e:
                logging.warning(f"Ignoring stored thumbnail that failed validation: {e}")

        return cls(raw_urls=raw_urls, thumbnails=thumbnails)
