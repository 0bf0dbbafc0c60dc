"""
Sequential thumbnail downloader.
"""

import os
import time
import threading
import webbrowser
from typing import Any, Callable, List, Optional, Sequence

import requests

from thumbstudio.config import config
from thumbstudio.models.schemas import (
    DownloadOutcome,
    DownloadStatus,
    ResolutionTier,
    ThumbnailRecord,
)
from thumbstudio.utils.error_handling import handle_download_error, log_diagnostic_info
from thumbstudio.utils.logger import logging

ProgressCallback = Callable[[int, int, DownloadOutcome], None]


def batch_filename(video_id: str) -> str:
    """Filename used for the max-resolution thumbnail in batch downloads."""
    return f"yt-{video_id}.jpg"


def tier_filename(video_id: str, tier: ResolutionTier) -> str:
    """Filename used when a single tier is downloaded from a card."""
    return f"youtube-thumb-{video_id}-{ResolutionTier(tier).value}.jpg"


class BatchDownloader:
    """Class to download thumbnails one at a time with a fixed pause in between."""

    def __init__(
        self,
        output_directory: Optional[str] = None,
        delay_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
        open_fallback: Callable[[str], Any] = webbrowser.open_new_tab,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the downloader.

        Args:
            output_directory: Directory the images are saved to
            delay_seconds: Pause between two downloads
            session: requests session used to fetch the images
            open_fallback: Opens a URL in a new browsing context when saving fails
            sleep: Blocking sleep used for pacing
        """
        self.output_directory = str(output_directory or config.DOWNLOADS_DIR)
        self.delay_seconds = config.DOWNLOAD_DELAY_SECONDS if delay_seconds is None else delay_seconds
        self.session = session or requests.Session()
        self.open_fallback = open_fallback
        self.sleep = sleep

    def fetch_bytes(self, url: str) -> bytes:
        """Fetch the image at a URL."""
        response = self.session.get(url, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.content

    def save_bytes(self, data: bytes, filename: str) -> str:
        """
        Save image bytes under the output directory.

        Returns:
            Path of the saved file
        """
        os.makedirs(self.output_directory, exist_ok=True)
        output_path = os.path.join(self.output_directory, filename)
        with open(output_path, "wb") as f:
            f.write(data)
        return output_path

    def _download(self, video_id: str, url: str, filename: str) -> DownloadOutcome:
        try:
            data = self.fetch_bytes(url)
            output_path = self.save_bytes(data, filename)
        except Exception as e:
            return handle_download_error(e, video_id, url, self.open_fallback)

        logging.info(f"Thumbnail saved to: {output_path}")
        return DownloadOutcome(
            video_id=video_id,
            url=url,
            status=DownloadStatus.SAVED,
            path=output_path,
        )

    def download_one(
        self, record: ThumbnailRecord, tier: ResolutionTier = ResolutionTier.MAX
    ) -> DownloadOutcome:
        """Download a single resolution tier of one thumbnail."""
        url = record.resolutions.for_tier(tier)
        return self._download(record.id, url, tier_filename(record.id, tier))

    def download_all(
        self,
        records: Sequence[ThumbnailRecord],
        cancel_event: Optional[threading.Event] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[DownloadOutcome]:
        """
        Download the max-resolution thumbnail of every record, in order.

        A failed item falls back to opening its URL and the loop moves on.
        The cancel event is checked between items; once set, the remaining
        records are reported as skipped.

        Args:
            records: Records of one batch
            cancel_event: Optional event that stops the batch between items
            on_progress: Optional callback receiving (index, total, outcome)

        Returns:
            One DownloadOutcome per record, in input order
        """
        total = len(records)
        outcomes: List[DownloadOutcome] = []
        logging.info(f"Starting batch download of {total} thumbnails")

        for index, record in enumerate(records):
            if cancel_event is not None and cancel_event.is_set():
                outcome = DownloadOutcome(
                    video_id=record.id,
                    url=record.resolutions.max,
                    status=DownloadStatus.SKIPPED,
                )
            else:
                if index > 0:
                    self.sleep(self.delay_seconds)
                outcome = self._download(record.id, record.resolutions.max, batch_filename(record.id))

            outcomes.append(outcome)
            if on_progress is not None:
                on_progress(index, total, outcome)

        log_diagnostic_info({
            "batch_size": total,
            "saved": sum(1 for o in outcomes if o.status == DownloadStatus.SAVED),
            "fallback": sum(1 for o in outcomes if o.status == DownloadStatus.FALLBACK),
            "skipped": sum(1 for o in outcomes if o.status == DownloadStatus.SKIPPED),
        })
        logging.info("Batch download complete.")
        return outcomes
