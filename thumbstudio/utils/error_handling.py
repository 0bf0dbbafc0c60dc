"""
Centralized error handling for the application.
"""

import json
import traceback
from typing import Any, Callable, Dict

from thumbstudio.config import config
from thumbstudio.models.schemas import DownloadOutcome, DownloadStatus
from thumbstudio.utils.logger import logging


def handle_download_error(
    error: Exception,
    video_id: str,
    url: str,
    open_fallback: Callable[[str], Any],
) -> DownloadOutcome:
    """
    Handle a failed thumbnail download with graceful degradation.

    The raw thumbnail URL is opened in a new browser tab so the user can
    save it by hand. A failing fallback is logged as well; neither error
    is raised to the caller.

    Args:
        error: The exception that occurred
        video_id: ID of the video
        url: Thumbnail URL that could not be saved
        open_fallback: Callable opening a URL in a new browsing context

    Returns:
        DownloadOutcome with status FALLBACK
    """
    error_str = str(error) or error.__class__.__name__

    logging.error(f"Download failed for video {video_id}: {error_str}")
    logging.error(traceback.format_exc())

    try:
        logging.info(f"Opening {url} for manual download")
        open_fallback(url)
    except Exception as e:
        logging.error(f"Fallback could not open {url}: {str(e)}")

    return DownloadOutcome(
        video_id=video_id,
        url=url,
        status=DownloadStatus.FALLBACK,
        error=error_str,
    )


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
