"""
Thumbnail record construction and batch resolution of pasted text.
"""

import re
from typing import Dict, List, Optional

from thumbstudio.config import config
from thumbstudio.core.extractor import extract_video_id
from thumbstudio.models.schemas import ResolutionTier, ThumbnailRecord, ThumbnailResolutions

# One pasted item per line, comma, pipe or whitespace-separated token.
_TOKEN_SEPARATORS = re.compile(r"[\n,\s|]+")

_TIER_FILENAMES = {
    ResolutionTier.MAX: "maxresdefault.jpg",
    ResolutionTier.HQ: "hqdefault.jpg",
    ResolutionTier.MQ: "mqdefault.jpg",
    ResolutionTier.SD: "sddefault.jpg",
}


def thumbnail_urls(video_id: str) -> ThumbnailResolutions:
    """Build the thumbnail URL of every resolution tier for a video ID."""
    return ThumbnailResolutions(**{
        tier.value: f"{config.THUMBNAIL_HOST}/{video_id}/{filename}"
        for tier, filename in _TIER_FILENAMES.items()
    })


def build_thumbnail(fragment: str) -> Optional[ThumbnailRecord]:
    """
    Build a thumbnail record from a pasted fragment.

    The URLs are not checked: maxresdefault.jpg does not exist for every
    video and the UI falls back to the hq tier when it fails to load.

    Args:
        fragment: One token of pasted text

    Returns:
        ThumbnailRecord, or None if the fragment holds no video ID
    """
    video_id = extract_video_id(fragment)
    if not video_id:
        return None

    resolutions = thumbnail_urls(video_id)
    return ThumbnailRecord(
        id=video_id,
        url=fragment.strip(),
        title=f"Video {video_id}",
        thumbnail_url=resolutions.max,
        resolutions=resolutions,
    )


def tokenize(raw_text: str) -> List[str]:
    """Split pasted text into non-empty candidate fragments."""
    return [token for token in _TOKEN_SEPARATORS.split(raw_text or "") if token.strip()]


def count_valid(raw_text: str) -> int:
    """Count the fragments that resolve to a video, duplicates included."""
    return sum(1 for token in tokenize(raw_text) if extract_video_id(token))


def resolve_batch(raw_text: str) -> List[ThumbnailRecord]:
    """
    Resolve a block of pasted text into unique thumbnail records.

    Args:
        raw_text: Free-form pasted text

    Returns:
        Records in first-occurrence order, one per distinct video ID
    """
    unique: Dict[str, ThumbnailRecord] = {}
    for token in tokenize(raw_text):
        record = build_thumbnail(token)
        if record is not None and record.id not in unique:
            unique[record.id] = record

    return list(unique.values())
