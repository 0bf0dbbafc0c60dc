"""
YouTube video ID extraction.

Maps one pasted fragment (a share link, a watch/embed/attribution URL, a
Shorts URL or a raw ID) to its canonical 11-character video ID. Absence is a
normal outcome: the extractor returns None and never raises.
"""

import re
from typing import Optional

from thumbstudio.models.schemas import VIDEO_ID_PATTERN

# Artifacts left behind by bulk paste sources (markdown, chat apps, CSV).
_PASTE_ARTIFACTS = re.compile(r"""[<>"'\s]""")

# Share, legacy, attribution, embed and watch links. The capture runs up to
# the next query/fragment delimiter; its length is checked afterwards.
_LINK_PATTERN = re.compile(
    r"(?:youtu\.be/"
    r"|(?:^|/)v/"
    r"|/u/\w+/"
    r"|embed/"
    r"|watch\?(?:[^#]*?&)?v=)"
    r"(?P<video_id>[^#&?]*)"
)

_SHORTS_PATTERN = re.compile(r"youtube\.com/shorts/(?P<video_id>[A-Za-z0-9_-]+)")


def is_valid_video_id(value: str) -> bool:
    """Check a string against the 11-character video ID grammar."""
    return bool(value) and VIDEO_ID_PATTERN.fullmatch(value) is not None


def clean_fragment(fragment: str) -> str:
    """Strip angle brackets, quotes and whitespace from a pasted fragment."""
    return _PASTE_ARTIFACTS.sub("", fragment or "")


def _match_link(text: str) -> Optional[str]:
    match = _LINK_PATTERN.search(text)
    if match and is_valid_video_id(match.group("video_id")):
        return match.group("video_id")
    return None


def _match_shorts(text: str) -> Optional[str]:
    match = _SHORTS_PATTERN.search(text)
    if match and is_valid_video_id(match.group("video_id")):
        return match.group("video_id")
    return None


def _match_bare_id(text: str) -> Optional[str]:
    return text if is_valid_video_id(text) else None


_RULES = (_match_link, _match_shorts, _match_bare_id)


def extract_video_id(fragment: str) -> Optional[str]:
    """
    Extract the video ID from a pasted fragment.

    Args:
        fragment: One token of pasted text

    Returns:
        The 11-character video ID, or None if no rule matches
    """
    text = clean_fragment(fragment)
    if not text:
        return None

    for rule in _RULES:
        video_id = rule(text)
        if video_id:
            return video_id

    return None
