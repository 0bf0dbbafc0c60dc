"""
Tests for the video ID extractor.
"""

import pytest

from thumbstudio.core.extractor import clean_fragment, extract_video_id, is_valid_video_id


@pytest.mark.parametrize("fragment", [
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30s",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL590L5WQmH8fJ54F369BLDSqIwcs-TCfs&index=2",
    "https://m.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1",
    "https://www.youtube.com/v/dQw4w9WgXcQ",
    "v/dQw4w9WgXcQ",
    "https://www.youtube-nocookie.com/v/dQw4w9WgXcQ?version=3",
    "https://www.youtube.com/user/Someone#p/u/1/dQw4w9WgXcQ",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ#comments",
    "www.youtube.com/watch?v=dQw4w9WgXcQ",
])
def test_link_forms(fragment):
    """Share, watch, embed, legacy and attribution links all resolve."""
    assert extract_video_id(fragment) == "dQw4w9WgXcQ"


def test_shorts():
    assert extract_video_id("https://youtube.com/shorts/aB3dE5fG7hI") == "aB3dE5fG7hI"
    assert extract_video_id("https://www.youtube.com/shorts/aB3dE5fG7hI?feature=share") == "aB3dE5fG7hI"


def test_shorts_with_wrong_length():
    assert extract_video_id("https://youtube.com/shorts/aB3dE5fG7hIxyz") is None
    assert extract_video_id("https://youtube.com/shorts/aB3dE5") is None


def test_bare_id():
    assert extract_video_id("dQw4w9WgXcQ") == "dQw4w9WgXcQ"
    assert extract_video_id("a-b_c-d_e-f") == "a-b_c-d_e-f"


def test_not_a_url():
    assert extract_video_id("not a url") is None
    assert extract_video_id("") is None
    assert extract_video_id("   ") is None


def test_malformed_capture_is_a_miss():
    """A link whose captured segment has the wrong length is not an error."""
    assert extract_video_id("https://youtu.be/tooShort") is None
    assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQQQ") is None
    assert extract_video_id("https://www.youtube.com/embed/") is None


def test_case_is_preserved():
    assert extract_video_id("https://youtu.be/DQW4W9WGXCQ") == "DQW4W9WGXCQ"


def test_paste_artifacts_are_stripped():
    assert extract_video_id("<https://youtu.be/dQw4w9WgXcQ>") == "dQw4w9WgXcQ"
    assert extract_video_id('"https://youtu.be/dQw4w9WgXcQ"') == "dQw4w9WgXcQ"
    assert extract_video_id("'dQw4w9WgXcQ'") == "dQw4w9WgXcQ"
    assert extract_video_id("https://youtu.be/ dQw4w9WgXcQ") == "dQw4w9WgXcQ"


def test_first_match_wins():
    fragment = "https://youtu.be/dQw4w9WgXcQ?next=https://youtu.be/aB3dE5fG7hI"
    assert extract_video_id(fragment) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", [
    "dQw4w9WgXc!",
    "dQw4w9WgXc",
    "dQw4w9WgXcQQ",
    "dQw4w9 WgXcQ!",
    "ab.cd.ef.gh",
    "https://example.com",
])
def test_invalid_bare_ids(value):
    assert not is_valid_video_id(value)


def test_never_raises_on_odd_input():
    for value in ["?", "&&&", "watch?v=", "youtu.be/", "éè" * 10, "v/" * 20, None]:
        assert extract_video_id(value) is None


def test_clean_fragment():
    assert clean_fragment(' <"a b\tc"> ') == "abc"


def test_legacy_marker_needs_path_boundary():
    """A path segment merely ending in v/ is not a legacy link."""
    assert extract_video_id("https://example.com/nav/dQw4w9WgXcQ") is None
    assert extract_video_id("https://example.com/dev/dQw4w9WgXcQ") is None
