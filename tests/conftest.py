"""
Configuration for pytest tests.
"""

import os
import shutil
import tempfile
import pytest
from pathlib import Path

# Must be set before thumbstudio.config is imported by the test modules.
_TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="thumbstudio_test_"))
os.environ["DATA_DIR"] = str(_TEST_DATA_DIR)
os.environ["DOWNLOADS_DIR"] = str(_TEST_DATA_DIR / "downloads")
os.environ["GENERATED_DIR"] = str(_TEST_DATA_DIR / "generated")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY", "test_api_key")


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test data directory once the session is over."""
    yield

    shutil.rmtree(_TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def test_video_id():
    """Return a test YouTube video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture(scope="session")
def test_video_url(test_video_id):
    """Return a test YouTube video URL."""
    return f"https://youtu.be/{test_video_id}?si=-InVol0JhtWji-6R"


@pytest.fixture(scope="session")
def test_data_dir():
    """Return the test data directory."""
    return _TEST_DATA_DIR
