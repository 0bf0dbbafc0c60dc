"""
Tests for the sequential batch downloader.
"""

import logging
import os
import threading
import pytest
import requests
from unittest.mock import MagicMock, call

from thumbstudio.core.batch_downloader import BatchDownloader, batch_filename, tier_filename
from thumbstudio.core.thumbnails import resolve_batch
from thumbstudio.models.schemas import DownloadStatus, ResolutionTier


@pytest.fixture
def records():
    """Fixture with three resolved records."""
    return resolve_batch("dQw4w9WgXcQ aB3dE5fG7hI 9bZkp7q19f0")


@pytest.fixture
def mock_session():
    """Fixture to mock the requests session."""
    session = MagicMock()
    response = MagicMock()
    response.content = b"\xff\xd8\xff fake jpeg"
    response.raise_for_status.return_value = None
    session.get.return_value = response
    return session


@pytest.fixture
def downloader(mock_session, tmp_path):
    """Fixture to create a downloader with every collaborator mocked."""
    return BatchDownloader(
        output_directory=str(tmp_path / "downloads"),
        delay_seconds=0.4,
        session=mock_session,
        open_fallback=MagicMock(),
        sleep=MagicMock(),
    )


def test_filenames():
    assert batch_filename("dQw4w9WgXcQ") == "yt-dQw4w9WgXcQ.jpg"
    assert tier_filename("dQw4w9WgXcQ", ResolutionTier.HQ) == "youtube-thumb-dQw4w9WgXcQ-hq.jpg"


def test_download_all_saves_every_record(downloader, records, mock_session):
    """Every record is fetched at max resolution and saved as yt-<id>.jpg."""
    outcomes = downloader.download_all(records)

    assert [outcome.status for outcome in outcomes] == [DownloadStatus.SAVED] * 3
    assert [c.args[0] for c in mock_session.get.call_args_list] == [r.resolutions.max for r in records]

    for record, outcome in zip(records, outcomes):
        assert outcome.video_id == record.id
        assert os.path.basename(outcome.path) == f"yt-{record.id}.jpg"
        with open(outcome.path, "rb") as f:
            assert f.read() == b"\xff\xd8\xff fake jpeg"

    downloader.open_fallback.assert_not_called()


def test_download_all_paces_requests(downloader, records, mock_session):
    """The pause sits between two downloads, never before the first one."""
    events = []
    mock_session.get.side_effect = lambda url, **kwargs: events.append(("get", url)) or mock_session.get.return_value
    downloader.sleep.side_effect = lambda seconds: events.append(("sleep", seconds))

    downloader.download_all(records)

    assert events == [
        ("get", records[0].resolutions.max),
        ("sleep", 0.4),
        ("get", records[1].resolutions.max),
        ("sleep", 0.4),
        ("get", records[2].resolutions.max),
    ]


def test_failure_falls_back_and_continues(downloader, records, mock_session):
    """A failure mid-batch opens the URL and does not stop the loop."""
    good = mock_session.get.return_value
    mock_session.get.side_effect = [good, requests.ConnectionError("blocked"), good]

    outcomes = downloader.download_all(records)

    assert mock_session.get.call_count == 3
    assert downloader.sleep.call_count == 2
    assert [outcome.status for outcome in outcomes] == [
        DownloadStatus.SAVED,
        DownloadStatus.FALLBACK,
        DownloadStatus.SAVED,
    ]
    assert outcomes[1].error == "blocked"
    assert outcomes[1].path is None
    downloader.open_fallback.assert_called_once_with(records[1].resolutions.max)


def test_failure_logs_traceback(downloader, records, mock_session, caplog):
    mock_session.get.side_effect = requests.ConnectionError("blocked")

    with caplog.at_level(logging.ERROR):
        downloader.download_all(records[:1])

    assert "Download failed for video dQw4w9WgXcQ: blocked" in caplog.text
    assert "Traceback" in caplog.text
    assert "ConnectionError" in caplog.text


def test_http_error_falls_back(downloader, records, mock_session):
    mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

    outcomes = downloader.download_all(records[:1])

    assert outcomes[0].status == DownloadStatus.FALLBACK
    downloader.open_fallback.assert_called_once_with(records[0].resolutions.max)


def test_save_failure_falls_back(downloader, records):
    downloader.save_bytes = MagicMock(side_effect=OSError("disk full"))

    outcomes = downloader.download_all(records)

    assert [outcome.status for outcome in outcomes] == [DownloadStatus.FALLBACK] * 3
    assert downloader.open_fallback.call_count == 3


def test_failing_fallback_does_not_abort(downloader, records, mock_session):
    mock_session.get.side_effect = requests.Timeout("timed out")
    downloader.open_fallback.side_effect = RuntimeError("no browser")

    outcomes = downloader.download_all(records)

    assert len(outcomes) == 3
    assert all(outcome.status == DownloadStatus.FALLBACK for outcome in outcomes)


def test_cancel_between_items(downloader, records):
    """Setting the cancel event stops the batch before the next record."""
    cancel = threading.Event()
    progress = MagicMock(side_effect=lambda index, total, outcome: cancel.set())

    outcomes = downloader.download_all(records, cancel_event=cancel, on_progress=progress)

    assert [outcome.status for outcome in outcomes] == [
        DownloadStatus.SAVED,
        DownloadStatus.SKIPPED,
        DownloadStatus.SKIPPED,
    ]
    assert downloader.session.get.call_count == 1
    downloader.sleep.assert_not_called()


def test_progress_callback(downloader, records):
    progress = MagicMock()

    outcomes = downloader.download_all(records, on_progress=progress)

    assert progress.call_args_list == [call(i, 3, outcome) for i, outcome in enumerate(outcomes)]


def test_download_all_empty(downloader):
    assert downloader.download_all([]) == []
    downloader.session.get.assert_not_called()


def test_download_one(downloader, records, mock_session):
    outcome = downloader.download_one(records[0], ResolutionTier.MQ)

    mock_session.get.assert_called_once()
    assert mock_session.get.call_args.args[0] == records[0].resolutions.mq
    assert outcome.status == DownloadStatus.SAVED
    assert os.path.basename(outcome.path) == f"youtube-thumb-{records[0].id}-mq.jpg"
    downloader.sleep.assert_not_called()
