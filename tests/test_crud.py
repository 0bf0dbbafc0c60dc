"""
Tests for the key-value store.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from thumbstudio.core.session import THUMBNAILS_KEY, URLS_KEY, StudioSession
from thumbstudio.db.crud import (
    delete_value,
    get_value,
    load_studio_session,
    save_studio_session,
    set_value,
)
from thumbstudio.db.database import Base
from thumbstudio.db.models import StoreEntry


@pytest.fixture
def db():
    """Fixture providing a session on an in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


def test_set_and_get_value(db):
    set_value(db, "answer", {"value": 42})
    assert get_value(db, "answer") == {"value": 42}


def test_get_missing_value(db):
    assert get_value(db, "missing") is None
    assert get_value(db, "missing", default=[]) == []


def test_set_value_overwrites(db):
    set_value(db, "key", "first")
    set_value(db, "key", "second")

    assert get_value(db, "key") == "second"
    assert db.query(StoreEntry).count() == 1


def test_delete_value(db):
    set_value(db, "key", 1)

    assert delete_value(db, "key") is True
    assert delete_value(db, "key") is False
    assert get_value(db, "key") is None


def test_corrupt_value_is_ignored(db):
    db.add(StoreEntry(key="broken", value="{not json"))
    db.commit()

    assert get_value(db, "broken", default="fallback") == "fallback"


def test_session_round_trip(db):
    session = StudioSession(raw_urls="https://youtu.be/dQw4w9WgXcQ\naB3dE5fG7hI")
    session.fetch()

    save_studio_session(db, session)
    restored = load_studio_session(db)

    assert get_value(db, URLS_KEY) == session.raw_urls
    assert restored.raw_urls == session.raw_urls
    assert restored.thumbnails == session.thumbnails


def test_load_empty_store(db):
    restored = load_studio_session(db)
    assert restored.raw_urls == ""
    assert restored.thumbnails == []


def test_load_session_with_values_of_wrong_shape(db):
    set_value(db, URLS_KEY, ["https://youtu.be/dQw4w9WgXcQ"])
    set_value(db, THUMBNAILS_KEY, 5)

    restored = load_studio_session(db)

    assert restored.raw_urls == ""
    assert restored.thumbnails == []
