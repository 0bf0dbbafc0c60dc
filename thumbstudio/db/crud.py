"""
CRUD operations for the key-value store.
"""

import json
from typing import Any, Optional
from sqlalchemy.orm import Session

from thumbstudio.core.session import StudioSession, THUMBNAILS_KEY, URLS_KEY
from thumbstudio.db.models import StoreEntry
from thumbstudio.utils.logger import logging


def get_entry(db: Session, key: str) -> Optional[StoreEntry]:
    """Get a stored entry by key."""
    return db.query(StoreEntry).filter(StoreEntry.key == key).first()


def get_value(db: Session, key: str, default: Any = None) -> Any:
    """Get the decoded value stored under a key."""
    entry = get_entry(db, key)
    if entry is None:
        return default

    try:
        return json.loads(entry.value)
    except ValueError:
        logging.error(f"Stored value for key {key} is not valid JSON, ignoring it")
        return default


def set_value(db: Session, key: str, value: Any) -> StoreEntry:
    """Create or replace the value stored under a key."""
    entry = get_entry(db, key)
    serialized = json.dumps(value)

    if entry is None:
        entry = StoreEntry(key=key, value=serialized)
        db.add(entry)
    else:
        entry.value = serialized

    db.commit()
    db.refresh(entry)
    return entry


def delete_value(db: Session, key: str) -> bool:
    """Delete a key. Returns False if it did not exist."""
    entry = get_entry(db, key)
    if entry is None:
        return False

    db.delete(entry)
    db.commit()
    return True


def save_studio_session(db: Session, session: StudioSession) -> None:
    """Persist the raw pasted text and the resolved batch of a session."""
    for key, value in session.to_storage().items():
        set_value(db, key, value)
    logging.debug(f"Saved session with {len(session.thumbnails)} thumbnails")


def load_studio_session(db: Session) -> StudioSession:
    """Restore the last saved session, or a fresh one if nothing is stored."""
    data = {
        key: get_value(db, key)
        for key in (URLS_KEY, THUMBNAILS_KEY)
    }
    return StudioSession.from_storage(data)
