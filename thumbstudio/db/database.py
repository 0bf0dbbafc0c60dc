"""
Database connection and session management for the key-value store.
"""

from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from thumbstudio.config import config

# Create base class for SQLAlchemy models
Base = declarative_base()

# Create engine
DATABASE_URL = config.DATABASE_URL

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    from thumbstudio.db.models import StoreEntry

    # Create all tables
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Get a database session that is closed once the caller is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
