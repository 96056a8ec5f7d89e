"""
Database initialization and connection management.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from learnpersona.config import get_settings
from learnpersona.ingest.schema import Base


logger = logging.getLogger(__name__)


def _sqlite_path(database_url: str) -> Optional[Path]:
    if database_url.startswith('sqlite:///'):
        return Path(database_url[len('sqlite:///'):])
    return None


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Get SQLAlchemy engine for database connection."""
    settings = get_settings()
    if database_url is None:
        database_url = settings.database_url

    connect_args = {}
    db_path = _sqlite_path(database_url)
    if db_path is not None:
        # Ensure directory exists
        db_path.parent.mkdir(parents=True, exist_ok=True)
        connect_args = {'check_same_thread': False}

    engine = create_engine(database_url, connect_args=connect_args, echo=settings.sql_echo)

    if db_path is not None:
        # Enable foreign key constraints
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


@lru_cache()
def get_default_engine() -> Engine:
    """Engine for the configured database, shared across sessions."""
    return get_engine()


def get_session(engine: Optional[Engine] = None) -> Session:
    """Get SQLAlchemy session."""
    if engine is None:
        engine = get_default_engine()

    SessionLocal = sessionmaker(bind=engine)
    return SessionLocal()


def create_indexes(engine: Engine) -> None:
    """Create the indexes declared on the tables (for databases created without them)."""
    for table in Base.metadata.sorted_tables:
        for index in table.indexes:
            index.create(engine, checkfirst=True)


def init_database(database_url: Optional[str] = None, drop_existing: bool = False) -> Engine:
    """
    Initialize database schema.

    Args:
        database_url: SQLAlchemy URL (uses configured database if None)
        drop_existing: If True, drop all tables before creating

    Returns:
        SQLAlchemy engine
    """
    engine = get_engine(database_url) if database_url else get_default_engine()

    if drop_existing:
        logger.info("Dropping existing tables...")
        Base.metadata.drop_all(engine)

    Base.metadata.create_all(engine)
    create_indexes(engine)

    logger.info("Database initialized at: %s", engine.url)

    return engine


def reset_database() -> Engine:
    """Drop and recreate all tables (useful for development)."""
    return init_database(drop_existing=True)


if __name__ == "__main__":
    from learnpersona.config import configure_logging
    from learnpersona.ingest.seed import seed_demo_data

    configure_logging()
    engine = reset_database()
    session = get_session(engine)
    try:
        seed_demo_data(session)
    finally:
        session.close()
