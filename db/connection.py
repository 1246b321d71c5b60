"""
db/connection.py
----------------
Manages the SQLAlchemy engine and its connection pool.
Sessions are handed out through `session_scope()` so every caller
commits, rolls back and releases its connection the same way.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL, DB_POOL_SIZE
from db.dsn import get_dsn
from utils.logger import get_logger

logger = get_logger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # In-memory SQLite must share a single connection across threads
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url:
        return create_engine(url, pool_size=DB_POOL_SIZE, pool_pre_ping=True)

    dsn = get_dsn()
    logger.info(f"Connecting with DSN: {get_dsn(password='***')}")
    return create_engine(
        "postgresql+psycopg2://",
        creator=lambda: psycopg2.connect(dsn),
        pool_size=DB_POOL_SIZE,
        pool_pre_ping=True,
    )


def init_engine(url: Optional[str] = None) -> Engine:
    """
    Initialize the database engine and session factory.

    Args:
        url: SQLAlchemy URL. Falls back to DATABASE_URL, then to the
            DSN assembled from the DB_* settings.

    Returns:
        The shared Engine.

    Raises:
        sqlalchemy.exc.OperationalError: If the database is unreachable.
    """
    global _engine, _session_factory
    if _engine is not None:
        return _engine
    engine = _build_engine(url if url is not None else DATABASE_URL)
    try:
        with engine.connect():
            pass
    except OperationalError as e:
        logger.error(f"Failed to connect to the database: {e}")
        engine.dispose()
        raise
    _engine = engine
    _session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    logger.info("Database engine initialized successfully.")
    return _engine


def get_engine() -> Engine:
    """
    Return the shared engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_engine() first.")
    return _engine


def get_session() -> Session:
    """
    Open a new session bound to the shared engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        raise RuntimeError("Database engine not initialized. Call init_engine() first.")
    return _session_factory()


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Transactional scope around a series of operations.

    Commits when the block exits normally, rolls back on any exception,
    and always closes the session.
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def close_engine() -> None:
    """Dispose the engine and every pooled connection."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database engine disposed.")
