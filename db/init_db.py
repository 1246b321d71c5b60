"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from sqlalchemy.exc import SQLAlchemyError

from db.connection import get_engine
from db.tables import Base
from utils.logger import get_logger

logger = get_logger(__name__)


def create_tables() -> None:
    """
    Create every table declared in `db.tables`.
    Safe to call multiple times (existing tables are left untouched).
    """
    try:
        Base.metadata.create_all(bind=get_engine())
        logger.info(f"Database schema initialized: {', '.join(Base.metadata.tables)}")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_engine
    init_engine()
    create_tables()
    print("Database schema created successfully.")
