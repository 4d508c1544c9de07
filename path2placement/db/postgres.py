"""
Placement table connection (hosted Supabase Postgres).

The client only reads. The engine is created lazily so that importing
the app never opens a connection.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from path2placement.core.config import get_settings

logger = logging.getLogger(__name__)

_engine: Engine = None


def get_engine() -> Engine:
    """Get or create the engine (singleton pattern)"""
    global _engine
    if _engine is None:
        settings = get_settings()
        # pool_size=5: maintain 5 connections ready
        # max_overflow=10: allow 10 extra connections under load
        _engine = create_engine(
            settings.postgres_url,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
            echo=settings.debug  # Log SQL queries in debug mode
        )
    return _engine


@contextmanager
def get_db_session(engine: Engine = None):
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text('SELECT * FROM "College_Placements_Data"'))
    """
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine or get_engine())()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_postgres_connection(engine: Engine = None) -> bool:
    """
    Test if the placement database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session(engine) as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Placement database connection failed: %s", e)
        return False


def execute_raw_sql(sql: str, params: dict = None, engine: Engine = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    """
    with get_db_session(engine) as db:
        result = db.execute(text(sql), params or {})
        # Convert rows to dicts
        columns = list(result.keys())
        return [dict(zip(columns, row)) for row in result.fetchall()]


def quote_identifier(name: str) -> str:
    """Double-quote a table/column name (names here contain spaces and parentheses)."""
    return '"' + name.replace('"', '""') + '"'
