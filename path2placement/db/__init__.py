"""
Database module - read-only access to the hosted placement table.
"""
from path2placement.db.postgres import (
    get_engine,
    get_db_session,
    execute_raw_sql,
    test_postgres_connection,
)

__all__ = [
    "get_engine",
    "get_db_session",
    "execute_raw_sql",
    "test_postgres_connection",
]
