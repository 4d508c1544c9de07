"""
Placement Data Service - queries against the College_Placements_Data table.

Two reads:
- all rows (dashboard works on the raw rows directly)
- rows for one college, matched case-insensitively on part of the name,
  normalized to HistoricalRow for the prediction chart

Database failures are raised as TransportError so routes handle them
like any other gateway failure.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from path2placement.core.config import get_settings
from path2placement.core.errors import TransportError
from path2placement.db.postgres import execute_raw_sql, quote_identifier
from path2placement.models.placement import HistoricalRow, PlacementColumns

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    """'%term%' with LIKE wildcards in the user's text escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PlacementDataService:
    """
    Read access to the placement table.

    Args:
        engine: SQLAlchemy engine; defaults to the configured Supabase database
        table: Table name; defaults to settings.placements_table
    """

    def __init__(self, engine: Engine = None, table: str = None):
        self.engine = engine
        self.table = table or get_settings().placements_table

    def _query(self, sql: str, params: dict = None) -> List[Dict[str, Any]]:
        try:
            return execute_raw_sql(sql, params, engine=self.engine)
        except SQLAlchemyError as e:
            logger.error("Placement query failed: %s", e)
            raise TransportError("Could not load placement data. Please try again.") from e

    def fetch_all(self) -> List[Dict[str, Any]]:
        """Every row of the table, as dicts keyed by column name."""
        return self._query(f"SELECT * FROM {quote_identifier(self.table)}")

    def fetch_history(self, college_name: str) -> List[HistoricalRow]:
        """
        Historical rows for colleges whose name contains `college_name`
        (case-insensitive). Blank names return [] without a query.
        """
        term = (college_name or "").strip()
        if not term:
            return []

        column = quote_identifier(PlacementColumns.college)
        rows = self._query(
            f"SELECT * FROM {quote_identifier(self.table)} "
            f"WHERE lower({column}) LIKE lower(:pattern) ESCAPE '\\'",
            {"pattern": _like_pattern(term)},
        )
        return [HistoricalRow.from_table_row(row) for row in rows]


# Singleton instance
_placement_service: PlacementDataService = None


def get_placement_service() -> PlacementDataService:
    """Get or create placement data service (singleton pattern)"""
    global _placement_service
    if _placement_service is None:
        _placement_service = PlacementDataService()
    return _placement_service
