"""
Models module - internal data shapes.

Difference from schemas:
- Models: normalized records passed between services
- Schemas: API contract (what the routes accept/return)
"""

from path2placement.models.placement import (
    PlacementColumns,
    HistoricalRow,
    PredictedMetrics,
    parse_predictions,
    HISTORICAL_FIELDS,
    PREDICTED_FIELDS,
)
from path2placement.models.series import YearPoint, ReconciledSeries

__all__ = [
    "PlacementColumns",
    "HistoricalRow",
    "PredictedMetrics",
    "parse_predictions",
    "HISTORICAL_FIELDS",
    "PREDICTED_FIELDS",
    "YearPoint",
    "ReconciledSeries",
]
