"""
Series Reconciler - merges historical rows and predictions into one timeline.

HOW IT WORKS:
1. Every year label gets an integer year key ("2023-24" -> 2023)
2. Historical rows become points with only the *_past fields set
3. Predictions merge into the point with the same (year_key, year_label),
   or become new points with only the *_predicted fields set
4. Points are sorted by year_key, then by year_label

A label that differs from an existing one is its own point even when the
keys agree ("2023-24" and "2023" are two points, both keyed 2023).

Labels that cannot be read as a year get key 0 and sort first.
"""

import math
import re
from typing import Dict, Iterable, Mapping, Optional, Tuple

from path2placement.models.placement import (
    HistoricalRow,
    PredictedMetrics,
    HISTORICAL_FIELDS,
    PREDICTED_FIELDS,
)
from path2placement.models.series import YearPoint, ReconciledSeries

# "2023-24", "2023–24", "2023/24"
YEAR_SEPARATOR = re.compile(r"[-–—/]")


def _parse_int(text: str) -> Optional[int]:
    text = text.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


def normalize_year_key(label) -> int:
    """
    Integer key used to order and match year labels.

    "2023-24" -> 2023, "FY-2024" -> 2024, "23" -> 23, "" -> 0, "n/a" -> 0
    """
    text = "" if label is None else str(label).strip()

    if YEAR_SEPARATOR.search(text):
        segments = YEAR_SEPARATOR.split(text)
        for segment in segments[:2]:
            value = _parse_int(segment)
            if value is not None:
                return value
        return 0

    value = _parse_int(text)
    return 0 if value is None else value


def _point_for(
    points: Dict[Tuple[int, str], YearPoint], label: str
) -> YearPoint:
    key = (normalize_year_key(label), label)
    point = points.get(key)
    if point is None:
        point = YearPoint(year_label=label, year_key=key[0])
        points[key] = point
    return point


def reconcile_series(
    historical: Iterable[HistoricalRow],
    predicted: Mapping[str, PredictedMetrics],
) -> ReconciledSeries:
    """
    Merge historical rows and predicted years into one sorted series.

    Args:
        historical: Rows in table order; a repeated (key, label) pair
            replaces the earlier row's values
        predicted: {year_label: PredictedMetrics}

    Returns:
        ReconciledSeries with one point per distinct (year_key, year_label)
    """
    points: Dict[Tuple[int, str], YearPoint] = {}

    for row in historical:
        point = _point_for(points, row.year_label)
        for field in HISTORICAL_FIELDS:
            setattr(point, field, getattr(row, field))

    for label, metrics in predicted.items():
        point = _point_for(points, str(label))
        for field in PREDICTED_FIELDS:
            setattr(point, field, getattr(metrics, field))

    ordered = sorted(points.values(), key=lambda p: (p.year_key, p.year_label))
    return ReconciledSeries(points=ordered)
