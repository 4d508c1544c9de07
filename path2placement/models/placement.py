"""
Placement records - typed shapes for the two data sources of a college timeline.

HistoricalRow: one row of the hosted placement table, already normalized.
PredictedMetrics: one year of the backend's /ml/predict response.

Raw table rows and raw JSON are converted here and go no further.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel

from path2placement.utils.numbers import optional_float


# ============================================================
# PLACEMENT TABLE COLUMNS
# ============================================================

class PlacementColumns:
    college = "College Name"
    year = "Year"
    placement_percentage = "Placement Percentage"
    median_salary = "Median Salary (LPA)"
    highest_package = "Highest Package (LPA)"
    placed = "Total Students Placed"
    eligible = "Total Students Eligible"

    # Department-wise placed counts
    departments = {
        "CSE": "CSE(Placed)",
        "ECE": "ECE(Placed)",
        "ME": "ME(Placed)",
        "EEE": "EEE(Placed)",
    }


# Field names per side of a YearPoint
HISTORICAL_FIELDS = (
    "placement_past",
    "salary_past",
    "highest_package_past",
    "placed_past",
    "eligible_past",
)

PREDICTED_FIELDS = (
    "placement_predicted",
    "salary_predicted",
    "highest_package_predicted",
    "placed_predicted",
)


def _first_present(payload: Dict[str, Any], keys: List[str]) -> Optional[float]:
    """First key with a usable number wins (backend field names vary by model version)."""
    for key in keys:
        value = optional_float(payload.get(key))
        if value is not None:
            return value
    return None


# ============================================================
# HISTORICAL SIDE
# ============================================================

class HistoricalRow(BaseModel):
    year_label: str = ""
    placement_past: Optional[float] = None
    salary_past: Optional[float] = None
    highest_package_past: Optional[float] = None
    placed_past: Optional[float] = None
    eligible_past: Optional[float] = None

    @classmethod
    def from_table_row(cls, row: Dict[str, Any]) -> "HistoricalRow":
        """Build from a raw College_Placements_Data row."""
        year = row.get(PlacementColumns.year)
        return cls(
            year_label="" if year is None else str(year),
            placement_past=optional_float(row.get(PlacementColumns.placement_percentage)),
            salary_past=optional_float(row.get(PlacementColumns.median_salary)),
            highest_package_past=optional_float(row.get(PlacementColumns.highest_package)),
            placed_past=optional_float(row.get(PlacementColumns.placed)),
            eligible_past=optional_float(row.get(PlacementColumns.eligible)),
        )


# ============================================================
# PREDICTED SIDE
# ============================================================

class PredictedMetrics(BaseModel):
    placement_predicted: Optional[float] = None
    salary_predicted: Optional[float] = None
    highest_package_predicted: Optional[float] = None
    placed_predicted: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "PredictedMetrics":
        """
        Build from one entry of `predictions`.

        Accepts either a dict of metrics or a bare number (placement rate only).
        """
        if not isinstance(payload, dict):
            return cls(placement_predicted=optional_float(payload))

        return cls(
            placement_predicted=_first_present(payload, ["placement_rate", "placement"]),
            salary_predicted=_first_present(
                payload, ["salary", "median_salary", "avg_salary", "average_salary"]
            ),
            highest_package_predicted=_first_present(
                payload, ["highest_package", "highest_salary"]
            ),
            placed_predicted=_first_present(payload, ["placed_students", "placed"]),
        )


def parse_predictions(payload: Any) -> Dict[str, PredictedMetrics]:
    """
    Normalize a /ml/predict response into {year_label: PredictedMetrics}.
    Missing or malformed `predictions` yields an empty mapping.
    """
    if not isinstance(payload, dict):
        return {}
    predictions = payload.get("predictions")
    if not isinstance(predictions, dict):
        return {}
    return {
        str(label): PredictedMetrics.from_payload(metrics)
        for label, metrics in predictions.items()
    }
