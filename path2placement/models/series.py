"""
Chart series models.

A YearPoint carries every metric key, set or not, so that a chart
can tell "never measured" (None) apart from "measured as zero".
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from path2placement.models.placement import HISTORICAL_FIELDS, PREDICTED_FIELDS


class YearPoint(BaseModel):
    year_label: str
    year_key: int

    # Historical side
    placement_past: Optional[float] = None
    salary_past: Optional[float] = None
    highest_package_past: Optional[float] = None
    placed_past: Optional[float] = None
    eligible_past: Optional[float] = None

    # Predicted side
    placement_predicted: Optional[float] = None
    salary_predicted: Optional[float] = None
    highest_package_predicted: Optional[float] = None
    placed_predicted: Optional[float] = None

    @property
    def has_history(self) -> bool:
        return any(getattr(self, name) is not None for name in HISTORICAL_FIELDS)

    @property
    def has_prediction(self) -> bool:
        return any(getattr(self, name) is not None for name in PREDICTED_FIELDS)


class ReconciledSeries(BaseModel):
    """Points sorted ascending by (year_key, year_label)."""
    points: List[YearPoint] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def labels(self) -> List[str]:
        return [p.year_label for p in self.points]

    def to_chart_rows(self) -> List[Dict[str, Any]]:
        """Flat dicts for the chart; all keys present, None for missing values."""
        return [p.model_dump() for p in self.points]
