"""
College Service - prediction, finder and insights screens.

PREDICTION:
1. Ask the backend model for predicted years (/ml/predict)
2. Read the college's historical rows from the placement table
3. Reconcile both into one chart series

FINDER / INSIGHTS:
Backend JSON is reshaped into chart-ready lists. Insights trends go
through the same year normalization as predictions, so every chart
orders academic years the same way.
"""

import logging
from typing import Any, Dict, List

from path2placement.models.placement import HistoricalRow, parse_predictions
from path2placement.services.backend_client import BackendClient, get_backend_client
from path2placement.services.placement_service import PlacementDataService, get_placement_service
from path2placement.services.series_reconciler import reconcile_series
from path2placement.utils.numbers import optional_float

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data available for this college."


def placement_trend_points(trend: Any) -> List[Dict[str, Any]]:
    """Finder's [[year, value], ...] -> [{"year": ..., "placement": ...}]."""
    if not isinstance(trend, list):
        return []
    points = []
    for entry in trend:
        if isinstance(entry, (list, tuple)) and len(entry) >= 2:
            points.append({"year": str(entry[0]), "placement": optional_float(entry[1])})
    return points


def insights_history(insights: Dict[str, Any]) -> List[HistoricalRow]:
    """
    Merge placementTrends {year: pct} and salaryTrends {year: {median, highest}}
    into one HistoricalRow per year label.
    """
    placement_trends = insights.get("placementTrends")
    salary_trends = insights.get("salaryTrends")
    placement_trends = placement_trends if isinstance(placement_trends, dict) else {}
    salary_trends = salary_trends if isinstance(salary_trends, dict) else {}

    rows: Dict[str, HistoricalRow] = {}
    for label, value in placement_trends.items():
        rows[str(label)] = HistoricalRow(year_label=str(label), placement_past=optional_float(value))

    for label, salary in salary_trends.items():
        row = rows.setdefault(str(label), HistoricalRow(year_label=str(label)))
        if isinstance(salary, dict):
            row.salary_past = optional_float(salary.get("median"))
            row.highest_package_past = optional_float(salary.get("highest"))
        else:
            row.salary_past = optional_float(salary)

    return list(rows.values())


class CollegeService:
    """
    Combines the backend client and the placement table for college screens.
    """

    def __init__(self, client: BackendClient = None, placements: PlacementDataService = None):
        self.client = client or get_backend_client()
        self.placements = placements or get_placement_service()

    def predict(self, college_name: str) -> Dict[str, Any]:
        """
        Historical + predicted placement timeline for one college.

        Raises:
            GatewayError: backend or table failure (not caught here)
        """
        payload = self.client.predict(college_name)
        predicted = parse_predictions(payload)
        historical = self.placements.fetch_history(college_name)

        series = reconcile_series(historical, predicted)
        logger.info(
            "Prediction for %r: %d historical rows, %d predicted years",
            college_name, len(historical), len(predicted)
        )

        college = payload.get("college") if isinstance(payload, dict) else None
        return {
            "college": college or college_name,
            "series": series,
            "message": None if len(series) else NO_DATA_MESSAGE,
        }

    def find(self, location: str, course: str, top_n: int) -> Dict[str, Any]:
        """Top colleges for a location/course, each with its placement trend."""
        results = self.client.find_colleges(location, course, top_n)

        colleges = []
        for result in results:
            if not isinstance(result, dict):
                continue
            details = {k: v for k, v in result.items() if k != "Placement Trend"}
            colleges.append({
                "details": details,
                "placement_trend": placement_trend_points(result.get("Placement Trend")),
            })

        return {
            "colleges": colleges,
            "message": None if colleges else "No colleges matched your search.",
        }

    def insights(self, college_name: str) -> Dict[str, Any]:
        """Trends, recruiters and image for one college."""
        insights = self.client.college_insights(college_name)
        if not isinstance(insights, dict):
            insights = {}

        series = reconcile_series(insights_history(insights), {})
        recruiters = insights.get("topRecruiters")

        return {
            "college": insights.get("college") or college_name,
            "college_image": insights.get("collegeImage"),
            "series": series,
            "top_recruiters": [str(r) for r in recruiters] if isinstance(recruiters, list) else [],
            "message": None if len(series) else NO_DATA_MESSAGE,
        }


def get_college_service() -> CollegeService:
    return CollegeService()
