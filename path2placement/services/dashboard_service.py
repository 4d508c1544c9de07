"""
Dashboard Service - KPIs and chart data from raw placement rows.

All aggregation is done with numpy over columns where non-numeric
cells count as 0. Filters use "All" to mean "no filter".
"""

from typing import Any, Dict, List

import numpy as np

from path2placement.models.placement import PlacementColumns
from path2placement.utils.numbers import safe_number

ALL = "All"


def _column(rows: List[Dict[str, Any]], name: str) -> np.ndarray:
    return np.array([safe_number(row.get(name)) for row in rows], dtype=float)


def _unique_in_order(values: List[Any]) -> List[Any]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def filter_rows(rows: List[Dict[str, Any]], year: str = ALL, college: str = ALL) -> List[Dict[str, Any]]:
    """Exact-match filters on Year and College Name."""
    filtered = rows
    if year and year != ALL:
        filtered = [r for r in filtered if str(r.get(PlacementColumns.year)) == year]
    if college and college != ALL:
        filtered = [r for r in filtered if r.get(PlacementColumns.college) == college]
    return filtered


def compute_kpis(rows: List[Dict[str, Any]]) -> Dict[str, float]:
    """
    Totals over the filtered rows.

    placement_percent = placed / eligible * 100 (0 when nobody is eligible)
    avg_median_salary = mean of Median Salary (LPA)
    """
    eligible = float(_column(rows, PlacementColumns.eligible).sum())
    placed = float(_column(rows, PlacementColumns.placed).sum())
    salaries = _column(rows, PlacementColumns.median_salary)

    return {
        "total_students": eligible,
        "placed_students": placed,
        "placement_percent": round(placed / eligible * 100, 2) if eligible > 0 else 0.0,
        "avg_median_salary": round(float(salaries.sum()) / (len(rows) or 1), 2),
    }


def build_dashboard(rows: List[Dict[str, Any]], year: str = ALL, college: str = ALL) -> Dict[str, Any]:
    """
    Full dashboard payload: filter options, KPIs and every chart's data.
    Filter options always come from the unfiltered rows.
    """
    filtered = filter_rows(rows, year, college)

    college_chart = [
        {
            "name": r.get(PlacementColumns.college) or "Unknown",
            "placed": safe_number(r.get(PlacementColumns.placed)),
            "eligible": safe_number(r.get(PlacementColumns.eligible)),
        }
        for r in filtered
    ]

    department_chart = [
        {"name": dept, "value": float(_column(filtered, column).sum())}
        for dept, column in PlacementColumns.departments.items()
    ]

    year_trend = [
        {
            "year": r.get(PlacementColumns.year) or "Unknown",
            "avg": safe_number(r.get(PlacementColumns.median_salary)),
            "max": safe_number(r.get(PlacementColumns.highest_package)),
            "percent": safe_number(r.get(PlacementColumns.placement_percentage)),
        }
        for r in filtered
    ]

    scatter = [
        {
            "college": r.get(PlacementColumns.college) or "Unknown",
            "salary": safe_number(r.get(PlacementColumns.median_salary)),
            "percent": safe_number(r.get(PlacementColumns.placement_percentage)),
        }
        for r in filtered
    ]

    return {
        "years": [ALL] + _unique_in_order([r.get(PlacementColumns.year) for r in rows]),
        "colleges": [ALL] + _unique_in_order([r.get(PlacementColumns.college) for r in rows]),
        "selected_year": year or ALL,
        "selected_college": college or ALL,
        "row_count": len(filtered),
        "kpis": compute_kpis(filtered),
        "college_chart": college_chart,
        "department_chart": department_chart,
        "year_trend": year_trend,
        "scatter": scatter,
    }
