"""
Dashboard Routes

GET /dashboard - KPIs and chart data over the placement table
"""

from fastapi import APIRouter, Depends, Query

from path2placement.core.auth import gateway_http_error
from path2placement.core.errors import GatewayError
from path2placement.services.dashboard_service import build_dashboard, ALL
from path2placement.services.placement_service import PlacementDataService, get_placement_service
from path2placement.schemas.schemas import DashboardResponse

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    year: str = Query(ALL, description="Academic year, or All"),
    college: str = Query(ALL, description="Exact college name, or All"),
    placements: PlacementDataService = Depends(get_placement_service)
):
    """
    Placement dashboard.

    Filter options always list every year/college in the table.
    An empty table is returned as a normal response with a message.
    """
    try:
        rows = placements.fetch_all()
    except GatewayError as e:
        raise gateway_http_error(e, "Dashboard load")

    dashboard = build_dashboard(rows, year=year, college=college)
    if not rows:
        dashboard["message"] = "No data available"

    return DashboardResponse(**dashboard)
