"""
Placement Analysis Routes

POST /placement/prediction - Historical + predicted timeline for a college
POST /placement/finder - Top colleges by location and course
POST /placement/insights - Trends and recruiters for a college
"""

from fastapi import APIRouter, Depends

from path2placement.core.auth import gateway_http_error
from path2placement.core.errors import GatewayError
from path2placement.services.college_service import CollegeService, get_college_service
from path2placement.schemas.schemas import (
    CollegeRequest, FinderRequest, PredictionResponse, FinderResponse, InsightsResponse
)

router = APIRouter(prefix="/placement", tags=["Placement Analysis"])


@router.post("/prediction", response_model=PredictionResponse)
async def predict_placement(
    request: CollegeRequest,
    service: CollegeService = Depends(get_college_service)
):
    """
    Placement prediction chart.

    Points come sorted by academic year. Each point carries every
    metric key; *_past values come from the placement table and
    *_predicted values from the model. Years the model predicts
    without any history still appear.
    """
    try:
        result = service.predict(request.college_name)
    except GatewayError as e:
        raise gateway_http_error(e, "Prediction")

    return PredictionResponse(
        college=result["college"],
        series=result["series"].to_chart_rows(),
        message=result["message"]
    )


@router.post("/finder", response_model=FinderResponse)
async def find_colleges(
    request: FinderRequest,
    service: CollegeService = Depends(get_college_service)
):
    """Find the top N colleges for a location and course."""
    try:
        result = service.find(request.location, request.course, request.top_n)
    except GatewayError as e:
        raise gateway_http_error(e, "College search")

    return FinderResponse(**result)


@router.post("/insights", response_model=InsightsResponse)
async def college_insights(
    request: CollegeRequest,
    service: CollegeService = Depends(get_college_service)
):
    """Placement and salary trends (one series) plus top recruiters."""
    try:
        result = service.insights(request.college_name)
    except GatewayError as e:
        raise gateway_http_error(e, "College insights")

    return InsightsResponse(
        college=result["college"],
        college_image=result["college_image"],
        series=result["series"].to_chart_rows(),
        top_recruiters=result["top_recruiters"],
        message=result["message"]
    )
