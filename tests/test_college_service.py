from __future__ import annotations

from conftest import FakeHttp, FakeResponse

from path2placement.services.backend_client import BackendClient
from path2placement.services.college_service import (
    NO_DATA_MESSAGE,
    CollegeService,
    insights_history,
    placement_trend_points,
)
from path2placement.services.placement_service import PlacementDataService


def _service(placement_engine, *responses) -> CollegeService:
    client = BackendClient(base_url="https://backend.test/api", session=FakeHttp(*responses))
    placements = PlacementDataService(engine=placement_engine, table="College_Placements_Data")
    return CollegeService(client=client, placements=placements)


def test_prediction_joins_history_and_model(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, {
        "college": "RV College of Engineering",
        "predictions": {
            "2023-24": {"placement_rate": 88, "salary": 9.8, "placed_students": 440},
            "2022-23": {"placement": 86},
        },
    }))

    result = service.predict("RV College")

    series = result["series"]
    assert result["college"] == "RV College of Engineering"
    assert result["message"] is None
    assert series.labels == ["2021-22", "2022-23", "2023-24"]
    assert series.points[1].placement_past == 85.0
    assert series.points[1].placement_predicted == 86
    assert series.points[2].placed_predicted == 440
    assert not series.points[2].has_history


def test_prediction_without_history(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, {"predictions": {"2025-26": {"placement": 70}}}))

    result = service.predict("Unknown College")

    assert result["college"] == "Unknown College"
    assert result["series"].labels == ["2025-26"]


def test_prediction_with_nothing(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, {"predictions": {}}))

    result = service.predict("Nowhere")

    assert len(result["series"]) == 0
    assert result["message"] == NO_DATA_MESSAGE


def test_placement_trend_points() -> None:
    assert placement_trend_points([["2021", 80], ["2022", "85.5"], ["bad"]]) == [
        {"year": "2021", "placement": 80.0},
        {"year": "2022", "placement": 85.5},
    ]
    assert placement_trend_points(None) == []


def test_finder_reshapes_results(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, [
        {"College Name": "RVCE", "Score": 9.1, "Placement Trend": [["2022", 85]]},
        "garbage",
    ]))

    result = service.find("Karnataka", "CSE", 5)

    assert result["message"] is None
    assert result["colleges"] == [{
        "details": {"College Name": "RVCE", "Score": 9.1},
        "placement_trend": [{"year": "2022", "placement": 85.0}],
    }]


def test_finder_empty(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, []))

    assert service.find("Goa", "ME", 3)["colleges"] == []


def test_insights_history_merges_trends() -> None:
    rows = insights_history({
        "placementTrends": {"2022": 80, "2023": 84},
        "salaryTrends": {"2023": {"median": 8, "highest": 30}, "2021": 6},
    })

    by_label = {row.year_label: row for row in rows}
    assert by_label["2023"].placement_past == 84
    assert by_label["2023"].salary_past == 8
    assert by_label["2023"].highest_package_past == 30
    assert by_label["2021"].placement_past is None
    assert by_label["2021"].salary_past == 6


def test_insights_series_is_ordered(placement_engine) -> None:
    service = _service(placement_engine, FakeResponse(200, {
        "college": "RVCE",
        "collegeImage": "https://img.test/rvce.png",
        "placementTrends": {"2023": 84, "2021": 78},
        "salaryTrends": {"2022": {"median": 7, "highest": 25}},
        "topRecruiters": ["Infosys", "TCS"],
    }))

    result = service.insights("RVCE")

    assert result["series"].labels == ["2021", "2022", "2023"]
    assert result["top_recruiters"] == ["Infosys", "TCS"]
    assert result["college_image"] == "https://img.test/rvce.png"
