from __future__ import annotations

import pytest
from sqlalchemy import create_engine

from path2placement.core.errors import TransportError
from path2placement.db.postgres import test_postgres_connection as check_connection
from path2placement.services.placement_service import PlacementDataService


def test_fetch_all_returns_rows_by_column(placement_engine) -> None:
    service = PlacementDataService(engine=placement_engine, table="College_Placements_Data")

    rows = service.fetch_all()

    assert len(rows) == 4
    assert rows[0]["College Name"] == "RV College of Engineering"
    assert rows[0]["Median Salary (LPA)"] == "8.5"


def test_fetch_history_is_case_insensitive_partial_match(placement_engine) -> None:
    service = PlacementDataService(engine=placement_engine, table="College_Placements_Data")

    history = service.fetch_history("rv college")

    assert [row.year_label for row in history] == ["2021-22", "2022-23"]
    assert history[1].placement_past == 85.0
    assert history[1].eligible_past == 500.0


def test_fetch_history_treats_wildcards_literally(placement_engine) -> None:
    service = PlacementDataService(engine=placement_engine, table="College_Placements_Data")

    assert service.fetch_history("100%") != []
    assert service.fetch_history("_") != []
    assert service.fetch_history("%x%") == []
    missing = service.fetch_history("Silicon_Valley 100% Institute")
    assert missing[0].placement_past is None
    assert missing[0].salary_past is None


def test_fetch_history_blank_name_skips_query() -> None:
    service = PlacementDataService(engine=create_engine("sqlite://"), table="does_not_exist")

    assert service.fetch_history("   ") == []


def test_database_errors_become_transport_errors() -> None:
    service = PlacementDataService(engine=create_engine("sqlite://"), table="does_not_exist")

    with pytest.raises(TransportError):
        service.fetch_all()


def test_connection_check(placement_engine) -> None:
    assert check_connection(placement_engine) is True
