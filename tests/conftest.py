from __future__ import annotations

import json
from typing import Any

import pytest
import requests
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from path2placement.core.errors import GatewayError
from path2placement.core.local_storage import LocalStorage


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, raw: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def json(self) -> Any:
        if self._raw is not None:
            return json.loads(self._raw)
        if self._body is None:
            raise ValueError("no body")
        return self._body


class FakeHttp:
    """Stands in for requests.Session: records calls, replays queued outcomes."""

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self.request("GET", url, **kwargs)


class StubProfileClient:
    """fetch_profile() returns queued profiles or raises queued errors."""

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.tokens: list[str] = []

    def fetch_profile(self, token: str) -> dict:
        self.tokens.append(token)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, GatewayError):
            raise outcome
        return outcome


PLACEMENT_COLUMNS = [
    "College Name",
    "Year",
    "Placement Percentage",
    "Median Salary (LPA)",
    "Highest Package (LPA)",
    "Total Students Placed",
    "Total Students Eligible",
    "CSE(Placed)",
    "ECE(Placed)",
    "ME(Placed)",
    "EEE(Placed)",
]

PLACEMENT_ROWS = [
    ("RV College of Engineering", "2021-22", "80", "8.5", "40", "400", "500", "200", "100", "50", "50"),
    ("RV College of Engineering", "2022-23", "85", "9.0", "45", "425", "500", "210", "110", "55", "50"),
    ("PES University", "2022-23", "70", "7.0", "30", "350", "500", "150", "100", "60", "40"),
    ("Silicon_Valley 100% Institute", "2023-24", "NA", "", "12", "10", "20", "5", "5", "0", "0"),
]


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(str(tmp_path / "storage" / "local_storage.json"))


@pytest.fixture
def placement_engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    columns = ", ".join(f'"{name}" TEXT' for name in PLACEMENT_COLUMNS)
    placeholders = ", ".join(f":c{i}" for i in range(len(PLACEMENT_COLUMNS)))
    quoted = ", ".join(f'"{name}"' for name in PLACEMENT_COLUMNS)
    with engine.begin() as conn:
        conn.execute(text(f'CREATE TABLE "College_Placements_Data" ({columns})'))
        for row in PLACEMENT_ROWS:
            conn.execute(
                text(f'INSERT INTO "College_Placements_Data" ({quoted}) VALUES ({placeholders})'),
                {f"c{i}": value for i, value in enumerate(row)},
            )
    yield engine
    engine.dispose()


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
