from __future__ import annotations

import pytest

from path2placement.models.placement import (
    HISTORICAL_FIELDS,
    PREDICTED_FIELDS,
    HistoricalRow,
    PredictedMetrics,
)
from path2placement.services.series_reconciler import normalize_year_key, reconcile_series


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("2023-24", 2023),
        ("2023–24", 2023),
        ("2023/24", 2023),
        ("FY-2024", 2024),
        (" 2021 - 22 ", 2021),
        ("23", 23),
        ("2022", 2022),
        ("", 0),
        (None, 0),
        ("n/a", 0),
        ("unknown", 0),
        ("a-b-2020", 0),
    ],
)
def test_normalize_year_key(label, expected) -> None:
    assert normalize_year_key(label) == expected


def test_history_and_predictions_make_one_ordered_series() -> None:
    historical = [
        HistoricalRow(year_label="2021-22", placement_past=80),
        HistoricalRow(year_label="2022-23", placement_past=85),
    ]
    predicted = {
        "2023-24": PredictedMetrics(placement_predicted=88),
        "2024-25": PredictedMetrics(placement_predicted=90),
    }

    series = reconcile_series(historical, predicted)

    assert series.labels == ["2021-22", "2022-23", "2023-24", "2024-25"]
    assert [p.year_key for p in series.points] == [2021, 2022, 2023, 2024]
    for point in series.points[:2]:
        assert point.has_history and not point.has_prediction
    for point in series.points[2:]:
        assert point.has_prediction and not point.has_history
    assert series.points[3].placement_predicted == 90


def test_historical_only_series_has_one_point_per_distinct_pair() -> None:
    historical = [
        HistoricalRow(year_label="2022-23", placement_past=70),
        HistoricalRow(year_label="2021-22", placement_past=60),
        HistoricalRow(year_label="2022-23", placement_past=75),
        HistoricalRow(year_label="2022", placement_past=72),
    ]

    series = reconcile_series(historical, {})

    assert len(series) == 3
    assert series.labels == ["2021-22", "2022", "2022-23"]
    assert series.points[2].placement_past == 75
    assert all(not p.has_prediction for p in series.points)


def test_matching_prediction_merges_into_existing_point() -> None:
    historical = [HistoricalRow(year_label="2023-24", placement_past=81, salary_past=7.5)]
    predicted = {"2023-24": PredictedMetrics(placement_predicted=84, salary_predicted=8.0)}

    series = reconcile_series(historical, predicted)

    assert len(series) == 1
    point = series.points[0]
    assert point.placement_past == 81
    assert point.salary_past == 7.5
    assert point.placement_predicted == 84
    assert point.salary_predicted == 8.0


def test_same_key_different_label_stays_separate() -> None:
    historical = [HistoricalRow(year_label="2023-24", placement_past=81)]
    predicted = {"2023": PredictedMetrics(placement_predicted=84)}

    series = reconcile_series(historical, predicted)

    assert series.labels == ["2023", "2023-24"]
    assert series.points[0].placement_past is None
    assert series.points[1].placement_predicted is None


def test_unparseable_label_sorts_first() -> None:
    historical = [
        HistoricalRow(year_label="2022-23", placement_past=70),
        HistoricalRow(year_label="Unknown", placement_past=50),
    ]

    series = reconcile_series(historical, {"2024-25": PredictedMetrics(placement_predicted=1)})

    assert series.labels == ["Unknown", "2022-23", "2024-25"]
    assert series.points[0].year_key == 0


def test_missing_values_are_explicit_none() -> None:
    series = reconcile_series([HistoricalRow(year_label="2022-23", placement_past=0)], {})

    row = series.to_chart_rows()[0]
    for field in HISTORICAL_FIELDS + PREDICTED_FIELDS:
        assert field in row
    assert row["placement_past"] == 0
    assert row["salary_past"] is None
    assert row["placement_predicted"] is None


def test_reconcile_is_repeatable() -> None:
    historical = [HistoricalRow(year_label="2022-23", placement_past=70)]
    predicted = {"2022-23": PredictedMetrics(placement_predicted=72), "2030": PredictedMetrics()}

    first = reconcile_series(historical, predicted)
    second = reconcile_series(historical, predicted)

    assert first == second
    assert len(second) == 2


def test_empty_inputs() -> None:
    assert len(reconcile_series([], {})) == 0
