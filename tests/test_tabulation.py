import math
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.tabulation import ROW_COLUMNS, rows_to_frame, summarize
from services.types import StationRow


def _rows():
    return [
        StationRow("Alpha", -33.8, 151.2, 21.0, 4.0, "forecast"),
        StationRow("Bravo", -33.9, 151.0, 0.0, 12.5, "observation", temperature_missing=True),
        StationRow("Charlie", -34.0, 150.9, 27.5, 0.0, "forecast", rainfall_missing=True),
    ]


def test_rows_to_frame_keeps_order_and_columns() -> None:
    df = rows_to_frame(_rows())

    assert list(df.columns) == ROW_COLUMNS
    assert df["name"].tolist() == ["Alpha", "Bravo", "Charlie"]
    assert df["temperature"].tolist() == [21.0, 0.0, 27.5]


def test_rows_to_frame_empty() -> None:
    df = rows_to_frame([])

    assert df.empty
    assert list(df.columns) == ROW_COLUMNS


def test_summarize_ignores_substituted_readings() -> None:
    summary = summarize(rows_to_frame(_rows()))

    assert summary["stations"] == 3
    assert summary["temp_min"] == 21.0
    assert summary["temp_min_station"] == "Alpha"
    assert summary["temp_max"] == 27.5
    assert summary["temp_max_station"] == "Charlie"
    assert summary["temp_mean"] == 24.25
    assert summary["rain_total"] == 16.5
    assert summary["rain_max"] == 12.5
    assert summary["rain_max_station"] == "Bravo"
    assert summary["missing_readings"] == 2


def test_summarize_empty_frame() -> None:
    summary = summarize(rows_to_frame([]))

    assert summary["stations"] == 0
    assert math.isnan(summary["temp_mean"])
    assert summary["temp_max_station"] is None


def test_summarize_all_temperatures_missing() -> None:
    rows = [StationRow("Alpha", 1.0, 2.0, 0.0, 3.0, temperature_missing=True)]

    summary = summarize(rows_to_frame(rows))

    assert math.isnan(summary["temp_max"])
    assert summary["temp_max_station"] is None
    assert summary["rain_total"] == 3.0
