"""
Tabulación de filas extraídas y resumen del lote
"""
from dataclasses import asdict
from typing import Any, Dict, Sequence

import pandas as pd

from .types import StationRow

ROW_COLUMNS = [
    "name", "lat", "lon", "temperature", "rainfall",
    "source", "temperature_missing", "rainfall_missing",
]


def rows_to_frame(rows: Sequence[StationRow]) -> pd.DataFrame:
    """Convierte las filas en DataFrame conservando el orden del feed"""
    if not rows:
        return pd.DataFrame(columns=ROW_COLUMNS)
    return pd.DataFrame([asdict(row) for row in rows], columns=ROW_COLUMNS)


def _extreme(frame: pd.DataFrame, column: str, largest: bool):
    if frame.empty:
        return float("nan"), None
    idx = frame[column].idxmax() if largest else frame[column].idxmin()
    return float(frame.at[idx, column]), str(frame.at[idx, "name"])


def summarize(frame: pd.DataFrame) -> Dict[str, Any]:
    """
    Resumen del lote para las tarjetas de la cabecera.

    Las lecturas sustituidas por el valor por defecto no entran en las
    estadísticas de su variable.
    """
    if frame is None or frame.empty:
        return {
            "stations": 0,
            "temp_mean": float("nan"),
            "temp_max": float("nan"),
            "temp_max_station": None,
            "temp_min": float("nan"),
            "temp_min_station": None,
            "rain_total": float("nan"),
            "rain_max": float("nan"),
            "rain_max_station": None,
            "missing_readings": 0,
        }

    temps = frame[~frame["temperature_missing"].astype(bool)]
    rains = frame[~frame["rainfall_missing"].astype(bool)]

    temp_max, temp_max_station = _extreme(temps, "temperature", largest=True)
    temp_min, temp_min_station = _extreme(temps, "temperature", largest=False)
    rain_max, rain_max_station = _extreme(rains, "rainfall", largest=True)

    missing = int(frame["temperature_missing"].astype(bool).sum() + frame["rainfall_missing"].astype(bool).sum())

    return {
        "stations": int(len(frame)),
        "temp_mean": float(temps["temperature"].mean()) if not temps.empty else float("nan"),
        "temp_max": temp_max,
        "temp_max_station": temp_max_station,
        "temp_min": temp_min,
        "temp_min_station": temp_min_station,
        "rain_total": float(rains["rainfall"].sum()) if not rains.empty else float("nan"),
        "rain_max": rain_max,
        "rain_max_station": rain_max_station,
        "missing_readings": missing,
    }
