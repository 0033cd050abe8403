"""
Extracción de filas por estación a partir del feed del proveedor.

El esquema del proveedor no es estable entre versiones del API:
- la lista de estaciones puede llegar como objeto suelto o como lista
- el bloque de predicciones cambia de nombre (Forecasts, ForecastData...)
- las variables cambian de nombre (AirTemperature, Temperature...)

La extracción es "best effort": una estación que no se puede convertir
se descarta y el resto del lote sigue adelante.
"""
import logging
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from config import (
    STATION_CONTAINER_KEYS, STATION_ITEM_KEYS,
    FORECAST_KEY_CANDIDATES, FORECAST_KEY_TOKEN, OBSERVATION_KEY_CANDIDATES,
    NAME_FIELD_CANDIDATES, LATITUDE_FIELD_CANDIDATES, LONGITUDE_FIELD_CANDIDATES,
    TEMPERATURE_FIELD_CANDIDATES, RAINFALL_FIELD_CANDIDATES,
    MEASURE_VALUE_KEYS, MISSING_READING_DEFAULT,
)
from utils.helpers import ensure_list
from .types import StationRow

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Centinela de "campo no encontrado" (distinto de None y de 0)
MISSING = _Missing()

SOURCE_FORECAST = "forecast"
SOURCE_OBSERVATION = "observation"


def _measure_value(raw: Dict[str, Any]) -> Any:
    for key in MEASURE_VALUE_KEYS:
        if key in raw:
            return MISSING if raw[key] is None else raw[key]
    return raw


def _to_float(value: Any) -> Optional[float]:
    # true/false no son lecturas
    if value is MISSING or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def locate_station_list(response: Any) -> List[Any]:
    """
    Localiza la colección de estaciones dentro de la respuesta.

    Busca la primera clave contenedora conocida; si no hay ninguna, la
    respuesta se trata como la propia colección. Un objeto suelto se
    envuelve en una lista de un elemento.
    """
    container = response
    if isinstance(response, dict):
        for key in STATION_CONTAINER_KEYS:
            if key in response:
                container = response[key]
                break

    # {"Stations": {"Station": [...]}}
    if isinstance(container, dict):
        for key in STATION_ITEM_KEYS:
            inner = container.get(key)
            if isinstance(inner, (list, dict)):
                container = inner
                break

    return ensure_list(container)


def discover_forecast_key(stations: Sequence[Any]) -> str:
    """
    Determina el nombre del bloque de predicciones para todo el lote.

    Usa las claves de la primera estación como muestra del esquema:
    primero candidatos exactos, después cualquier clave que contenga
    FORECAST_KEY_TOKEN. Devuelve "" si no hay bloque de predicciones.
    """
    if not stations:
        return ""
    first = stations[0]
    if not isinstance(first, dict):
        return ""

    for candidate in FORECAST_KEY_CANDIDATES:
        if candidate in first:
            return candidate

    for key in first:
        if FORECAST_KEY_TOKEN in str(key):
            return str(key)
    return ""


def resolve_field(record: Any, candidates: Sequence[str]) -> Any:
    """
    Devuelve el valor del primer candidato presente en record, o MISSING.

    Un valor None cuenta como ausente. Las medidas con unidad
    ({"Value": x, "Unit": ...}) se devuelven ya desenvueltas.
    """
    if not isinstance(record, dict):
        return MISSING
    for name in candidates:
        value = record.get(name)
        if value is None:
            continue
        if isinstance(value, dict):
            value = _measure_value(value)
            if value is MISSING:
                continue
        return value
    return MISSING


def resolve_entries(station: Dict[str, Any], forecast_key: str) -> Tuple[List[Any], str]:
    """Predicciones si las hay; si no, observaciones."""
    if forecast_key:
        entries = ensure_list(station.get(forecast_key))
        if entries:
            return entries, SOURCE_FORECAST

    # Un bloque vacío no cuenta: se prueba el siguiente candidato
    for name in OBSERVATION_KEY_CANDIDATES:
        entries = ensure_list(station.get(name))
        if entries:
            return entries, SOURCE_OBSERVATION
    return [], SOURCE_OBSERVATION


def latest_entry(entries: Sequence[Any]) -> Dict[str, Any]:
    # Sin orden por timestamp: el proveedor pone la más reciente primero
    if not entries:
        return {}
    first = entries[0]
    return first if isinstance(first, dict) else {}


def extract_station_row(station: Any, forecast_key: str) -> Optional[StationRow]:
    """
    Construye la fila de una estación.

    Devuelve None si la estación debe descartarse (coordenadas o
    lecturas no numéricas). Nunca se emite una fila parcial.
    """
    if not isinstance(station, dict):
        logger.debug(f"Estación descartada: tipo inesperado {type(station).__name__}")
        return None

    entries, source = resolve_entries(station, forecast_key)
    entry = latest_entry(entries)

    raw_temp = resolve_field(entry, TEMPERATURE_FIELD_CANDIDATES)
    raw_rain = resolve_field(entry, RAINFALL_FIELD_CANDIDATES)
    temperature_missing = raw_temp is MISSING
    rainfall_missing = raw_rain is MISSING
    if temperature_missing:
        raw_temp = MISSING_READING_DEFAULT
    if rainfall_missing:
        raw_rain = MISSING_READING_DEFAULT

    raw_name = resolve_field(station, NAME_FIELD_CANDIDATES)
    name = "" if raw_name is MISSING else str(raw_name).strip()

    lat = _to_float(resolve_field(station, LATITUDE_FIELD_CANDIDATES))
    lon = _to_float(resolve_field(station, LONGITUDE_FIELD_CANDIDATES))
    temperature = _to_float(raw_temp)
    rainfall = _to_float(raw_rain)

    if lat is None or lon is None or temperature is None or rainfall is None:
        logger.debug(
            f"Estación descartada '{name}': lat={lat} lon={lon} "
            f"temp={temperature} lluvia={rainfall}"
        )
        return None

    return StationRow(
        name=name,
        lat=lat,
        lon=lon,
        temperature=temperature,
        rainfall=rainfall,
        source=source,
        temperature_missing=temperature_missing,
        rainfall_missing=rainfall_missing,
    )


def extract_rows(response: Any) -> List[StationRow]:
    """
    Extrae una fila por estación válida, en el orden del feed.

    Una lista vacía es un lote vacío (no un error): el llamador debe
    saltarse la visualización.
    """
    stations = locate_station_list(response)
    forecast_key = discover_forecast_key(stations)
    if stations and not forecast_key:
        logger.warning("Sin bloque de predicciones en el feed; se usan observaciones")

    rows: List[StationRow] = []
    for station in stations:
        row = extract_station_row(station, forecast_key)
        if row is not None:
            rows.append(row)

    logger.info(
        f"Feed procesado: {len(stations)} estaciones, {len(rows)} filas, "
        f"{len(stations) - len(rows)} descartadas"
    )
    return rows
