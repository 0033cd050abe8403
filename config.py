"""
Configuración global de MeteoFeed
"""
import os

# ============================================================
# FEED DE ESTACIONES
# ============================================================
STATION_FEED_URL = os.getenv("STATION_FEED_URL", "")
STATION_FEED_API_KEY = os.getenv("STATION_FEED_API_KEY", "")
STATION_FEED_TIMEOUT_SECONDS = float(os.getenv("STATION_FEED_TIMEOUT_S", "15"))
# Algunos proveedores sirven certificados caducados; "0" desactiva la verificación
STATION_FEED_VERIFY_TLS = os.getenv("STATION_FEED_VERIFY_TLS", "1") == "1"

# ============================================================
# CLAVES DEL PROVEEDOR (orden = prioridad)
# ============================================================
STATION_CONTAINER_KEYS = ["Stations", "StationList", "Data"]
STATION_ITEM_KEYS = ["Station"]

FORECAST_KEY_CANDIDATES = ["Forecasts", "Forecast", "ShortTermForecasts", "ForecastData"]
FORECAST_KEY_TOKEN = "Forecast"
OBSERVATION_KEY_CANDIDATES = ["Observations", "Observation", "LatestObservations", "ObservationData"]

NAME_FIELD_CANDIDATES = ["Name", "StationName", "Station", "Id"]
LATITUDE_FIELD_CANDIDATES = ["Latitude", "Lat"]
LONGITUDE_FIELD_CANDIDATES = ["Longitude", "Lon", "Long"]
TEMPERATURE_FIELD_CANDIDATES = ["AirTemperature", "Temperature", "MaximumTemperature"]
RAINFALL_FIELD_CANDIDATES = ["Rainfall", "Precipitation", "RainfallAmount", "PrecipitationAmount"]

# Medidas con unidad: {"Value": 21.4, "Unit": "C"}
MEASURE_VALUE_KEYS = ["Value", "value"]

# ============================================================
# LECTURAS AUSENTES
# ============================================================
# Un cero aquí no distingue "sin dato" de "lectura real = 0";
# las filas llevan flags *_missing para poder separarlos.
MISSING_READING_DEFAULT = 0.0

# ============================================================
# GRÁFICOS
# ============================================================
MAP_MIN_MARKER_PX = 8
MAP_MAX_MARKER_PX = 40
MAP_DEFAULT_ZOOM = 5
MISSING_READING_COLOR = "rgba(150, 150, 150, 0.55)"
TEMPERATURE_BAR_COLOR = "#e4572e"
RAINFALL_BAR_COLOR = "#2e86de"
