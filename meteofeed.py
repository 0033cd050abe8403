"""
MeteoFeed - Estado actual de la red de estaciones
Aplicación principal
"""
import streamlit as st
st.set_page_config(
    page_title="MeteoFeed",
    layout="wide",
    initial_sidebar_state="collapsed"
)
import inspect
import logging
from typing import Optional

# Imports locales
from api import FeedError, fetch_station_feed
from services import extract_rows, rows_to_frame, summarize
from components import temperature_bar_chart, rainfall_bar_chart, station_bubble_map
from utils import fmt_value

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

FEED_ERROR_MESSAGES = {
    "config": "No hay URL de feed configurada (variable STATION_FEED_URL).",
    "timeout": "El proveedor no respondió a tiempo.",
    "network": "No se pudo conectar con el proveedor.",
    "unauthorized": "Clave de API rechazada por el proveedor.",
    "notfound": "El endpoint del feed no existe.",
    "ratelimit": "Demasiadas peticiones; inténtalo más tarde.",
    "badjson": "El proveedor devolvió una respuesta que no es JSON.",
}


def _plotly_chart_stretch(fig, key: str, config: Optional[dict] = None):
    """Renderiza Plotly con compatibilidad entre APIs antiguas/nuevas de Streamlit."""
    cfg = config if isinstance(config, dict) else {}
    params = inspect.signature(st.plotly_chart).parameters
    if "width" in params:
        st.plotly_chart(fig, width="stretch", key=key, config=cfg)
    else:
        st.plotly_chart(fig, use_container_width=True, key=key, config=cfg)


def _feed_error_text(err: FeedError) -> str:
    if err.kind == "http":
        return f"Error HTTP {err.status_code} del proveedor."
    return FEED_ERROR_MESSAGES.get(err.kind, f"Error del feed: {err.kind}")


# ============================================================
# DESCARGA Y EXTRACCIÓN
# ============================================================

st.title("MeteoFeed")

try:
    feed = fetch_station_feed()
except FeedError as err:
    logger.warning(f"Feed no disponible: {err.kind} ({err.status_code})")
    st.error(_feed_error_text(err))
    st.stop()

rows = extract_rows(feed)
if not rows:
    st.info("Ninguna estación con datos utilizables en el feed.")
    st.stop()

df = rows_to_frame(rows)
summary = summarize(df)

# ============================================================
# RESUMEN
# ============================================================

c1, c2, c3, c4 = st.columns(4)
c1.metric("Estaciones", summary["stations"])
c2.metric("T media", fmt_value(summary["temp_mean"], "°C"))
c3.metric(
    "T máxima",
    fmt_value(summary["temp_max"], "°C"),
    help=summary["temp_max_station"] or None,
)
c4.metric(
    "Lluvia máxima",
    fmt_value(summary["rain_max"], "mm"),
    help=summary["rain_max_station"] or None,
)

if summary["missing_readings"]:
    st.caption(
        f"{summary['missing_readings']} lecturas ausentes se muestran como 0 "
        "(en gris en los gráficos)."
    )

# ============================================================
# GRÁFICOS
# ============================================================

col_t, col_r = st.columns(2)
with col_t:
    _plotly_chart_stretch(temperature_bar_chart(df), key="temp_bars")
with col_r:
    _plotly_chart_stretch(rainfall_bar_chart(df), key="rain_bars")

_plotly_chart_stretch(station_bubble_map(df), key="station_map")

with st.expander("Tabla de estaciones"):
    st.dataframe(df, hide_index=True)
