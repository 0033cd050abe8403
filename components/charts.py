"""
Gráficos Plotly del lote de estaciones
"""
from typing import List, Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from config import (
    MAP_MIN_MARKER_PX, MAP_MAX_MARKER_PX, MAP_DEFAULT_ZOOM,
    MISSING_READING_COLOR, TEMPERATURE_BAR_COLOR, RAINFALL_BAR_COLOR,
)


def _is_empty(frame: Optional[pd.DataFrame]) -> bool:
    return frame is None or frame.empty


def _bar_colors(frame: pd.DataFrame, missing_column: str, color: str) -> List[str]:
    return [MISSING_READING_COLOR if bool(m) else color for m in frame[missing_column]]


def _bar_chart(frame: pd.DataFrame, column: str, missing_column: str,
               color: str, title: str, unit: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=frame["name"].tolist(),
        y=frame[column].astype(float).tolist(),
        marker_color=_bar_colors(frame, missing_column, color),
        hovertemplate=f"%{{x}}<br>%{{y:.1f}} {unit}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        yaxis_title=unit,
        height=380,
        margin=dict(l=50, r=20, t=50, b=90),
        showlegend=False,
    )
    return fig


def temperature_bar_chart(frame: pd.DataFrame) -> Optional[go.Figure]:
    """Barras de temperatura por estación (gris = sin dato)"""
    if _is_empty(frame):
        return None
    return _bar_chart(frame, "temperature", "temperature_missing",
                      TEMPERATURE_BAR_COLOR, "Temperatura por estación", "°C")


def rainfall_bar_chart(frame: pd.DataFrame) -> Optional[go.Figure]:
    """Barras de precipitación por estación (gris = sin dato)"""
    if _is_empty(frame):
        return None
    return _bar_chart(frame, "rainfall", "rainfall_missing",
                      RAINFALL_BAR_COLOR, "Precipitación por estación", "mm")


def marker_sizes(rainfall) -> np.ndarray:
    """
    Tamaño de burbuja proporcional a la raíz de la precipitación,
    acotado a [MAP_MIN_MARKER_PX, MAP_MAX_MARKER_PX].
    """
    values = np.sqrt(np.clip(np.asarray(rainfall, dtype=float), 0.0, None))
    top = float(values.max()) if values.size else 0.0
    if top <= 0.0:
        return np.full(values.shape, float(MAP_MIN_MARKER_PX))
    return MAP_MIN_MARKER_PX + (MAP_MAX_MARKER_PX - MAP_MIN_MARKER_PX) * values / top


def station_bubble_map(frame: pd.DataFrame) -> Optional[go.Figure]:
    """Mapa de burbujas: tamaño = lluvia, color = temperatura"""
    if _is_empty(frame):
        return None

    temps = frame["temperature"].astype(float).to_numpy()
    rains = frame["rainfall"].astype(float).to_numpy()

    fig = go.Figure()
    fig.add_trace(go.Scattermap(
        lat=frame["lat"].astype(float).tolist(),
        lon=frame["lon"].astype(float).tolist(),
        mode="markers",
        text=frame["name"].tolist(),
        customdata=np.column_stack([temps, rains]),
        marker=dict(
            size=marker_sizes(rains).tolist(),
            color=temps.tolist(),
            colorscale="RdYlBu_r",
            showscale=True,
            colorbar=dict(title="°C"),
        ),
        hovertemplate=(
            "<b>%{text}</b><br>"
            "T: %{customdata[0]:.1f} °C<br>"
            "Lluvia: %{customdata[1]:.1f} mm<extra></extra>"
        ),
    ))
    fig.update_layout(
        map=dict(
            style="open-street-map",
            center=dict(lat=float(frame["lat"].mean()), lon=float(frame["lon"].mean())),
            zoom=MAP_DEFAULT_ZOOM,
        ),
        height=560,
        margin=dict(l=0, r=0, t=0, b=0),
    )
    return fig
