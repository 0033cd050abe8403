"""
Módulo de componentes visuales
"""
from .charts import temperature_bar_chart, rainfall_bar_chart, station_bubble_map

__all__ = [
    'temperature_bar_chart',
    'rainfall_bar_chart',
    'station_bubble_map',
]
