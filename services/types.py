"""
Tipos de dominio para filas de estación extraídas del feed.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class StationRow:
    """Fila normalizada por estación, independiente del esquema del proveedor."""
    name: str
    lat: float
    lon: float
    temperature: float
    rainfall: float
    source: str = "observation"
    temperature_missing: bool = False
    rainfall_missing: bool = False
