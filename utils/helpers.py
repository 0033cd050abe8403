"""
Funciones auxiliares generales
"""
from typing import Any, List


def is_nan(x):
    """Verifica si un valor es NaN"""
    if x is None:
        return True
    return x != x


def ensure_list(value: Any) -> List[Any]:
    """
    Normaliza un valor del proveedor a lista.

    El mismo campo llega como objeto suelto o como lista según la
    versión del API (típico de JSON convertido desde XML).
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, dict):
        return [value]
    return []


def fmt_value(x, unit: str = "", decimals: int = 1) -> str:
    """Formatea un valor numérico con unidad"""
    if is_nan(x):
        return "—"
    suffix = f" {unit}" if unit else ""
    return f"{x:.{decimals}f}{suffix}"
