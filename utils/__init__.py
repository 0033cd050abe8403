"""
Utilidades
"""
from .helpers import is_nan, ensure_list, fmt_value

__all__ = [
    'is_nan',
    'ensure_list',
    'fmt_value',
]
