"""
Módulo de servicios
"""
from .types import StationRow
from .extractor import extract_rows
from .tabulation import rows_to_frame, summarize

__all__ = [
    'StationRow',
    'extract_rows',
    'rows_to_frame',
    'summarize',
]
