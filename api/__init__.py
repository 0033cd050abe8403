"""
Módulo API
"""
from .station_feed import FeedError, fetch_station_feed

__all__ = [
    'FeedError',
    'fetch_station_feed',
]
