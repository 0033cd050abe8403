"""
Cliente HTTP del feed de estaciones.

Descarga la respuesta cruda del proveedor; la interpretación del
esquema es cosa de services.extractor.
"""
import logging
from typing import Any, Dict, Optional

import requests

from config import (
    STATION_FEED_URL, STATION_FEED_API_KEY,
    STATION_FEED_TIMEOUT_SECONDS, STATION_FEED_VERIFY_TLS,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class FeedError(Exception):
    def __init__(self, kind: str, status_code: Optional[int] = None):
        self.kind = kind
        self.status_code = status_code
        super().__init__(kind)


def _headers(api_key: str) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if api_key:
        headers["x-api-key"] = api_key
    return headers


def _request_json(url: str, api_key: str, timeout_s: float, verify_tls: bool) -> Any:
    try:
        r = requests.get(url, headers=_headers(api_key), timeout=timeout_s, verify=verify_tls)
    except requests.Timeout:
        raise FeedError("timeout")
    except requests.RequestException:
        raise FeedError("network")

    if r.status_code in (401, 403):
        raise FeedError("unauthorized", r.status_code)
    if r.status_code == 404:
        raise FeedError("notfound", 404)
    if r.status_code == 429:
        raise FeedError("ratelimit", 429)
    if r.status_code >= 400:
        raise FeedError("http", r.status_code)

    try:
        return r.json()
    except ValueError:
        raise FeedError("badjson")


def fetch_station_feed(
    url: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    verify: Optional[bool] = None,
) -> Any:
    """
    Descarga el feed de estaciones (una petición, sin caché).

    Raises:
        FeedError: kind en config, timeout, network, unauthorized,
            notfound, ratelimit, http o badjson.
    """
    target = str(url or STATION_FEED_URL).strip()
    if not target:
        raise FeedError("config")

    key = str(api_key if api_key is not None else STATION_FEED_API_KEY).strip()
    timeout_s = float(timeout if timeout is not None else STATION_FEED_TIMEOUT_SECONDS)
    verify_tls = STATION_FEED_VERIFY_TLS if verify is None else bool(verify)

    if not verify_tls:
        logger.warning("Verificación TLS desactivada para el feed de estaciones")
    logger.info(f"Consultando feed de estaciones: {target}")

    return _request_json(target, key, timeout_s, verify_tls)
