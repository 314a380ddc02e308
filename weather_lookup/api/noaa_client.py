"""
noaa_client.py: Fetches NOAA station climate-normals text files.

Every failure is logged and returned as a ``FetchResult`` without text so that
one unreachable station never stops the rest of a city from loading.

Functions:
- build_station_url(station_id)
- fetch_station_text(station_id, timeout)
- fetch_stations(station_ids, fetch, max_workers)
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

import requests

from weather_lookup.config import (
    FETCH_TIMEOUT_S,
    MAX_FETCH_WORKERS,
    NORMALS_URL_TEMPLATE,
)
from weather_lookup.models.weather import FetchResult
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


def build_station_url(station_id: str) -> str:
    """Source URL of a station's normals file."""
    return NORMALS_URL_TEMPLATE.format(station=station_id)


def fetch_station_text(station_id: str, timeout: float = FETCH_TIMEOUT_S) -> FetchResult:
    """
    Download the raw normals text for one station.

    :param station_id: GHCN station identifier, e.g. ``USW00094847``.
    :param timeout: Request timeout in seconds.
    :return: FetchResult with the text, or with ``raw_text=None`` on any failure.
    """
    url = build_station_url(station_id)
    logger.debug(f"Fetching normals: {station_id} ({url})")

    try:
        resp = requests.get(url, timeout=timeout)
        if resp.status_code != 200:
            logger.warning(f"Normals fetch failed for {station_id}: {resp.status_code}")
            return FetchResult(station_id=station_id)
        return FetchResult(station_id=station_id, raw_text=resp.text)
    except Exception as e:
        logger.error(f"Request error while fetching normals for {station_id}: {e}")
        return FetchResult(station_id=station_id)


def fetch_stations(
    station_ids: Sequence[str],
    fetch: Callable[[str], FetchResult] = fetch_station_text,
    max_workers: Optional[int] = None,
) -> List[FetchResult]:
    """
    Fetch several stations concurrently.

    :param station_ids: Station identifiers to download.
    :param fetch: Single-station fetcher, replaceable for tests or offline use.
    :param max_workers: Thread bound, defaults to ``MAX_FETCH_WORKERS``.
    :return: One FetchResult per station, in the same order as ``station_ids``.
    """
    if not station_ids:
        return []

    workers = max(1, min(max_workers or MAX_FETCH_WORKERS, len(station_ids)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(_safe_fetch(fetch), station_ids))

    failed = sum(result.fetch_failed for result in results)
    if failed:
        logger.info(f"{failed} of {len(results)} stations returned no data")
    return results


def _safe_fetch(fetch: Callable[[str], FetchResult]) -> Callable[[str], FetchResult]:
    """Wrap a fetcher so an exception becomes a failed FetchResult."""

    def wrapper(station_id: str) -> FetchResult:
        try:
            return fetch(station_id)
        except Exception as e:
            logger.exception(f"Fetcher raised for {station_id}: {e}")
            return FetchResult(station_id=station_id)

    return wrapper
