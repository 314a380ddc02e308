"""
resolver.py
Builds the averaged weather view for a city from all of its stations.

Not every station has both temperature and precipitation data, so each
station is fetched and parsed on its own and whatever it has is kept. A
station that fails at any step simply contributes nothing.
"""

from typing import Callable, List, Optional

import pandas as pd

from weather_lookup.api.noaa_client import fetch_station_text, fetch_stations
from weather_lookup.core.aggregation import aggregate
from weather_lookup.core.normals_parser import (
    empty_series,
    extract_precipitation,
    extract_temperature,
)
from weather_lookup.core.stations import stations_for_city
from weather_lookup.models.weather import (
    CityWeatherView,
    FetchResult,
    StationSummary,
)
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


def resolve_city(
    city: str,
    station_table: pd.DataFrame,
    fetch: Callable[[str], FetchResult] = fetch_station_text,
    max_workers: Optional[int] = None,
) -> CityWeatherView:
    """
    Fetch, parse and average the normals of every station in a city.

    :param city: City name as it appears in the station table.
    :param station_table: Table from ``load_station_table``.
    :param fetch: Single-station fetcher.
    :param max_workers: Bound on concurrent station downloads.
    :return: CityWeatherView, with empty series when nothing was usable.
    """
    stations = stations_for_city(station_table, city)
    if not stations:
        logger.warning(f"No stations found for {city}")
        return CityWeatherView(
            city=city, temperature=empty_series(), precipitation=empty_series()
        )

    logger.info(f"Resolving {city} from {len(stations)} stations")
    results = fetch_stations(
        [station.station_id for station in stations], fetch=fetch, max_workers=max_workers
    )

    temp_series: List[pd.DataFrame] = []
    prcp_series: List[pd.DataFrame] = []
    summaries: List[StationSummary] = []

    for station, result in zip(stations, results):
        temp = _safe_extract(extract_temperature, result)
        prcp = _safe_extract(extract_precipitation, result)
        temp_series.append(temp)
        prcp_series.append(prcp)
        summaries.append(
            StationSummary(
                station_id=station.station_id,
                source_url=station.source_url,
                had_temp=not temp.empty,
                had_prcp=not prcp.empty,
            )
        )

    view = CityWeatherView(
        city=city,
        temperature=aggregate(temp_series),
        precipitation=aggregate(prcp_series),
        station_summaries=summaries,
    )
    logger.info(
        f"Resolved {city}: has_temp={view.has_temp}, has_prcp={view.has_prcp}"
    )
    return view


def _safe_extract(
    extractor: Callable[[Optional[str]], pd.DataFrame], result: FetchResult
) -> pd.DataFrame:
    """Run an extractor, treating a failed fetch or a parse error as no data."""
    if result.fetch_failed:
        return empty_series()
    try:
        return extractor(result.raw_text)
    except Exception as e:
        name = getattr(extractor, "__name__", "extractor")
        logger.exception(f"{name} failed for station {result.station_id}: {e}")
        return empty_series()
