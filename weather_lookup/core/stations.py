"""
stations.py
Loading and querying the static station-to-city lookup table.

The table is read once at start-up and treated as read-only afterwards.
"""

from pathlib import Path
from typing import List, Union

import pandas as pd

from weather_lookup.api.noaa_client import build_station_url
from weather_lookup.models.weather import StationRecord
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

REQUIRED_COLUMNS = ("station", "city")


def load_station_table(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read the station lookup CSV and derive each station's source URL.

    :param path: Path to a CSV with at least ``station`` and ``city`` columns.
    :return: DataFrame with ``station``, ``city`` and ``url`` columns.
    :raises ValueError: If a required column is missing.
    """
    raw = pd.read_csv(path, dtype=str)
    missing = [col for col in REQUIRED_COLUMNS if col not in raw.columns]
    if missing:
        raise ValueError(f"Station table {path} is missing columns: {missing}")

    table = raw.loc[:, list(REQUIRED_COLUMNS)].copy()
    for col in REQUIRED_COLUMNS:
        table[col] = table[col].str.strip()
    table = table.replace("", pd.NA).dropna().drop_duplicates()
    table["url"] = table["station"].map(build_station_url)
    table = table.reset_index(drop=True)

    logger.info(
        f"Loaded {len(table)} stations for {table['city'].nunique()} cities from {path}"
    )
    return table


def unique_cities(table: pd.DataFrame) -> List[str]:
    """Distinct city names in the order they first appear in the table."""
    return list(table["city"].unique())


def stations_for_city(table: pd.DataFrame, city: str) -> List[StationRecord]:
    """
    Return every station that reports for a city.

    :param table: Station table from ``load_station_table``.
    :param city: City name exactly as it appears in the table.
    :return: Station records, empty when the city is unknown.
    """
    rows = table.loc[table["city"] == city]
    return [
        StationRecord(station_id=row.station, city=row.city, source_url=row.url)
        for row in rows.itertuples(index=False)
    ]
