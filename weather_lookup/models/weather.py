"""
Weather data models and type definitions.

This module provides the data structures passed between the station fetcher,
the normals parser and the presentation layer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd


@dataclass(frozen=True)
class StationRecord:
    """One row of the station-to-city lookup table."""

    station_id: str
    city: str
    source_url: str


@dataclass(frozen=True)
class FetchResult:
    """Raw normals text for a station, or ``None`` when the fetch failed."""

    station_id: str
    raw_text: Optional[str] = None

    @property
    def fetch_failed(self) -> bool:
        return self.raw_text is None


@dataclass(frozen=True)
class StationSummary:
    """Which variables a single station contributed to its city."""

    station_id: str
    source_url: str
    had_temp: bool
    had_prcp: bool


@dataclass
class CityWeatherView:
    """Averaged normals for a city plus the stations that went into them."""

    city: str
    temperature: pd.DataFrame
    precipitation: pd.DataFrame
    station_summaries: List[StationSummary] = field(default_factory=list)

    @property
    def has_temp(self) -> bool:
        return not self.temperature.empty

    @property
    def has_prcp(self) -> bool:
        return not self.precipitation.empty
