"""
normals_parser.py
Extracts temperature and precipitation date series from NOAA station normals
text files.

A normals file is made of element sections. Each section starts with a line
holding only the element name (``dly-tmax-normal``) and has one row per month:

     01    330C   329C   328C ...

Values are integers with an optional completeness flag. Special values are
listed in ``MISSING_SENTINELS`` (dropped) and ``ZERO_SENTINELS`` (read as 0).
"""

import re
from typing import Dict, List, Optional, Tuple

import pandas as pd

from weather_lookup.config import (
    MISSING_SENTINELS,
    VALUE_FLAGS,
    ZERO_SENTINELS,
    element_index,
)
from weather_lookup.utils.date_util import calendar_date
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

SECTION_RE = re.compile(r"^\s*([a-z]{3}-[a-z0-9-]+)\s*$")
MONTH_ROW_RE = re.compile(r"^\s*(0[1-9]|1[0-2])\s+(.*\S)\s*$")
VALUE_RE = re.compile(rf"^(-?\d+)[{VALUE_FLAGS}]?$")


def empty_series(columns: Optional[List[str]] = None) -> pd.DataFrame:
    """
    Empty DateSeries, the "no data" sentinel.

    :param columns: Optional value column names to include.
    :return: Empty DataFrame with a datetime ``date`` column.
    """
    frame = pd.DataFrame({"date": pd.Series(dtype="datetime64[ns]")})
    for col in columns or []:
        frame[col] = pd.Series(dtype="float64")
    return frame


def extract_temperature(raw_text: Optional[str]) -> pd.DataFrame:
    """
    Daily temperature normals (avg/max/min, degrees F) from a normals file.

    :param raw_text: File contents, or None for a failed fetch.
    :return: DateSeries, empty when the station reports no temperature.
    """
    return _extract_variable(raw_text, "temperature")


def extract_precipitation(raw_text: Optional[str]) -> pd.DataFrame:
    """
    Daily precipitation normals from a normals file.

    ``chance`` is the percent of years with at least 0.01" on that date,
    ``cumulative`` the year-to-date normal in inches.

    :param raw_text: File contents, or None for a failed fetch.
    :return: DateSeries, empty when the station reports no precipitation.
    """
    return _extract_variable(raw_text, "precipitation")


def parse_sections(raw_text: str) -> Dict[str, List[Tuple[int, List[str]]]]:
    """
    Split a normals file into element sections.

    :param raw_text: File contents.
    :return: Mapping of element name to its (month, value tokens) rows.
    """
    sections: Dict[str, List[Tuple[int, List[str]]]] = {}
    current = None

    for line in raw_text.splitlines():
        header = SECTION_RE.match(line)
        if header:
            current = header.group(1)
            sections.setdefault(current, [])
            continue

        row = MONTH_ROW_RE.match(line)
        if row and current is not None:
            sections[current].append((int(row.group(1)), row.group(2).split()))

    return sections


def parse_value(token: str, divisor: float = 1) -> Optional[float]:
    """
    Convert one flagged value token to a float.

    :param token: Token such as ``330C`` or ``-8888``.
    :param divisor: Stored units per display unit (10 for tenths).
    :return: Scaled value, 0.0 for zero sentinels, None when missing or malformed.
    """
    match = VALUE_RE.match(token)
    if not match:
        return None

    raw = int(match.group(1))
    if raw in MISSING_SENTINELS:
        return None
    if raw in ZERO_SENTINELS:
        return 0.0
    return raw / divisor


def _extract_variable(raw_text: Optional[str], variable: str) -> pd.DataFrame:
    elements = element_index[variable]
    columns = sorted(element_cfg["column"] for element_cfg in elements.values())
    if not raw_text:
        return empty_series(columns)

    sections = parse_sections(raw_text)
    values: Dict[pd.Timestamp, Dict[str, float]] = {}

    for element, element_cfg in elements.items():
        for month, tokens in sections.get(element, []):
            for day, token in enumerate(tokens[:31], start=1):
                value = parse_value(token, element_cfg["divisor"])
                date = calendar_date(month, day)
                if value is None or date is None:
                    continue
                values.setdefault(date, {})[element_cfg["column"]] = value

    if not values:
        return empty_series(columns)

    frame = pd.DataFrame.from_dict(values, orient="index").reindex(columns=columns)
    frame = frame.astype("float64")
    frame.index.name = "date"
    frame = frame.sort_index().reset_index()
    frame["date"] = frame["date"].astype("datetime64[ns]")

    logger.debug(f"Extracted {len(frame)} {variable} dates")
    return frame
