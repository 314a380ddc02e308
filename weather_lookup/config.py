# config.py
"""
Configurations for the weather lookup application.

This module contains the NOAA normals source settings, the element index used
by the normals parser, and the UI defaults shared across the application.
Deployment overrides are read from Streamlit secrets through ``get_setting``.
"""

from pathlib import Path
from typing import Any

import streamlit as st

from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

REPO_ROOT = Path(__file__).resolve().parent.parent

# Station table ########################
STATION_TABLE_PATH = REPO_ROOT / "data" / "station_to_city.csv"
DEFAULT_CITY = "Ann Arbor, MI"

# NOAA source ########################
NORMALS_URL_TEMPLATE = (
    "https://www.ncei.noaa.gov/pub/data/normals/1981-2010/products/station/"
    "{station}.normals.txt"
)
NORMALS_INFO_URL = (
    "https://www.ncei.noaa.gov/products/land-based-station/us-climate-normals"
)
NORMALS_PERIOD = "1981-2010"
FETCH_TIMEOUT_S = 20
MAX_FETCH_WORKERS = 8

# Normals parsing ########################
# All series share one leap year so Feb 29 has a place on the calendar.
REFERENCE_YEAR = 2000

element_index = {
    "temperature": {
        "dly-tavg-normal": {"column": "avg", "divisor": 10},
        "dly-tmax-normal": {"column": "max", "divisor": 10},
        "dly-tmin-normal": {"column": "min", "divisor": 10},
    },
    "precipitation": {
        "dly-prcp-pctall-ge001hi": {"column": "chance", "divisor": 10},
        "ytd-prcp-normal": {"column": "cumulative", "divisor": 100},
    },
}

MISSING_SENTINELS = {-9999, -8888, -6666}
ZERO_SENTINELS = {-7777, -5555}
VALUE_FLAGS = "CSRPQ"

# Charts ########################
FIGURE_HEIGHT = 850
TOP_PANEL_SHARE = 2 / 3

# Secrets section holding deployment overrides
SETTINGS_SECTION = "weather_lookup"


def get_setting(key: str, default: Any) -> Any:
    """
    Read an override from the ``[weather_lookup]`` secrets section.

    Falls back to ``default`` when there is no secrets file or no such key.

    :param key: Setting name inside the section.
    :param default: Value used when the setting is absent.
    :return: The configured value or the default.
    """
    try:
        return st.secrets.get(SETTINGS_SECTION, {}).get(key, default)
    except Exception as e:
        logger.debug(f"No secrets available for '{key}', using default: {e}")
        return default
