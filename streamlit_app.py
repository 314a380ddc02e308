"""
Main streamlit.io application
"""

import streamlit as st

from weather_lookup.config import DEFAULT_CITY, get_setting
from weather_lookup.core.stations import unique_cities
from weather_lookup.core.styles import get_style_manager
from weather_lookup.ui import header, weather
from weather_lookup.ui.components import get_station_table
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Explore your weather",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Initialize global styles
style_manager = get_style_manager()
style_manager.inject_styles()

use_cache = bool(get_setting("cache_enabled", True))
default_city = get_setting("default_city", DEFAULT_CITY)
share_url = get_setting("share_url", "")
source_url = get_setting("source_url", "")

if not use_cache:
    logger.info("Disabling caching")

# Setup and get data ########################

station_table = get_station_table()
cities = unique_cities(station_table)
if not cities:
    st.error("The station lookup table is empty.")
    st.stop()

history = header.init_city_history(cities, default_city)

# Present the page ########################

header.render_header(history, cities)
weather.render(history, station_table, use_cache=use_cache, share_url=share_url)

if source_url:
    style_manager.render_source_link(source_url)
