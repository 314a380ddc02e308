"""
Normals chart UI for the weather lookup page.

This module provides the Streamlit presentation layer for a city's weather:
the cached resolution wrapper, the chart and the contributing station list.
Data work is handled by weather_lookup.core.resolver and figures by
weather_lookup.core.visualization.
"""

import pandas as pd
import streamlit as st

import weather_lookup.core.visualization as wl_viz
from weather_lookup.config import NORMALS_INFO_URL, NORMALS_PERIOD
from weather_lookup.core.city_history import CityHistory
from weather_lookup.core.resolver import resolve_city
from weather_lookup.core.styles import get_style_manager
from weather_lookup.models.weather import CityWeatherView
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


# Station normals don't change, so there is no ttl; the key is the city name.
@st.cache_data(show_spinner=False)
def _cached_city_view(city: str, _station_table: pd.DataFrame) -> CityWeatherView:
    logger.debug(f"CACHE city_view MISS: {city}")
    return resolve_city(city, _station_table)


def get_city_view(
    city: str, station_table: pd.DataFrame, use_cache: bool = True
) -> CityWeatherView:
    """
    Resolve a city, memoised by city name unless caching is switched off.

    :param city: City to resolve.
    :param station_table: Shared station lookup table.
    :param use_cache: Use the process-wide Streamlit data cache.
    :return: The city's weather view.
    """
    if use_cache:
        return _cached_city_view(city, station_table)
    return resolve_city(city, station_table)


def render(
    history: CityHistory,
    station_table: pd.DataFrame,
    use_cache: bool = True,
    share_url: str = "",
) -> None:
    """
    Render the chart and station list for the session's current city.

    :param history: The session's CityHistory.
    :param station_table: Shared station lookup table.
    :param use_cache: Use the process-wide Streamlit data cache.
    :param share_url: Public app URL for the chart caption.
    """
    city = history.current

    with st.spinner(f"Fetching data from NOAA for {city}..."):
        view = get_city_view(city, station_table, use_cache=use_cache)

    with st.spinner("Building plots..."):
        fig = wl_viz.build_weather_figure(view, share_url=share_url)
    st.plotly_chart(fig, width="stretch")

    render_station_info(view)
    render_data_info()


def render_station_info(view: CityWeatherView) -> None:
    """List the stations that went into the chart, linked to their data files."""
    st.subheader("Stations contributing data")
    if not view.station_summaries:
        st.caption(f"No weather stations are listed for {view.city}.")
        return
    st.caption("Click on station to go to its dataset.")
    get_style_manager().render_station_bubbles(view.station_summaries)


def render_data_info() -> None:
    style_manager = get_style_manager()
    style_manager.render_data_info(
        f'🗄️ Data sourced from <a href="{NORMALS_INFO_URL}" target="_blank">'
        f"NOAA Climate Normals</a>, generated by averaging observations from "
        f"weather stations over the years {NORMALS_PERIOD}. "
        f"For cities with multiple weather stations the average across all "
        f"reporting stations is used."
    )
