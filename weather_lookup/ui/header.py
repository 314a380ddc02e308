"""
Header rendering module for the weather lookup page.

Draws the title and the three city controls (search, previous city, random
city) and keeps the session's CityHistory and the URL bookmark in sync.
"""

from typing import List

import streamlit as st

from weather_lookup.core.bookmark import city_from_bookmark, encode_city
from weather_lookup.core.city_history import CityHistory
from weather_lookup.ui.components import labeled_input
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

HISTORY_KEY = "city_history"
CITY_WIDGET_KEY = "city"
BOOKMARK_PARAM = "city"


def init_city_history(cities: List[str], default_city: str) -> CityHistory:
    """
    Create the session's CityHistory on first run.

    A bookmarked city from the URL is used when it's known, otherwise the
    default city.

    :param cities: Known cities.
    :param default_city: Fallback city.
    :return: The session's CityHistory.
    """
    if HISTORY_KEY in st.session_state:
        return st.session_state[HISTORY_KEY]

    token = st.query_params.get(BOOKMARK_PARAM)
    start_city = city_from_bookmark(token, cities, default_city)
    if start_city not in cities:
        start_city = cities[0]

    history = CityHistory(cities, current=start_city)
    # First selection: previous gets a random city, not the current one.
    history.select(start_city)

    st.session_state[HISTORY_KEY] = history
    st.session_state[CITY_WIDGET_KEY] = start_city
    logger.info(f"New session starting at {start_city} (bookmark={token!r})")
    return history


def _on_city_change() -> None:
    city = st.session_state.get(CITY_WIDGET_KEY)
    if city:
        st.session_state[HISTORY_KEY].select(city)


def _on_previous_city() -> None:
    history = st.session_state[HISTORY_KEY]
    st.session_state[CITY_WIDGET_KEY] = history.go_back()


def _on_random_city() -> None:
    history = st.session_state[HISTORY_KEY]
    st.session_state[CITY_WIDGET_KEY] = history.jump_to_random()


def render_header(history: CityHistory, cities: List[str]) -> None:
    """
    Render the title and city controls, then push the bookmark into the URL.

    :param history: The session's CityHistory.
    :param cities: Known cities for the search box.
    """
    st.title("Explore your weather")

    search_col, prev_col, random_col = st.columns([3, 2, 1])
    with search_col:
        with labeled_input("Search for a city"):
            st.selectbox(
                "Search for a city",
                options=cities,
                key=CITY_WIDGET_KEY,
                on_change=_on_city_change,
                label_visibility="collapsed",
            )
    with prev_col:
        with labeled_input("Return to previous city"):
            st.button(
                history.previous or history.current,
                key="prev_city",
                on_click=_on_previous_city,
                width="stretch",
            )
    with random_col:
        with labeled_input("Try a random city"):
            st.button(
                "🎲",
                key="rnd_city",
                on_click=_on_random_city,
                help="Jump to a random city",
                width="stretch",
            )

    st.query_params[BOOKMARK_PARAM] = encode_city(history.current)
