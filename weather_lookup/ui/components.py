"""
Reusable UI components for the weather lookup page.

Shared loaders and widgets used by the header and chart sections.
"""

from contextlib import contextmanager

import pandas as pd
import streamlit as st

from weather_lookup.config import STATION_TABLE_PATH
from weather_lookup.core.stations import load_station_table
from weather_lookup.core.styles import get_style_manager


@st.cache_resource(show_spinner=False)
def get_station_table(path: str = str(STATION_TABLE_PATH)) -> pd.DataFrame:
    """
    Load the station lookup table once per process.

    :param path: CSV path, defaults to the bundled table.
    :return: Station table shared by every session. Don't mutate it.
    """
    return load_station_table(path)


@contextmanager
def labeled_input(label: str):
    """
    Render a small caption and yield so the caller can draw the control under it.

    :param label: Caption text shown above the control.
    """
    get_style_manager().render_input_label(label)
    yield
