"""
Calendar helpers for year-independent normals dates.

Normals are indexed by month and day only. They are stored as timestamps in
``REFERENCE_YEAR`` so pandas and Plotly can sort and plot them as dates.
"""

from typing import List, Optional

import pandas as pd

from weather_lookup.config import REFERENCE_YEAR


def calendar_date(month: int, day: int) -> Optional[pd.Timestamp]:
    """
    Build the reference-year timestamp for a month and day.

    :param month: Month number, 1-12.
    :param day: Day of month.
    :return: Timestamp, or None when the date doesn't exist (e.g. Feb 30).
    """
    try:
        return pd.Timestamp(year=REFERENCE_YEAR, month=month, day=day)
    except ValueError:
        return None


def twelve_month_seq() -> List[pd.Timestamp]:
    """First day of every month in the reference year, for axis ticks."""
    return list(pd.date_range(f"{REFERENCE_YEAR}-01-01", periods=12, freq="MS"))


def year_bounds() -> List[pd.Timestamp]:
    """First and last day of the reference year."""
    return [
        pd.Timestamp(year=REFERENCE_YEAR, month=1, day=1),
        pd.Timestamp(year=REFERENCE_YEAR, month=12, day=31),
    ]
