"""
aggregation.py
Collapses the date series of several stations into one series per city.
"""

from typing import Iterable, Optional

import pandas as pd

from weather_lookup.core.normals_parser import empty_series
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


def aggregate(series_list: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Average station series by calendar date.

    Each output value is the mean over only the stations that have a value for
    that date and column; NaN never counts as zero. The result is independent
    of input order.

    :param series_list: DateSeries frames, ``None`` or empty entries are skipped.
    :return: DateSeries sorted by date, empty when nothing had data.
    """
    frames = [s for s in series_list if s is not None and not s.empty]
    if not frames:
        return empty_series()

    combined = pd.concat(frames, ignore_index=True)
    value_columns = sorted(col for col in combined.columns if col != "date")
    combined = combined[["date"] + value_columns]

    result = combined.groupby("date", as_index=False, sort=True).mean()
    result = result.dropna(how="all", subset=value_columns).reset_index(drop=True)

    logger.debug(f"Aggregated {len(frames)} series into {len(result)} dates")
    return result
