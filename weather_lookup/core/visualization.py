"""
visualization.py
Builds the Plotly figure of a city's temperature and precipitation normals.

Temperature gets the large top panel unless it's missing, in which case
precipitation moves up. A missing variable is shown as a message asking the
user to try a nearby city instead of an empty chart.
"""

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from weather_lookup.config import FIGURE_HEIGHT, NORMALS_PERIOD, TOP_PANEL_SHARE
from weather_lookup.core.bookmark import encode_city
from weather_lookup.core.chart_config import (
    apply_figure_layout,
    apply_month_axis,
    apply_standard_axes,
    create_standard_annotation,
    get_standard_colors,
    panel_row_heights,
)
from weather_lookup.models.weather import CityWeatherView
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


def _has_values(df: pd.DataFrame, column: str) -> bool:
    return column in df.columns and df[column].notna().any()


def temperature_traces(temperature: pd.DataFrame) -> list:
    """
    Traces for the temperature panel: a min/max band and the average line.

    :param temperature: Aggregated temperature DateSeries.
    :return: List of Plotly traces.
    """
    colors = get_standard_colors()
    traces = []

    if _has_values(temperature, "max") and _has_values(temperature, "min"):
        band = temperature.dropna(subset=["max", "min"])
        traces.append(
            go.Scatter(
                x=band["date"],
                y=band["max"],
                mode="lines",
                line=dict(color=colors["temp_range_line"]),
                name="Normal high",
                hovertemplate="%{y:.0f}°F",
            )
        )
        traces.append(
            go.Scatter(
                x=band["date"],
                y=band["min"],
                mode="lines",
                line=dict(color=colors["temp_range_line"]),
                fill="tonexty",
                fillcolor=colors["temp_range_fill"],
                name="Normal low",
                hovertemplate="%{y:.0f}°F",
            )
        )

    if _has_values(temperature, "avg"):
        avg = temperature.dropna(subset=["avg"])
        traces.append(
            go.Scatter(
                x=avg["date"],
                y=avg["avg"],
                mode="lines",
                line=dict(color=colors["temp_avg"], width=3),
                name="Average",
                hovertemplate="%{y:.1f}°F",
            )
        )

    return traces


def precipitation_traces(precipitation: pd.DataFrame) -> list:
    """
    Traces for the precipitation panel.

    Year-to-date accumulation is preferred. Stations that only report the
    daily chance of precipitation get that as bars instead.

    :param precipitation: Aggregated precipitation DateSeries.
    :return: List of Plotly traces.
    """
    colors = get_standard_colors()

    if _has_values(precipitation, "cumulative"):
        cumulative = precipitation.dropna(subset=["cumulative"])
        return [
            go.Scatter(
                x=cumulative["date"],
                y=cumulative["cumulative"],
                mode="lines",
                line=dict(color=colors["prcp_line"], width=2),
                fill="tozeroy",
                fillcolor=colors["prcp_fill"],
                name="Year to date",
                hovertemplate='%{y:.2f}"',
            )
        ]

    if _has_values(precipitation, "chance"):
        chance = precipitation.dropna(subset=["chance"])
        return [
            go.Bar(
                x=chance["date"],
                y=chance["chance"],
                marker_color=colors["prcp_chance"],
                name="Chance of rain",
                hovertemplate="%{y:.0f}%",
            )
        ]

    return []


def no_data_message(variable: str, city: str) -> str:
    return f"Sorry, no {variable} data is available for {city}, try a nearby city."


def build_weather_figure(view: CityWeatherView, share_url: str = "") -> go.Figure:
    """
    Compose the two-panel normals figure for a city.

    :param view: Resolved city weather.
    :param share_url: Base URL for the bookmark caption; no caption when empty.
    :return: Plotly figure.
    """
    panels = [
        ("temperature", view.has_temp, temperature_traces(view.temperature), "°F"),
        ("precipitation", view.has_prcp, precipitation_traces(view.precipitation), ""),
    ]
    if not view.has_temp:
        panels.reverse()

    fig = make_subplots(
        rows=2,
        cols=1,
        shared_xaxes=False,
        row_heights=panel_row_heights(TOP_PANEL_SHARE),
        vertical_spacing=0.08,
    )

    for row, (variable, has_data, traces, suffix) in enumerate(panels, start=1):
        if has_data and traces:
            for trace in traces:
                fig.add_trace(trace, row=row, col=1)
            apply_standard_axes(fig, ticksuffix=suffix, row=row, col=1)
        else:
            axis = "" if row == 1 else str(row)
            fig.add_annotation(
                create_standard_annotation(
                    no_data_message(variable, view.city),
                    position="center",
                    xref=f"x{axis} domain",
                    yref=f"y{axis} domain",
                    font={"size": 16, "color": get_standard_colors()["no_data_text"]},
                    bgcolor="rgba(0,0,0,0)",
                    borderwidth=0,
                )
            )
            fig.update_yaxes(visible=False, row=row, col=1)

    apply_month_axis(fig)

    caption = None
    if share_url:
        caption = f"See more at {share_url.rstrip('/')}/?city={encode_city(view.city)}"

    apply_figure_layout(
        fig,
        height=FIGURE_HEIGHT,
        title=f"Weather normals over the year for {view.city} ({NORMALS_PERIOD})",
        caption=caption,
    )
    logger.debug(f"Built figure for {view.city}")
    return fig
