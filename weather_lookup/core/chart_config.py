"""
chart_config.py

Reusable Plotly configuration helpers for the normals charts.

Provides standardized layout, axis, annotation, and color settings so the
temperature and precipitation panels look the same wherever they're drawn.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go

from weather_lookup.utils.date_util import twelve_month_seq, year_bounds


def get_default_margins(compact: bool = False) -> Dict[str, int]:
    """
    Get standard margin configurations for charts.

    :param compact: If True, returns reduced margins for small displays
    :return: Dictionary with margin settings
    """
    if compact:
        return dict(l=30, r=20, t=50, b=40)
    else:
        return dict(l=60, r=20, t=80, b=60)


def get_standard_colors() -> Dict[str, str]:
    """
    Get standard color palette used across charts.

    :return: Dictionary with color definitions
    """
    return {
        "temp_avg": "#d62728",
        "temp_range_line": "rgba(214, 39, 40, 0.0)",
        "temp_range_fill": "rgba(214, 39, 40, 0.2)",
        "prcp_line": "#4682B4",
        "prcp_fill": "rgba(70, 130, 180, 0.3)",
        "prcp_chance": "#9ecae1",
        "grid_major": "#b3b3b3",
        "no_data_text": "#666666",
    }


def apply_figure_layout(
    fig: go.Figure,
    height: int = 850,
    title: Optional[str] = None,
    caption: Optional[str] = None,
    showlegend: bool = False,
    compact: bool = False,
) -> go.Figure:
    """
    Apply the standard layout for the normals figure.

    :param fig: Plotly figure to configure
    :param height: Chart height in pixels
    :param title: Centered chart title (optional)
    :param caption: Small text under the chart (optional)
    :param showlegend: Whether to show legend
    :param compact: Use compact margins if True
    :return: Configured figure
    """
    layout_config = {
        "height": height,
        "margin": get_default_margins(compact),
        "showlegend": showlegend,
        "hovermode": "x unified",
        "template": "plotly_white",
        "font": {"size": 16},
    }

    if title:
        layout_config["title"] = {"text": title, "x": 0.5, "xanchor": "center"}

    fig.update_layout(**layout_config)

    if caption:
        fig.add_annotation(
            create_standard_annotation(
                caption,
                position="bottom_right",
                y=-0.06,
                font={"size": 11},
                bgcolor="rgba(0,0,0,0)",
                borderwidth=0,
            )
        )
    return fig


def apply_month_axis(fig: go.Figure, **kwargs) -> go.Figure:
    """
    Label the x-axes with month names across one reference year.

    :param fig: Plotly figure to configure
    :param kwargs: Passed to ``update_xaxes`` (e.g. row/col)
    :return: Configured figure
    """
    fig.update_xaxes(
        type="date",
        tickvals=twelve_month_seq(),
        tickformat="%b",
        ticklabelmode="period",
        range=year_bounds(),
        showgrid=True,
        gridcolor=get_standard_colors()["grid_major"],
        title="",
        **kwargs,
    )
    return fig


def apply_standard_axes(
    fig: go.Figure,
    yaxis_title: str = "",
    ticksuffix: str = "",
    rangemode_y: str = "normal",
    **kwargs,
) -> go.Figure:
    """
    Apply standard y-axis configuration.

    :param fig: Plotly figure to configure
    :param yaxis_title: Y-axis title
    :param ticksuffix: Unit suffix for tick labels (e.g. "°F")
    :param rangemode_y: Y-axis range mode
    :param kwargs: Passed to ``update_yaxes`` (e.g. row/col)
    :return: Configured figure
    """
    fig.update_yaxes(
        title=yaxis_title,
        ticksuffix=ticksuffix,
        showgrid=True,
        gridcolor="lightgray",
        rangemode=rangemode_y,
        **kwargs,
    )
    return fig


def create_standard_annotation(
    text: str,
    position: str = "top_right",
    xref: str = "paper",
    yref: str = "paper",
    showarrow: bool = False,
    **kwargs
) -> Dict[str, Any]:
    """
    Create a standard annotation with common positioning.

    :param text: Annotation text
    :param position: Position preset ("top_right", "top_left", "bottom_right", "center")
    :param xref: X reference ("paper", "data" or an axis domain like "x2 domain")
    :param yref: Y reference ("paper", "data" or an axis domain like "y2 domain")
    :param showarrow: Whether to show arrow
    :param kwargs: Additional annotation parameters
    :return: Annotation configuration dictionary
    """
    positions = {
        "top_right": dict(x=0.98, y=0.95, xanchor="right", yanchor="top"),
        "top_left": dict(x=0.02, y=0.95, xanchor="left", yanchor="top"),
        "bottom_right": dict(x=0.98, y=0.05, xanchor="right", yanchor="bottom"),
        "center": dict(x=0.5, y=0.5, xanchor="center", yanchor="middle"),
    }

    pos_config = positions.get(position, positions["top_right"])

    annotation = {
        "text": text,
        "xref": xref,
        "yref": yref,
        "showarrow": showarrow,
        "bgcolor": "rgba(255,255,255,0.8)",
        "bordercolor": "gray",
        "borderwidth": 1,
        "borderpad": 4,
        **pos_config,
        **kwargs,
    }

    return annotation


def panel_row_heights(top_share: float) -> List[float]:
    """Relative heights for the two stacked panels."""
    return [top_share, 1 - top_share]
