"""
Centralized style management for the weather lookup page.

This module keeps the page CSS and the small HTML fragments (station
bubbles, data source note, source link) in one place.
"""

import html
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

from weather_lookup.models.weather import StationSummary
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


@dataclass
class StyleConfig:
    """Configuration dataclass for style parameters."""

    base_font_size: str = "1.1rem"
    label_font_size: str = "0.9rem"

    # Colors
    text_color: str = "#262730"
    muted_color: str = "#666666"
    bubble_bg: str = "#f8f9fa"
    bubble_border: str = "#2fa4e7"

    mobile_breakpoint: str = "768px"


class StyleManager:
    """
    Centralized style management with singleton pattern.

    Usage:
        style_manager = get_style_manager()
        style_manager.inject_styles()  # Call on every rerun
        style_manager.render_station_bubbles(summaries)

    CSS Classes:
        - .input-label: Caption above a header control
        - .station-list: Flex container for station bubbles
        - .station-bubble: One contributing station with its data icons
        - .data-info: Data source note under the chart
        - .source-link: Fixed link in the top right corner
    """

    _instance: Optional["StyleManager"] = None

    def __new__(cls) -> "StyleManager":
        """Implement singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize StyleManager with default configuration."""
        if not hasattr(self, "_config"):
            self._config = StyleConfig()

    @property
    def config(self) -> StyleConfig:
        """Get current style configuration."""
        return self._config

    def inject_styles(self) -> None:
        """Inject global CSS styles; Streamlit drops them on every rerun."""
        css = self._generate_css()
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
        logger.debug("CSS styles injected/reinjected")

    def _generate_css(self) -> str:
        """Generate CSS rules from configuration."""
        return f"""
        html, body, [class*="css"] {{
            font-size: {self.config.base_font_size};
        }}

        .input-label {{
            font-size: {self.config.label_font_size};
            color: {self.config.muted_color};
            margin-bottom: 0.2rem;
        }}

        .station-list {{
            display: flex;
            flex-wrap: wrap;
            gap: 0.5rem;
            margin: 0.5rem 0;
        }}

        .station-bubble {{
            background-color: {self.config.bubble_bg};
            border: 1px solid {self.config.bubble_border};
            border-radius: 1rem;
            padding: 0.2rem 0.7rem;
            white-space: nowrap;
        }}

        .station-bubble a {{
            color: {self.config.text_color};
            text-decoration: none;
        }}

        .data-info {{
            color: {self.config.muted_color};
            font-size: {self.config.label_font_size};
            margin-top: 1rem;
        }}

        .source-link {{
            position: fixed;
            top: 5px;
            right: 5px;
            font-size: 0.9rem;
            font-weight: lighter;
            z-index: 1000;
        }}

        @media (max-width: {self.config.mobile_breakpoint}) {{
            .source-link {{
                display: none;
            }}
        }}
        """

    def render_input_label(self, text: str) -> None:
        """
        Render a caption above a header control.

        :param text: Label text
        """
        st.markdown(
            f'<div class="input-label">{html.escape(text)}</div>',
            unsafe_allow_html=True,
        )

    def build_station_bubble(self, summary: StationSummary) -> str:
        """
        Build HTML for one contributing station.

        :param summary: Station summary from the resolved view
        :return: HTML string linking to the station's data file
        """
        icons = []
        if summary.had_temp:
            icons.append("🌡️")
        if summary.had_prcp:
            icons.append("🌧️")
        label = " ".join([html.escape(summary.station_id)] + icons)
        url = html.escape(summary.source_url, quote=True)
        return (
            f'<span class="station-bubble">'
            f'<a href="{url}" target="_blank">{label}</a>'
            f"</span>"
        )

    def render_station_bubbles(self, summaries: List[StationSummary]) -> None:
        """
        Render the list of contributing stations.

        :param summaries: Station summaries from the resolved view
        """
        bubbles = "".join(self.build_station_bubble(s) for s in summaries)
        st.markdown(
            f'<div class="station-list">{bubbles}</div>', unsafe_allow_html=True
        )

    def render_data_info(self, html_content: str) -> None:
        """
        Render the data source note.

        :param html_content: HTML content for the note
        """
        st.markdown(
            f'<div class="data-info">{html_content}</div>', unsafe_allow_html=True
        )

    def render_source_link(self, url: str) -> None:
        """
        Render the fixed source code link.

        :param url: Repository URL
        """
        st.markdown(
            f'<div class="source-link"><a href="{html.escape(url, quote=True)}" '
            f'target="_blank">View source code</a></div>',
            unsafe_allow_html=True,
        )


def get_style_manager() -> StyleManager:
    """
    Get the singleton StyleManager instance.

    :return: StyleManager instance
    """
    return StyleManager()
