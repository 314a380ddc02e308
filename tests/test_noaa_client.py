"""
Unit tests for the NOAA normals fetcher.

requests.get is mocked; failures must come back as data, never as exceptions.
"""

from unittest.mock import MagicMock, patch

import requests

from weather_lookup.api.noaa_client import (
    build_station_url,
    fetch_station_text,
    fetch_stations,
)
from weather_lookup.models.weather import FetchResult


class TestBuildStationUrl:
    """Test URL templating."""

    def test_url_contains_station(self):
        url = build_station_url("USW00094847")

        assert url.startswith("https://")
        assert url.endswith("/USW00094847.normals.txt")

    def test_deterministic(self):
        assert build_station_url("X") == build_station_url("X")


class TestFetchStationText:
    """Test single-station downloads."""

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_success(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200, text="dly-tavg-normal")

        result = fetch_station_text("USW00094847")

        assert result == FetchResult("USW00094847", "dly-tavg-normal")
        assert result.fetch_failed is False
        called_url = mock_get.call_args[0][0]
        assert called_url == build_station_url("USW00094847")
        assert "timeout" in mock_get.call_args[1]

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_http_error_status(self, mock_get):
        mock_get.return_value = MagicMock(status_code=404, text="Not Found")

        result = fetch_station_text("NOPE")

        assert result.fetch_failed is True
        assert result.raw_text is None

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")

        result = fetch_station_text("USW00094847")

        assert result.fetch_failed is True

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.Timeout("too slow")

        assert fetch_station_text("USW00094847").fetch_failed is True

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_single_request_no_retry(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")

        fetch_station_text("USW00094847")

        assert mock_get.call_count == 1


class TestFetchStations:
    """Test concurrent multi-station downloads."""

    def test_empty_input(self):
        assert fetch_stations([]) == []

    def test_results_keep_input_order(self):
        def fetch(station_id):
            return FetchResult(station_id, f"text-{station_id}")

        results = fetch_stations(["C", "A", "B"], fetch=fetch, max_workers=3)

        assert [r.station_id for r in results] == ["C", "A", "B"]
        assert [r.raw_text for r in results] == ["text-C", "text-A", "text-B"]

    def test_raising_fetcher_becomes_failure(self):
        def fetch(station_id):
            if station_id == "BAD":
                raise RuntimeError("boom")
            return FetchResult(station_id, "ok")

        results = fetch_stations(["GOOD", "BAD"], fetch=fetch)

        assert results[0].raw_text == "ok"
        assert results[1] == FetchResult("BAD", None)

    @patch("weather_lookup.api.noaa_client.requests.get")
    def test_default_fetcher_uses_requests(self, mock_get):
        mock_get.return_value = MagicMock(status_code=200, text="body")

        results = fetch_stations(["A", "B"])

        assert all(r.raw_text == "body" for r in results)
        assert mock_get.call_count == 2
