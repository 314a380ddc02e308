"""
Unit tests for the station-to-city lookup table.
"""

import pytest

from weather_lookup.api.noaa_client import build_station_url
from weather_lookup.config import DEFAULT_CITY, STATION_TABLE_PATH
from weather_lookup.core.stations import (
    load_station_table,
    stations_for_city,
    unique_cities,
)
from weather_lookup.models.weather import StationRecord


@pytest.fixture
def table_csv(tmp_path):
    path = tmp_path / "stations.csv"
    path.write_text(
        "station,city,name\n"
        "S1,\"Ann Arbor, MI\",UNIV OF MICH\n"
        " S2 ,\"Detroit, MI \",METRO AP\n"
        "S3,\"Detroit, MI\",CITY AP\n"
        "S3,\"Detroit, MI\",CITY AP\n"
        ",\n"
        "S4,\"Ann Arbor, MI\",\n"
    )
    return path


class TestLoadStationTable:
    """Test reading the CSV asset."""

    def test_columns(self, table_csv):
        table = load_station_table(table_csv)
        assert list(table.columns) == ["station", "city", "url"]

    def test_cleanup(self, table_csv):
        table = load_station_table(table_csv)

        assert list(table["station"]) == ["S1", "S2", "S3", "S4"]
        assert "Detroit, MI" in set(table["city"])
        assert "Detroit, MI " not in set(table["city"])

    def test_urls_derived(self, table_csv):
        table = load_station_table(table_csv)
        assert table.loc[0, "url"] == build_station_url("S1")

    def test_missing_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("id,town\nS1,Somewhere\n")

        with pytest.raises(ValueError, match="missing columns"):
            load_station_table(path)

    def test_bundled_table(self):
        table = load_station_table(STATION_TABLE_PATH)

        assert not table.empty
        assert DEFAULT_CITY in unique_cities(table)


class TestQueries:
    """Test city lookups."""

    def test_unique_cities_first_appearance_order(self, table_csv):
        table = load_station_table(table_csv)
        assert unique_cities(table) == ["Ann Arbor, MI", "Detroit, MI"]

    def test_stations_for_city(self, table_csv):
        table = load_station_table(table_csv)

        stations = stations_for_city(table, "Ann Arbor, MI")

        assert stations == [
            StationRecord("S1", "Ann Arbor, MI", build_station_url("S1")),
            StationRecord("S4", "Ann Arbor, MI", build_station_url("S4")),
        ]

    def test_unknown_city(self, table_csv):
        table = load_station_table(table_csv)
        assert stations_for_city(table, "Atlantis, XX") == []
