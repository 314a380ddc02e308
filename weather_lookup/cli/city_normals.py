#!/usr/bin/env python3
"""
city_normals.py: Resolve a city's averaged climate normals without the UI.

Downloads every station of the city, averages them the same way the app does
and writes the temperature and precipitation series to CSV files.

Usage:
    python -m weather_lookup.cli.city_normals "Ann Arbor, MI" [--output-dir data/exports]
    python -m weather_lookup.cli.city_normals --list-cities
"""

import argparse
import re
from pathlib import Path
from typing import List, Optional

from weather_lookup.config import REPO_ROOT, STATION_TABLE_PATH
from weather_lookup.core.bookmark import encode_city
from weather_lookup.core.resolver import resolve_city
from weather_lookup.core.stations import load_station_table, unique_cities
from weather_lookup.models.weather import CityWeatherView
from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)

DEFAULT_OUTPUT_DIR = REPO_ROOT / "data" / "exports"


def city_slug(city: str) -> str:
    """Filesystem-friendly version of a city name."""
    return re.sub(r"[^a-z0-9]+", "_", city.lower()).strip("_")


def export_city_view(view: CityWeatherView, output_dir: Path) -> List[Path]:
    """
    Write the non-empty series of a view to CSV.

    :param view: Resolved city weather.
    :param output_dir: Directory for the CSV files, created if needed.
    :return: Paths of the files written.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for variable, series in (
        ("temperature", view.temperature),
        ("precipitation", view.precipitation),
    ):
        if series.empty:
            logger.warning(f"No {variable} data for {view.city}, skipping export")
            continue
        path = output_dir / f"{city_slug(view.city)}_{variable}.csv"
        out = series.copy()
        out["date"] = out["date"].dt.strftime("%m-%d")
        out.to_csv(path, index=False)
        logger.info(f"{variable.capitalize()} saved to: {path}")
        written.append(path)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Export averaged NOAA climate normals for a city"
    )
    parser.add_argument("city", nargs="?", help='City name, e.g. "Ann Arbor, MI"')
    parser.add_argument(
        "--stations", type=Path, default=STATION_TABLE_PATH, help="Station table CSV"
    )
    parser.add_argument(
        "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR, help="Where to write CSVs"
    )
    parser.add_argument(
        "--list-cities", action="store_true", help="Print known cities and exit"
    )
    args = parser.parse_args(argv)

    station_table = load_station_table(args.stations)
    cities = unique_cities(station_table)

    if args.list_cities:
        for city in cities:
            print(city)
        return 0

    if not args.city:
        parser.error("a city is required unless --list-cities is given")
    if args.city not in cities:
        print(f"❌ Unknown city: {args.city}")
        return 1

    view = resolve_city(args.city, station_table)
    for summary in view.station_summaries:
        print(
            f"{summary.station_id}: temperature={'yes' if summary.had_temp else 'no'}, "
            f"precipitation={'yes' if summary.had_prcp else 'no'}"
        )

    written = export_city_view(view, args.output_dir)
    if not written:
        print(f"❌ No data available for {args.city}, try a nearby city")
        return 1

    print(f"✅ Exported {len(written)} file(s); bookmark token: {encode_city(args.city)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
