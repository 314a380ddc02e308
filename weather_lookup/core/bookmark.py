"""
bookmark.py
Reversible encoding of a city name into a URL-safe bookmark token.
"""

from typing import Iterable, Optional
from urllib.parse import quote_plus, unquote_plus

from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


def encode_city(city: str) -> str:
    """Bookmark token for a city, e.g. ``Ann+Arbor%2C+MI``."""
    return quote_plus(city)


def decode_city(token, known_cities: Iterable[str]) -> Optional[str]:
    """
    Turn a bookmark token back into a city name.

    :param token: Token from the URL, possibly missing or garbage.
    :param known_cities: Cities present in the station table.
    :return: The city name, or None when the token doesn't name a known city.
    """
    if not isinstance(token, str) or not token:
        return None

    city = unquote_plus(token)
    if city not in set(known_cities):
        logger.info(f"Ignoring bookmark for unknown city: {token!r}")
        return None
    return city


def city_from_bookmark(token, known_cities: Iterable[str], default: str) -> str:
    """Decode a bookmark token, falling back to ``default`` when it's invalid."""
    city = decode_city(token, known_cities)
    return city if city is not None else default
