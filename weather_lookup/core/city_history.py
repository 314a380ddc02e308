"""
city_history.py
Session bookkeeping for the current city and the "previous city" button.
"""

import random
from typing import Optional, Sequence

from weather_lookup.utils.log_util import app_logger

logger = app_logger(__name__)


class CityHistory:
    """
    Current and previous city for one user session.

    On the very first selection (the selected city is already current) there
    is nothing to go back to, so ``previous`` is filled with a random city.
    Every later selection moves the city being left into ``previous``.
    """

    def __init__(
        self,
        cities: Sequence[str],
        current: str,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not cities:
            raise ValueError("CityHistory needs at least one known city")
        self._cities = list(cities)
        self._rng = rng or random.Random()
        self.current = current
        self.previous: Optional[str] = None

    def random_city(self) -> str:
        """Uniform draw from the known cities."""
        return self._rng.choice(self._cities)

    def select(self, city: str) -> str:
        """
        Make ``city`` current and update ``previous``.

        :param city: Newly selected city.
        :return: The new current city.
        """
        just_starting = self.current == city
        self.previous = self.random_city() if just_starting else self.current
        self.current = city
        logger.debug(f"Selected {self.current}, previous is {self.previous}")
        return self.current

    def jump_to_random(self) -> str:
        """Select a random city."""
        return self.select(self.random_city())

    def go_back(self) -> str:
        """Select the previous city."""
        if self.previous is None:
            return self.current
        return self.select(self.previous)
