import logging
from threading import RLock
from time import monotonic
from typing import Any

import httpx

from libcalhours.core.errors import FetchError
from libcalhours.core.errors import LocationNotFoundError
from libcalhours.libcal_api import fetch_hours_grid
from libcalhours.libcal_api import find_location_weeks
from libcalhours.settings import Settings


logger = logging.getLogger(__name__)


class HoursClient:
    """LibCal hours client with a small in-memory cache of the hours grid."""

    def __init__(self, settings: Settings, weeks: int = 4) -> None:
        self.api_url = settings.libcal_api_url
        self.institution_id = settings.libcal_institution_id
        self.ttl_seconds = max(0, settings.cache_ttl_seconds)
        self.weeks = max(1, weeks)
        self._cached_at: float | None = None
        self._cached_locations: list[dict[str, Any]] = []
        self._lock = RLock()

    def get_hours(
        self, location: str, ignore_cache: bool = False
    ) -> dict[str, list[dict[str, Any]]]:
        """Return `{"weeks": [...]}` for the given location."""

        locations = self._get_locations(ignore_cache)
        weeks = find_location_weeks(locations, location)
        if weeks is None:
            raise LocationNotFoundError(f"LibCal location not found: {location!r}")

        return {"weeks": weeks}

    def clear_cache(self) -> None:
        with self._lock:
            self._cached_at = None
            self._cached_locations = []

    def _get_locations(self, ignore_cache: bool) -> list[dict[str, Any]]:
        with self._lock:
            if not ignore_cache and self._is_fresh(monotonic()):
                return self._cached_locations

        try:
            locations = fetch_hours_grid(
                institution_id=self.institution_id,
                weeks=self.weeks,
                api_url=self.api_url,
            )
        except httpx.HTTPError as exc:
            raise FetchError("LibCal hours request failed") from exc
        except ValueError as exc:
            raise FetchError(str(exc)) from exc

        logger.debug("Fetched hours grid with %d locations", len(locations))
        with self._lock:
            self._cached_at = monotonic()
            self._cached_locations = locations
        return locations

    def _is_fresh(self, now: float) -> bool:
        if self._cached_at is None:
            return False
        return now - self._cached_at < self.ttl_seconds
