from collections.abc import Mapping
from typing import Any

import httpx


def fetch_hours_grid(
    institution_id: str,
    weeks: int,
    api_url: str,
) -> list[dict[str, Any]]:
    """Fetch the weekly hours grid for all locations of an institution."""

    if not institution_id:
        raise ValueError("LIBCAL_INSTITUTION_ID is required for hours requests")

    response = httpx.get(
        api_url,
        params={
            "iid": institution_id,
            "format": "json",
            "weeks": weeks,
            "systemTime": 0,
        },
        headers={"User-Agent": "libcalhours"},
        timeout=15.0,
    )
    response.raise_for_status()

    payload: Any = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("LibCal hours response is invalid")

    if payload.get("error"):
        raise ValueError("LibCal hours API returned an error")

    locations = payload.get("locations")
    if not isinstance(locations, list):
        raise ValueError("LibCal hours locations are missing")

    return [location for location in locations if isinstance(location, Mapping)]


def find_location_weeks(
    locations: list[dict[str, Any]],
    location: str,
) -> list[dict[str, Any]] | None:
    """Return the week records of a location matched by name or id.

    Returns None when no location matches.
    """

    wanted = location.strip().lower()
    for item in locations:
        raw_name = item.get("name")
        raw_lid = item.get("lid")
        name_matches = isinstance(raw_name, str) and raw_name.strip().lower() == wanted
        lid_matches = raw_lid is not None and str(raw_lid) == wanted
        if not name_matches and not lid_matches:
            continue

        weeks = item.get("weeks")
        if not isinstance(weeks, list):
            return []
        return [week for week in weeks if isinstance(week, Mapping)]

    return None
