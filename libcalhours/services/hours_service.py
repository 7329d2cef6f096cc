import logging
from collections.abc import Mapping
from datetime import date
from typing import Any
from typing import Protocol
from zoneinfo import ZoneInfoNotFoundError

from libcalhours.core.errors import EmptyDataError
from libcalhours.core.errors import FetchError
from libcalhours.core.localization import Translate
from libcalhours.core.localization import default_translate
from libcalhours.models import DisplayDay
from libcalhours.services.table_renderer import render_table
from libcalhours.services.window_builder import build_window


logger = logging.getLogger(__name__)

MAX_WEEKS = 3
DAYS_PER_WEEK = 7


class HoursProvider(Protocol):
    def get_hours(
        self, location: str, ignore_cache: bool = False
    ) -> Mapping[str, Any]: ...


def resolve_num_weeks(requested: str | int | None) -> int:
    """Clamp a requested week count, falling back to MAX_WEEKS."""

    if requested is None or isinstance(requested, bool):
        return MAX_WEEKS

    # Numeric strings truncate toward zero, so "2.5" means two weeks.
    try:
        num_weeks = int(float(requested))
    except (TypeError, ValueError, OverflowError):
        return MAX_WEEKS

    if num_weeks < 1 or num_weeks > MAX_WEEKS:
        return MAX_WEEKS
    return num_weeks


def build_hours_window(
    client: HoursProvider,
    location: str,
    num_weeks: int,
    *,
    ignore_cache: bool = False,
    timezone: str = "UTC",
    today: date | None = None,
    translate: Translate = default_translate,
) -> list[DisplayDay]:
    """Fetch hours for a location and build its rolling window.

    Raises:
        FetchError: If the provider request failed.
        EmptyDataError: If the provider returned no weeks.
    """

    payload = client.get_hours(location, ignore_cache=ignore_cache)
    weeks = payload.get("weeks") if isinstance(payload, Mapping) else None
    if not isinstance(weeks, list):
        raise EmptyDataError("Retrieved data is empty.")

    return build_window(
        weeks,
        num_weeks * DAYS_PER_WEEK,
        today=today,
        timezone=timezone,
        translate=translate,
    )


def render_hours_calendar(
    client: HoursProvider,
    location: str,
    num_weeks: str | int | None = None,
    *,
    ignore_cache: bool = False,
    timezone: str = "UTC",
    today: date | None = None,
    translate: Translate = default_translate,
) -> str:
    """Render the hours table for a location.

    Any fetch or data failure is logged and yields an empty string.
    """

    resolved_weeks = resolve_num_weeks(num_weeks)

    try:
        days = build_hours_window(
            client,
            location,
            resolved_weeks,
            ignore_cache=ignore_cache,
            timezone=timezone,
            today=today,
            translate=translate,
        )
    except FetchError as exc:
        logger.error("Fetching hours for %r failed: %s", location, exc)
        return ""
    except EmptyDataError as exc:
        logger.error("No hours data for %r: %s", location, exc)
        return ""
    except ZoneInfoNotFoundError as exc:
        logger.error("Unknown timezone %r: %s", timezone, exc)
        return ""

    return render_table(days, resolved_weeks, translate=translate)
