from collections.abc import Iterable
from collections.abc import Mapping
from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Any
from zoneinfo import ZoneInfo

from libcalhours.core.errors import EmptyDataError
from libcalhours.core.localization import CLOSED
from libcalhours.core.localization import NOT_AVAILABLE
from libcalhours.core.localization import TWENTY_FOUR_HOURS
from libcalhours.core.localization import Translate
from libcalhours.core.localization import default_translate
from libcalhours.models import DisplayDay


def current_date(timezone: str = "UTC") -> date:
    """Return today's calendar date in the given IANA timezone."""

    return datetime.now(ZoneInfo(timezone)).date()


def resolve_day_text(
    times: Mapping[str, Any], translate: Translate = default_translate
) -> str:
    """Map a LibCal `times` block to the text shown for that day."""

    status = times.get("status")
    if status == "24hours":
        return translate(TWENTY_FOUR_HOURS)
    if status == "closed":
        return translate(CLOSED)

    # Only the first range is shown, even when the day has several.
    hours = times.get("hours")
    if isinstance(hours, list) and hours:
        first = hours[0]
        if isinstance(first, Mapping):
            opens = first.get("from")
            closes = first.get("to")
            if isinstance(opens, str) and isinstance(closes, str):
                return f"{opens} - {closes}"

    return translate(NOT_AVAILABLE)


def flatten_weeks(
    weeks: Iterable[Mapping[str, Any]],
    translate: Translate = default_translate,
) -> dict[date, str]:
    """Merge week records into a date keyed mapping of display texts.

    Entries without a parseable date or a times block are skipped. A date
    seen again in a later week overwrites the earlier text.
    """

    days: dict[date, str] = {}
    for week in weeks:
        if not isinstance(week, Mapping):
            continue
        for item in week.values():
            if not isinstance(item, Mapping):
                continue
            raw_date = item.get("date")
            times = item.get("times")
            if not isinstance(raw_date, str) or not isinstance(times, Mapping):
                continue

            try:
                parsed_day = date.fromisoformat(raw_date)
            except ValueError:
                continue

            days[parsed_day] = resolve_day_text(times, translate)

    return days


def build_window(
    weeks: list[Mapping[str, Any]],
    num_days: int,
    *,
    today: date | None = None,
    timezone: str = "UTC",
    translate: Translate = default_translate,
) -> list[DisplayDay]:
    """Build `num_days` consecutive display days starting today.

    Raises:
        EmptyDataError: If no week records were given.
        ValueError: If `num_days` is less than one.
    """

    if num_days < 1:
        raise ValueError("num_days must be at least 1")
    if not weeks:
        raise EmptyDataError("Retrieved data is empty.")

    texts_by_date = flatten_weeks(weeks, translate)
    start_day = today if today is not None else current_date(timezone)
    fallback = translate(NOT_AVAILABLE)

    window: list[DisplayDay] = []
    for offset in range(num_days):
        current_day = start_day + timedelta(days=offset)
        window.append(
            DisplayDay(
                date=current_day,
                text=texts_by_date.get(current_day, fallback),
                is_today=offset == 0,
            )
        )

    return window
