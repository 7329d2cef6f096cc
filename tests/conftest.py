from datetime import date
from datetime import timedelta

import pytest


TODAY = date(2026, 10, 19)


def make_week(start: date, times_by_offset: dict[int, dict[str, object]]) -> dict[str, object]:
    """Build a LibCal style week record keyed by weekday name."""

    week: dict[str, object] = {}
    for offset, times in times_by_offset.items():
        day = start + timedelta(days=offset)
        week[day.strftime("%A")] = {"date": day.isoformat(), "times": times}
    return week


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def two_weeks() -> list[dict[str, object]]:
    """Two week records covering TODAY..TODAY+13 with mixed statuses."""

    open_hours = {"status": "open", "hours": [{"from": "9am", "to": "5pm"}]}
    first = make_week(
        TODAY,
        {
            0: open_hours,
            1: {"status": "24hours"},
            2: {"status": "closed"},
            3: {"status": "open", "hours": []},
            4: open_hours,
            5: open_hours,
            6: {"status": "closed"},
        },
    )
    second = make_week(TODAY + timedelta(days=7), {i: open_hours for i in range(7)})
    return [first, second]


@pytest.fixture
def week_factory():
    return make_week
