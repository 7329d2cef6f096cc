from collections.abc import Sequence
from html import escape

from libcalhours.core.localization import HOURS
from libcalhours.core.localization import NEXT
from libcalhours.core.localization import PREVIOUS
from libcalhours.core.localization import Translate
from libcalhours.core.localization import default_translate
from libcalhours.models import DisplayDay


DAYS_PER_BLOCK = 7


def format_weekday(day: DisplayDay) -> str:
    """Long weekday name, e.g. `Monday`."""

    return day.date.strftime("%A")


def format_month_day(day: DisplayDay) -> str:
    """Abbreviated month and unpadded day, e.g. `Oct 5`."""

    return f"{day.date:%b} {day.date.day}"


def render_row(day: DisplayDay) -> str:
    row_class = ' class="today"' if day.is_today else ""
    return (
        f"<tr{row_class}>"
        f"<td>{escape(format_weekday(day))}</td>"
        f"<td>{escape(format_month_day(day))}</td>"
        f"<td>{escape(day.text)}</td>"
        "</tr>"
    )


def render_table(
    days: Sequence[DisplayDay],
    num_weeks: int,
    *,
    translate: Translate = default_translate,
) -> str:
    """Render display days as an HTML table fragment.

    The first seven rows are visible; every following block of seven rows
    goes into its own hidden `tbody`. A previous/next footer is added when
    more than one week is shown.
    """

    parts = ['<table class="wplibcalhours">']
    parts.append(
        f'<thead><tr><th colspan="3">{escape(translate(HOURS))}</th></tr></thead>'
    )
    parts.append("<tbody>")
    for index, day in enumerate(days):
        if index and index % DAYS_PER_BLOCK == 0:
            parts.append('</tbody><tbody class="hidden">')
        parts.append(render_row(day))
    parts.append("</tbody>")

    if num_weeks > 1:
        parts.append('<tfoot><tr><td colspan="3">')
        parts.append(f'<a class="prev hidden">&laquo; {escape(translate(PREVIOUS))}</a>')
        parts.append(f'<a class="next">{escape(translate(NEXT))} &raquo;</a>')
        parts.append("</td></tr></tfoot>")

    parts.append("</table>")
    return "".join(parts)
