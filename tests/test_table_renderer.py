from datetime import date
from datetime import timedelta

from libcalhours.models import DisplayDay
from libcalhours.services.table_renderer import render_row
from libcalhours.services.table_renderer import render_table


def make_days(count: int, start: date = date(2026, 10, 19)) -> list[DisplayDay]:
    return [
        DisplayDay(
            date=start + timedelta(days=offset),
            text="9am - 5pm",
            is_today=offset == 0,
        )
        for offset in range(count)
    ]


def rows_per_body(html: str) -> list[int]:
    chunks = html.split("<tbody")[1:]
    return [chunk.split("</tbody>")[0].count("<tr") for chunk in chunks]


def test_render_table_splits_rows_into_weekly_bodies() -> None:
    html = render_table(make_days(21), num_weeks=3)

    assert html.count('<tbody class="hidden">') == 2
    assert html.count("<tbody>") == 1
    assert rows_per_body(html) == [7, 7, 7]


def test_render_table_first_body_is_visible() -> None:
    html = render_table(make_days(21), num_weeks=3)

    first_body = html.index("<tbody>")
    first_hidden = html.index('<tbody class="hidden">')
    assert first_body < first_hidden
    assert html[first_body:first_hidden].count("<tr") == 7


def test_render_table_marks_today_row() -> None:
    html = render_table(make_days(7), num_weeks=1)

    assert html.count('<tr class="today">') == 1
    assert '<tbody><tr class="today"><td>Monday</td>' in html


def test_render_table_header_spans_all_columns() -> None:
    html = render_table(make_days(7), num_weeks=1)

    assert html.startswith('<table class="wplibcalhours">')
    assert '<thead><tr><th colspan="3">Hours</th></tr></thead>' in html
    assert html.endswith("</table>")


def test_render_table_omits_footer_for_single_week() -> None:
    html = render_table(make_days(7), num_weeks=1)

    assert "<tfoot>" not in html
    assert "next" not in html


def test_render_table_includes_paging_footer_for_multiple_weeks() -> None:
    html = render_table(make_days(14), num_weeks=2)

    assert (
        '<tfoot><tr><td colspan="3">'
        '<a class="prev hidden">&laquo; previous</a>'
        '<a class="next">next &raquo;</a>'
        "</td></tr></tfoot>"
    ) in html


def test_render_table_uses_translate_for_labels() -> None:
    translations = {"Hours": "Horaires", "previous": "précédent", "next": "suivant"}

    html = render_table(
        make_days(14), num_weeks=2, translate=lambda text: translations.get(text, text)
    )

    assert ">Horaires</th>" in html
    assert "&laquo; précédent</a>" in html
    assert "suivant &raquo;</a>" in html


def test_render_row_formats_weekday_and_month_day() -> None:
    day = DisplayDay(date=date(2026, 10, 5), text="closed")

    assert render_row(day) == (
        "<tr><td>Monday</td><td>Oct 5</td><td>closed</td></tr>"
    )


def test_render_row_escapes_text() -> None:
    day = DisplayDay(date=date(2026, 10, 5), text="<b>9am</b> & later")

    assert "<td>&lt;b&gt;9am&lt;/b&gt; &amp; later</td>" in render_row(day)
