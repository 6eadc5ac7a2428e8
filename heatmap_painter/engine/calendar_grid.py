from dataclasses import dataclass
from datetime import date
from datetime import timedelta
from typing import Literal


WeekStart = Literal["sun", "mon"]

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class YearDateGrid:
    """Calendar cells for one year, indexed as ``dates[week][day]``.

    ``grid_start`` may fall in the previous year and the last week may run
    into the next one; use ``in_year`` to tell padding cells apart.
    """

    year: int
    week_start: WeekStart
    grid_start: date
    start_date: date
    end_date: date
    weeks: int
    dates: list[list[date]]


def weekday_index(day: date, week_start: WeekStart) -> int:
    """Return the row of ``day`` in a week column, 0 being the first row."""

    if week_start == "sun":
        return (day.weekday() + 1) % 7
    return day.weekday()


def start_of_grid(start_date: date, week_start: WeekStart) -> date:
    return start_date - timedelta(days=weekday_index(start_date, week_start))


def build_year_date_grid(year: int, week_start: WeekStart = "sun") -> YearDateGrid:
    """Build the week-by-day date matrix covering every day of ``year``.

    Supported years are 2..9998; outside that range the padding cells fall
    beyond ``datetime.date`` and ``OverflowError`` is raised.
    """

    start_date = date(year, 1, 1)
    end_date = date(year, 12, 31)

    grid_start = start_of_grid(start_date, week_start)
    total_days = (end_date - grid_start).days + 1
    weeks = -(-total_days // DAYS_PER_WEEK)

    dates = [
        [
            grid_start + timedelta(days=week * DAYS_PER_WEEK + day)
            for day in range(DAYS_PER_WEEK)
        ]
        for week in range(weeks)
    ]

    return YearDateGrid(
        year=year,
        week_start=week_start,
        grid_start=grid_start,
        start_date=start_date,
        end_date=end_date,
        weeks=weeks,
        dates=dates,
    )


def in_year(day: date, year: int) -> bool:
    return day.year == year


def format_iso_date(day: date) -> str:
    return day.isoformat()
