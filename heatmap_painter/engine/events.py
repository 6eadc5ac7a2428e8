import random
from datetime import date
from enum import Enum

from heatmap_painter.engine.calendar_grid import format_iso_date
from heatmap_painter.engine.config import MAX_LEVEL
from heatmap_painter.engine.config import RandomSource
from heatmap_painter.engine.config import TimePolicy


class CountScale(str, Enum):
    """How a cell level becomes a contribution count."""

    LEVEL = "level"
    NORMALIZED = "normalized"


def scale_count(level: int, count_scale: CountScale) -> int | float:
    if count_scale == CountScale.NORMALIZED:
        return level / MAX_LEVEL
    return level


def random_time(rng: RandomSource) -> str:
    hour = rng.randint(0, 23)
    minute = rng.randint(0, 59)
    second = rng.randint(0, 59)
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def synthesize_contributions(
    grid: list[list[int]],
    dates: list[list[date]],
    time_policy: TimePolicy,
    *,
    count_scale: CountScale,
    rng: RandomSource | None = None,
) -> list[dict[str, str | int | float]]:
    """Turn every lit cell into a dated contribution, in week-then-day order.

    The grid is expected to be scoped to its year already; no in-year
    filtering happens here.
    """

    rng = rng or random.Random()
    contributions: list[dict[str, str | int | float]] = []

    for week, column in enumerate(grid):
        for day, level in enumerate(column):
            if level <= 0:
                continue

            if time_policy.mode == "random":
                time = random_time(rng)
            else:
                time = time_policy.custom_time

            contributions.append(
                {
                    "date": format_iso_date(dates[week][day]),
                    "count": scale_count(level, count_scale),
                    "time": time,
                }
            )

    return contributions


def build_repo_request(
    repo_name: str,
    user: str,
    email: str,
    contributions: list[dict[str, str | int | float]],
) -> dict[str, object]:
    return {
        "repoName": repo_name,
        "user": user,
        "email": email,
        "total": len(contributions),
        "contributions": contributions,
    }
