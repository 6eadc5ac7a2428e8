import random
from datetime import date
from typing import Literal

from heatmap_painter.engine.calendar_grid import DAYS_PER_WEEK
from heatmap_painter.engine.calendar_grid import in_year
from heatmap_painter.engine.config import MAX_LEVEL
from heatmap_painter.engine.config import RandomSource
from heatmap_painter.engine.config import RenderConfig
from heatmap_painter.engine.glyphs import rasterize_text


Alignment = Literal["left", "center", "right"]


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def make_empty_grid(weeks: int, days: int = DAYS_PER_WEEK) -> list[list[int]]:
    return [[0] * days for _ in range(weeks)]


def aligned_x_offset(weeks: int, width: int, align: Alignment) -> int:
    """Week offset that places a ``width``-column bitmap left, center or right."""

    if align == "left":
        return 1
    if align == "center":
        return (weeks - width) // 2
    return weeks - width - 1


def count_lit_cells(grid: list[list[int]]) -> int:
    return sum(1 for column in grid for level in column if level > 0)


def render_to_grid(
    config: RenderConfig,
    dates: list[list[date]],
    rng: RandomSource | None = None,
) -> list[list[int]]:
    """Composite ``config.text`` onto the calendar and return level 0..4 cells.

    Cells outside ``config.year`` are never painted. With ``noise == 0`` the
    result is fully deterministic and ``rng`` is never consulted.
    """

    rng = rng or random.Random()
    weeks = len(dates)
    grid = make_empty_grid(weeks)
    bitmap = rasterize_text(config.text, config.spacing)

    height = len(bitmap)
    width = len(bitmap[0]) if height else 0
    level_on = int(clamp(config.intensity, 1, MAX_LEVEL))
    noise = clamp(config.noise, 0.0, 1.0)
    x_offset = config.x_offset_weeks
    y_offset = config.y_offset_days

    if config.invert:
        for week in range(weeks):
            for day in range(DAYS_PER_WEEK):
                if in_year(dates[week][day], config.year):
                    grid[week][day] = level_on

    # Only bitmap columns that land on a week column are visited.
    first_column = max(0, -x_offset)
    last_column = min(width, weeks - x_offset)

    for by in range(height):
        day = y_offset + by
        if day < 0 or day >= DAYS_PER_WEEK:
            continue

        for bx in range(first_column, last_column):
            on = bitmap[by][bx] == 1
            lit = not on if config.invert else on

            week = x_offset + bx
            if not in_year(dates[week][day], config.year):
                continue

            level = 0
            if lit:
                level = level_on
            elif noise > 0 and rng.random() < noise:
                level = 1

            grid[week][day] = int(clamp(level, 0, MAX_LEVEL))

    if noise > 0:
        background_level = max(0, level_on - 1) if config.invert else 1
        for week in range(weeks):
            for day in range(DAYS_PER_WEEK):
                if not in_year(dates[week][day], config.year):
                    continue

                in_text_area = (
                    x_offset <= week < x_offset + width
                    and y_offset <= day < y_offset + height
                )
                if not in_text_area and rng.random() < noise:
                    grid[week][day] = background_level

    return grid
