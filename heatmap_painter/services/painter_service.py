import logging

from heatmap_painter.clients.archive_client import generate_repo
from heatmap_painter.engine.calendar_grid import build_year_date_grid
from heatmap_painter.engine.compositor import Alignment
from heatmap_painter.engine.compositor import aligned_x_offset
from heatmap_painter.engine.compositor import count_lit_cells
from heatmap_painter.engine.compositor import render_to_grid
from heatmap_painter.engine.config import RandomSource
from heatmap_painter.engine.config import RenderConfig
from heatmap_painter.engine.config import TimePolicy
from heatmap_painter.engine.events import CountScale
from heatmap_painter.engine.events import build_repo_request
from heatmap_painter.engine.events import synthesize_contributions
from heatmap_painter.engine.font import DEFAULT_PALETTE
from heatmap_painter.engine.glyphs import text_width


logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = "zip"


def apply_alignment(config: RenderConfig, align: Alignment | None) -> RenderConfig:
    """Return ``config`` with its week offset snapped to ``align``, if given."""

    if align is None:
        return config

    weeks = build_year_date_grid(config.year, config.week_start).weeks
    width = text_width(config.text, config.spacing)
    return config.model_copy(
        update={"x_offset_weeks": aligned_x_offset(weeks, width, align)}
    )


def build_preview(
    config: RenderConfig, rng: RandomSource | None = None
) -> dict[str, object]:
    """Render the grid and return the payload consumed by a calendar display."""

    date_grid = build_year_date_grid(config.year, config.week_start)
    grid = render_to_grid(config, date_grid.dates, rng=rng)

    return {
        "year": config.year,
        "week_start": config.week_start,
        "grid_start": date_grid.grid_start,
        "start_date": date_grid.start_date,
        "end_date": date_grid.end_date,
        "weeks": date_grid.weeks,
        "x_offset_weeks": config.x_offset_weeks,
        "text_width": text_width(config.text, config.spacing),
        "total": count_lit_cells(grid),
        "dates": date_grid.dates,
        "grid": grid,
        "palette": DEFAULT_PALETTE,
    }


def build_repository_request(
    config: RenderConfig,
    repo_name: str,
    user: str,
    email: str,
    time_policy: TimePolicy,
    count_scale: CountScale,
    rng: RandomSource | None = None,
) -> dict[str, object]:
    """Run the full pipeline from chart settings to an archive service payload."""

    date_grid = build_year_date_grid(config.year, config.week_start)
    grid = render_to_grid(config, date_grid.dates, rng=rng)
    contributions = synthesize_contributions(
        grid,
        date_grid.dates,
        time_policy,
        count_scale=count_scale,
        rng=rng,
    )
    return build_repo_request(repo_name, user, email, contributions)


def export_repository(
    repo_request: dict[str, object],
    base_url: str,
    timeout: float,
) -> tuple[str, bytes]:
    """Send ``repo_request`` to the archive service.

    Returns the download file name and the archive bytes. Errors from the
    service propagate as ``ArchiveServiceError``.
    """

    repo_name = repo_request["repoName"]
    logger.info(
        "Requesting archive for %s with %s contributions",
        repo_name,
        repo_request["total"],
    )
    archive = generate_repo(repo_request, base_url=base_url, timeout=timeout)
    logger.info("Received %d byte archive for %s", len(archive), repo_name)
    return f"{repo_name}.{ARCHIVE_EXTENSION}", archive
