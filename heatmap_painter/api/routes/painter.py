from fastapi import APIRouter
from fastapi import HTTPException
from fastapi import Response

from heatmap_painter.api.schemas.painter import ExportRequest
from heatmap_painter.api.schemas.painter import FontResponse
from heatmap_painter.api.schemas.painter import PreviewResponse
from heatmap_painter.api.schemas.painter import RenderRequest
from heatmap_painter.api.schemas.painter import RepoRequest
from heatmap_painter.clients.archive_client import ArchiveServiceError
from heatmap_painter.engine.config import RenderConfig
from heatmap_painter.engine.config import TimePolicy
from heatmap_painter.engine.font import DEFAULT_PALETTE
from heatmap_painter.engine.font import GLYPH_HEIGHT
from heatmap_painter.engine.font import GLYPH_WIDTH
from heatmap_painter.engine.glyphs import supported_characters
from heatmap_painter.services.painter_service import apply_alignment
from heatmap_painter.services.painter_service import build_preview
from heatmap_painter.services.painter_service import build_repository_request
from heatmap_painter.services.painter_service import export_repository
from heatmap_painter.settings import Settings


router = APIRouter()


def to_render_config(payload: RenderRequest) -> RenderConfig:
    config = RenderConfig(
        year=payload.year,
        week_start=payload.week_start,
        text=payload.text,
        spacing=payload.spacing,
        x_offset_weeks=payload.x_offset_weeks,
        y_offset_days=payload.y_offset_days,
        invert=payload.invert,
        noise=payload.noise,
        intensity=payload.intensity,
    )
    return apply_alignment(config, payload.align)


def to_repository_request(payload: ExportRequest) -> dict[str, object]:
    return build_repository_request(
        to_render_config(payload),
        repo_name=payload.repo_name,
        user=payload.user,
        email=payload.email,
        time_policy=TimePolicy(mode=payload.time_mode, custom_time=payload.custom_time),
        count_scale=payload.count_scale,
    )


@router.get("/")
async def root() -> dict[str, str]:
    """Return a basic service greeting."""

    return {"message": "Hello World"}


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/font", response_model=FontResponse)
def get_font() -> dict[str, object]:
    """List the characters the 5x7 font can draw."""

    return {
        "characters": supported_characters(),
        "glyph_width": GLYPH_WIDTH,
        "glyph_height": GLYPH_HEIGHT,
        "palette": DEFAULT_PALETTE,
    }


@router.post("/preview", response_model=PreviewResponse)
def preview(payload: RenderRequest) -> dict[str, object]:
    """Return the rendered contribution grid with its dates and palette."""

    return build_preview(to_render_config(payload))


@router.post("/contributions", response_model=RepoRequest, response_model_by_alias=True)
def contributions(payload: ExportRequest) -> dict[str, object]:
    """Return the archive service payload without calling the service."""

    return to_repository_request(payload)


@router.post("/generate-repo")
def generate_repository(payload: ExportRequest) -> Response:
    """Generate the repository archive and return it as a download."""

    settings = Settings()
    repo_request = to_repository_request(payload)

    try:
        filename, archive = export_repository(
            repo_request,
            base_url=settings.archive_service_url,
            timeout=settings.archive_timeout_seconds,
        )
    except ArchiveServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
