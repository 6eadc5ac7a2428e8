from datetime import date
from datetime import datetime
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from heatmap_painter.engine.compositor import Alignment
from heatmap_painter.engine.config import MAX_LEVEL
from heatmap_painter.engine.events import CountScale
from heatmap_painter.engine.glyphs import MAX_SPACING


def current_year() -> int:
    return date.today().year


class RenderRequest(BaseModel):
    """Chart settings for one render of the contribution grid."""

    # Every grid cell of these years fits in ``datetime.date``.
    year: int = Field(default_factory=current_year, ge=2, le=9998)
    week_start: Literal["sun", "mon"] = "sun"
    text: str = Field(default="AB12", max_length=200)
    spacing: int = Field(default=1, ge=0, le=MAX_SPACING)
    x_offset_weeks: int = 1
    y_offset_days: int = 0
    align: Alignment | None = None
    invert: bool = False
    noise: float = 0.0
    intensity: int = MAX_LEVEL


class ExportRequest(RenderRequest):
    """Chart settings plus the repository identity and commit time policy."""

    repo_name: str = Field(default="my-contributions-repo", min_length=1, max_length=100)
    user: str = Field(default="username", min_length=1, max_length=100)
    email: str = Field(default="user@example.com", min_length=1, max_length=255)
    time_mode: Literal["random", "custom"] = "random"
    custom_time: str = "12:00:00"
    count_scale: CountScale = CountScale.LEVEL

    @field_validator("repo_name", "user", "email")
    @classmethod
    def strip_identity(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("value cannot be empty")
        return value

    @field_validator("custom_time")
    @classmethod
    def normalize_custom_time(cls, value: str) -> str:
        """Accept ``HH:MM`` or ``HH:MM:SS`` and return ``HH:MM:SS``."""

        for time_format in ("%H:%M:%S", "%H:%M"):
            try:
                parsed = datetime.strptime(value.strip(), time_format)
            except ValueError:
                continue
            return parsed.strftime("%H:%M:%S")
        raise ValueError("custom_time must be HH:MM:SS")


class Contribution(BaseModel):
    """Single synthesized commit day."""

    date: str
    count: int | float
    time: str


class RepoRequest(BaseModel):
    """Payload accepted by the archive service's ``/generate-repo``."""

    model_config = ConfigDict(populate_by_name=True)

    repo_name: str = Field(alias="repoName")
    user: str
    email: str
    total: int
    contributions: list[Contribution]


class Palette(BaseModel):
    name: str
    colors: list[str]


class PreviewResponse(BaseModel):
    """Everything a display needs to draw the calendar."""

    year: int
    week_start: Literal["sun", "mon"]
    grid_start: date
    start_date: date
    end_date: date
    weeks: int
    x_offset_weeks: int
    text_width: int
    total: int
    dates: list[list[date]]
    grid: list[list[int]]
    palette: Palette


class FontResponse(BaseModel):
    characters: list[str]
    glyph_width: int
    glyph_height: int
    palette: Palette
