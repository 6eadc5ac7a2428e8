from typing import Literal
from typing import Protocol

from pydantic import BaseModel
from pydantic import ConfigDict

from heatmap_painter.engine.calendar_grid import WeekStart


MAX_LEVEL = 4


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the engine."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


class RenderConfig(BaseModel):
    """Immutable parameter set for one render of the contribution grid."""

    model_config = ConfigDict(frozen=True)

    year: int
    week_start: WeekStart = "sun"
    text: str = ""
    spacing: int = 1
    x_offset_weeks: int = 1
    y_offset_days: int = 0
    invert: bool = False
    noise: float = 0.0
    intensity: int = MAX_LEVEL


class TimePolicy(BaseModel):
    """How commit times are assigned to synthesized contributions."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["random", "custom"] = "random"
    custom_time: str = "12:00:00"
