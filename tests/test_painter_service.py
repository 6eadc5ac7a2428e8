import random

from heatmap_painter.engine.config import RenderConfig
from heatmap_painter.engine.config import TimePolicy
from heatmap_painter.engine.events import CountScale
from heatmap_painter.services.painter_service import apply_alignment
from heatmap_painter.services.painter_service import build_preview
from heatmap_painter.services.painter_service import build_repository_request
from heatmap_painter.services.painter_service import export_repository


def test_apply_alignment_right_uses_grid_width() -> None:
    config = RenderConfig(year=2024, text="AB", spacing=1)

    aligned = apply_alignment(config, "right")

    assert aligned.x_offset_weeks == 53 - 11 - 1
    assert config.x_offset_weeks == 1


def test_apply_alignment_none_keeps_config() -> None:
    config = RenderConfig(year=2024, text="AB", x_offset_weeks=7)

    assert apply_alignment(config, None) is config


def test_preview_total_matches_lit_cells() -> None:
    preview = build_preview(RenderConfig(year=2024, text="A"))

    assert preview["total"] == 18
    assert preview["weeks"] == len(preview["grid"]) == len(preview["dates"])


def test_seeded_random_pipeline_is_reproducible() -> None:
    config = RenderConfig(year=2023, text="OK", noise=0.2)
    policy = TimePolicy(mode="random")

    first = build_repository_request(
        config, "art", "octocat", "o@example.com", policy, CountScale.LEVEL,
        rng=random.Random(11),
    )
    second = build_repository_request(
        config, "art", "octocat", "o@example.com", policy, CountScale.LEVEL,
        rng=random.Random(11),
    )

    assert first == second
    assert first["total"] == len(first["contributions"])


def test_export_repository_names_archive_after_repo(monkeypatch) -> None:
    monkeypatch.setattr(
        "heatmap_painter.services.painter_service.generate_repo",
        lambda request, base_url, timeout: b"zip-bytes",
    )
    request = {"repoName": "art", "total": 0, "contributions": []}

    filename, archive = export_repository(request, "http://archive.local", 1.0)

    assert filename == "art.zip"
    assert archive == b"zip-bytes"
