from fastapi.testclient import TestClient

from heatmap_painter.core.middleware import RateLimitMiddleware
from heatmap_painter.main import create_app


def fake_generate_repo(request, base_url: str, timeout: float) -> bytes:
    return b"PK\x03\x04"


def test_generate_repo_rate_limited_after_threshold(monkeypatch) -> None:
    """Rate limiter blocks repeated archive generation requests."""

    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "60")
    monkeypatch.setattr(
        "heatmap_painter.services.painter_service.generate_repo", fake_generate_repo
    )
    app = create_app()
    client = TestClient(app)

    headers = {"X-Forwarded-For": "203.0.113.10"}
    payload = {"year": 2024, "text": "HI"}

    first = client.post("/generate-repo", json=payload, headers=headers)
    second = client.post("/generate-repo", json=payload, headers=headers)

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.headers["Retry-After"]
    assert second.json() == {"detail": "Too Many Requests"}


def test_rate_limit_is_tracked_per_client(monkeypatch) -> None:
    """Each forwarded client address gets its own bucket."""

    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    monkeypatch.setattr(
        "heatmap_painter.services.painter_service.generate_repo", fake_generate_repo
    )
    client = TestClient(create_app())

    first = client.post(
        "/generate-repo", json={"year": 2024}, headers={"X-Forwarded-For": "203.0.113.1"}
    )
    second = client.post(
        "/generate-repo", json={"year": 2024}, headers={"X-Forwarded-For": "203.0.113.2"}
    )

    assert first.status_code == 200
    assert second.status_code == 200


def test_preview_routes_not_rate_limited(monkeypatch) -> None:
    """Rate limiter does not affect routes other than /generate-repo."""

    monkeypatch.setenv("RATE_LIMIT_PER_MINUTE", "1")
    monkeypatch.setenv("RATE_LIMIT_WINDOW_SECONDS", "60")
    app = create_app()
    client = TestClient(app)

    first = client.post("/preview", json={"year": 2024})
    second = client.post("/preview", json={"year": 2024})

    assert first.status_code == 200
    assert second.status_code == 200


def test_idle_client_buckets_are_dropped() -> None:
    """Clients whose requests have all left the window are forgotten."""

    limiter = RateLimitMiddleware(None, requests_per_window=1, window_seconds=60)
    limiter._ip_buckets["203.0.113.1"].append(100.0)
    limiter._ip_buckets["203.0.113.2"].append(150.0)

    limiter._evict_expired(now=170.0)

    assert set(limiter._ip_buckets) == {"203.0.113.2"}
