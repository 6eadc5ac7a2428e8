from fastapi import FastAPI

from heatmap_painter.api.routes.painter import router
from heatmap_painter.core.middleware import RateLimitMiddleware
from heatmap_painter.core.observability import configure_logging
from heatmap_painter.core.observability import init_sentry
from heatmap_painter.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with observability and rate limiting."""

    settings = Settings()
    configure_logging(settings)
    init_sentry(settings)

    application = FastAPI(title="Heatmap Painter")
    application.add_middleware(
        RateLimitMiddleware,
        requests_per_window=settings.rate_limit_per_minute,
        window_seconds=settings.rate_limit_window_seconds,
        method="POST",
        path="/generate-repo",
    )
    application.include_router(router)
    return application


app = create_app()
