from collections import defaultdict
from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Simple in-memory rate limiter for a single expensive route."""

    def __init__(
        self,
        app,
        requests_per_window: int = 5,
        window_seconds: int = 60,
        method: str = "POST",
        path: str = "/generate-repo",
    ) -> None:
        super().__init__(app)
        # Invalid config values (0 or negatives) fall back to the minimum.
        self.max_requests = max(1, requests_per_window)
        self.window_seconds = max(1, window_seconds)
        self.method = method.upper()
        self.path = path
        # One queue of request timestamps per client key.
        self._ip_buckets: dict[str, deque[float]] = defaultdict(deque)
        self._lock = RLock()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method != self.method or request.url.path != self.path:
            return await call_next(request)

        ip = self._client_ip(request)
        now = monotonic()

        with self._lock:
            self._evict_expired(now)
            bucket = self._ip_buckets[ip]

            if len(bucket) >= self.max_requests:
                retry_after = max(1, int(self.window_seconds - (now - bucket[0])))
                return JSONResponse(
                    status_code=429,
                    content={"detail": "Too Many Requests"},
                    headers={"Retry-After": str(retry_after)},
                )

            bucket.append(now)

        return await call_next(request)

    def _evict_expired(self, now: float) -> None:
        """Drop timestamps outside the window and forget idle clients."""

        cutoff = now - self.window_seconds
        for key in list(self._ip_buckets):
            bucket = self._ip_buckets[key]
            while bucket and bucket[0] <= cutoff:
                bucket.popleft()
            if not bucket:
                del self._ip_buckets[key]

    @staticmethod
    def _client_ip(request: Request) -> str:
        # Reverse proxies usually set X-Forwarded-For.
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip() or "unknown"

        if request.client and request.client.host:
            return request.client.host

        return "unknown"
