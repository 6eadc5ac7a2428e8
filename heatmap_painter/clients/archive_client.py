import logging
from collections.abc import Mapping
from typing import Any

import httpx


logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to generate repository"


class ArchiveServiceError(Exception):
    """Raised when the archive service cannot produce a repository archive."""


def _error_detail(response: httpx.Response) -> str:
    try:
        payload: Any = response.json()
    except ValueError:
        return DEFAULT_ERROR_MESSAGE

    if isinstance(payload, Mapping):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail:
            return detail
    return DEFAULT_ERROR_MESSAGE


def generate_repo(
    request: Mapping[str, object],
    base_url: str,
    timeout: float = 300.0,
) -> bytes:
    """Submit a repository request and return the archive bytes.

    Raises:
        ArchiveServiceError: On transport failure or a non-success response.
            The message is the service's ``detail`` field when present.
    """

    url = f"{base_url.rstrip('/')}/generate-repo"

    try:
        response = httpx.post(
            url,
            json=dict(request),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except httpx.HTTPError as exc:
        logger.warning("Archive service request to %s failed: %s", url, exc)
        raise ArchiveServiceError(DEFAULT_ERROR_MESSAGE) from exc

    if not response.is_success:
        detail = _error_detail(response)
        logger.warning(
            "Archive service returned %s: %s", response.status_code, detail
        )
        raise ArchiveServiceError(detail)

    return response.content
