"""Opt-in logging of outgoing routing requests (LRM_LOG_REQUESTS=true)."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "LRM_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check whether request logging is switched on in the environment."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def build_request_url(url: str, params: dict[str, Any] | None = None) -> str:
    """Append sorted query parameters to a URL."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log an outgoing request line when request logging is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL without query string.
        params: Query parameters (optional).
    """
    if not should_log_requests():
        return
    logger.info(f"API Request: {method} {build_request_url(url, params)}")
