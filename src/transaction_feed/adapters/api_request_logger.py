"""Utility for logging backend requests when AppConfig.log_requests is enabled."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _format_payload(payload: Any) -> str:
    """Format a response payload summary for logging."""
    if isinstance(payload, list):
        return f"list of {len(payload)} item(s)"
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return f"page of {len(payload['data'])} item(s), nextPage={payload.get('nextPage')}"
    try:
        return json.dumps(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    response: Any = None,
    *,
    enabled: bool = False,
) -> None:
    """Log backend request details if request logging is enabled.

    Args:
        method: HTTP method (GET, POST, etc.) or "FETCH" for in-process backends.
        url: Request URL or endpoint name.
        params: Query parameters (optional).
        response: Response payload (optional, logged as a summary).
        enabled: Whether request logging is on (from AppConfig.log_requests).
    """
    if not enabled:
        return

    log_parts = [f"{method} {_build_url_with_params(url, params)}"]
    if response is not None:
        log_parts.append(f"Response: {_format_payload(response)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
