# ghsync/core/http.py
"""
HTTP client factory for the GitHub API and outbound notifications.

Usage:
    from ghsync.core.http import create_api_client, raise_for_status

    with create_api_client("https://api.github.com", api_key=token) as client:
        response = client.get("/repos/octocat/blog/git/ref/heads/master")
        raise_for_status(response, provider="github", endpoint="/git/ref")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ghsync.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {
    "Accept": "application/vnd.github+json",
    "User-Agent": "ghsync",
}


@dataclass
class APIError(Exception):
    """
    Structured API error with details.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if available)
        provider: API provider name (e.g., "github")
        endpoint: API endpoint that failed
        details: Additional error details from the API response
    """

    message: str
    status_code: Optional[int] = None
    provider: Optional[str] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.details:
            parts.append(f"- {self.details}")

        return " ".join(parts)


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    auth_scheme: str = "Bearer",
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client.

    Args:
        base_url: Base URL for the API
        api_key: Token sent as "Authorization: <scheme> <token>" (optional)
        timeout: Request timeout in seconds
        headers: Additional headers to include
        **kwargs: Passed to httpx.Client (e.g. transport= in tests)
    """
    final_headers = dict(DEFAULT_HEADERS)

    if api_key:
        final_headers["Authorization"] = f"{auth_scheme} {api_key}"

    if headers:
        final_headers.update(headers)

    timeout = DEFAULT_TIMEOUT if timeout is None else timeout

    client = httpx.Client(
        base_url=base_url,
        headers=final_headers,
        timeout=timeout,
        **kwargs,
    )

    logger.debug(f"Created HTTP client for {base_url} (timeout={timeout}s)")

    return client


def handle_api_error(exc: Exception, provider: str = "unknown", endpoint: str = "") -> APIError:
    """Convert an httpx exception to a structured APIError."""
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code

        details = None
        try:
            error_data = exc.response.json()
            if isinstance(error_data, dict):
                details = error_data.get("message")
        except ValueError:
            details = exc.response.text[:200] if exc.response.text else None

        if status_code in (401, 403):
            message = f"{provider} authentication failed"
        elif status_code == 404:
            message = f"{provider} resource not found"
        elif status_code == 429:
            message = f"{provider} rate limit exceeded"
        else:
            message = f"{provider} API request failed"

        return APIError(
            message=message,
            status_code=status_code,
            provider=provider,
            endpoint=endpoint,
            details=details,
        )

    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            message=f"{provider} request timed out",
            provider=provider,
            endpoint=endpoint,
            details="Consider increasing the timeout for this operation",
        )

    if isinstance(exc, httpx.ConnectError):
        return APIError(
            message=f"Failed to connect to {provider}",
            provider=provider,
            endpoint=endpoint,
            details=str(exc),
        )

    return APIError(
        message=f"{provider} request failed: {exc}",
        provider=provider,
        endpoint=endpoint,
    )


def raise_for_status(response: httpx.Response, provider: str = "unknown", endpoint: str = "") -> None:
    """
    Check response status and raise APIError if failed.

    Raises:
        APIError: If the response indicates an error
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, provider=provider, endpoint=endpoint) from exc


__all__ = [
    "APIError",
    "create_api_client",
    "handle_api_error",
    "raise_for_status",
]
