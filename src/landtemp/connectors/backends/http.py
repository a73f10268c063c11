"""HTTP backend used to fetch the temperature dataset.

Provides a single-request helper, an optional retry wrapper for transient
statuses, and a JSON convenience built on top of both.
"""

# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json
import logging
import time
from typing import Any

RETRY_STATUS = {429, 500, 502, 503, 504}

logger = logging.getLogger(__name__)

_REQUESTS: Any | None = None


class HttpRequestError(RuntimeError):
    """Raised when a request cannot be completed or returns an error status."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def _import_requests():  # pragma: no cover - import guard
    """Import and cache the `requests` module lazily."""
    global _REQUESTS
    if _REQUESTS is not None:
        return _REQUESTS
    try:
        import requests as _req  # type: ignore

        _REQUESTS = _req
        return _REQUESTS
    except Exception as exc:  # pragma: no cover - runtime error path
        raise RuntimeError(
            "The 'requests' package is required to fetch datasets. Install it with 'pip install requests'"
        ) from exc


def _parse_retry_after(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def request_once(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 60,
) -> tuple[int, dict[str, str], bytes]:
    requests = _import_requests()
    try:
        resp = requests.request(
            method.upper(),
            url,
            headers=headers or {},
            params=params or {},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise HttpRequestError(f"{method.upper()} {url} failed: {exc}") from exc
    status = resp.status_code
    # Flatten headers to str->str
    headers_out: dict[str, str] = {k: v for k, v in resp.headers.items()}
    content = resp.content or b""
    return status, headers_out, content


def request_with_retries(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    timeout: float = 60,
    max_retries: int = 0,
    retry_backoff: float = 0.5,
) -> tuple[int, dict[str, str], bytes]:
    attempt = 0
    while True:
        status, resp_headers, content = request_once(
            method, url, headers=headers, params=params, timeout=timeout
        )
        if status not in RETRY_STATUS or attempt >= max_retries:
            return status, resp_headers, content
        delay = retry_backoff * (2**attempt)
        if "Retry-After" in resp_headers:
            delay = max(delay, _parse_retry_after(resp_headers["Retry-After"]))
        logger.debug("HTTP %s from %s; retrying in %.2fs", status, url, delay)
        time.sleep(delay)
        attempt += 1


def fetch_json(
    url: str,
    *,
    timeout: float = 60,
    max_retries: int = 0,
    retry_backoff: float = 0.5,
) -> object:
    """GET ``url`` and decode the body as JSON.

    Raises ``HttpRequestError`` for transport failures and statuses >= 400.
    JSON decoding errors propagate as ``ValueError``.
    """
    status, _headers, content = request_with_retries(
        "GET",
        url,
        headers={"Accept": "application/json"},
        timeout=timeout,
        max_retries=max_retries,
        retry_backoff=retry_backoff,
    )
    if status >= 400:
        raise HttpRequestError(f"GET {url} returned HTTP {status}", status=status)
    logger.debug("Fetched %d bytes from %s", len(content), url)
    return json.loads(content.decode("utf-8"))
