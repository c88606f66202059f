# HttpFunctions.py
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import requests

from itemgroups.errors import FetchConfigError, NetworkError, ParseError

# Fixed feed location; ITEMS_URL may point elsewhere for local testing.
DEFAULT_ITEMS_URL = "https://fetch-hiring.s3.amazonaws.com/hiring.json"

# Timeouts only. A failed read is reported once, never retried.
CONNECT_TIMEOUT_S = 10
READ_TIMEOUT_S = 30

log = logging.getLogger("itemgroups.http")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        val = float(raw)
    except ValueError:
        raise FetchConfigError(f"Invalid {name} value: expected a number of seconds, got '{raw}'") from None
    if val <= 0:
        raise FetchConfigError(f"Invalid {name} value: must be greater than zero, got '{raw}'")
    return val


def _request_params(url: Optional[str] = None) -> Dict[str, Any]:
    """
    Build request parameters from environment variables:
      ITEMS_URL, ITEMS_CONNECT_TIMEOUT_S, ITEMS_READ_TIMEOUT_S
    Every variable is optional; defaults reproduce the fixed feed.
    An explicit url argument wins over ITEMS_URL.
    """
    url = (url or os.getenv("ITEMS_URL") or DEFAULT_ITEMS_URL).strip()
    if not url.lower().startswith(("http://", "https://")):
        raise FetchConfigError(f"ITEMS_URL must be an http(s) URL, got '{url}'")
    return {
        "url": url,
        "timeout": (
            _env_float("ITEMS_CONNECT_TIMEOUT_S", CONNECT_TIMEOUT_S),
            _env_float("ITEMS_READ_TIMEOUT_S", READ_TIMEOUT_S),
        ),
    }


def fetch_items_text(url: Optional[str] = None, session: Optional[requests.Session] = None) -> str:
    """
    Perform one unauthenticated GET and return the body as text.

    Raises NetworkError for DNS failures, timeouts, resets and non-2xx
    statuses; the requests exception is kept as __cause__.
    """
    params = _request_params(url)
    getter = session.get if session is not None else requests.get

    log.info("Fetching items from %s", params["url"])
    try:
        response = getter(params["url"], timeout=params["timeout"])
        response.raise_for_status()
    except requests.RequestException as exc:
        raise NetworkError(f"Could not fetch {params['url']}: {exc}") from exc

    try:
        text = response.content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Response is not UTF-8 text: {exc}") from exc
    log.info("Fetched %d bytes (HTTP %s)", len(response.content), response.status_code)
    return text


__all__ = ["DEFAULT_ITEMS_URL", "NetworkError", "fetch_items_text"]
