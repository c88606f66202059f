from __future__ import annotations

import logging
import os
from concurrent.futures import Executor, Future
from typing import Optional

import requests

from itemgroups.HttpFunctions import fetch_items_text
from itemgroups.errors import ConfigError

from .models import GroupedResult
from .parse_and_filter import parse_items
from .sort_and_group import sort_and_group

log = logging.getLogger("itemgroups.items")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def strict_records_from_env() -> bool:
    """ITEMS_STRICT_RECORDS=0/false/no/off switches to skip-bad-record mode.
    Unset or blank means strict; any other unrecognized value is a ConfigError.
    """
    raw = os.getenv("ITEMS_STRICT_RECORDS", "1")
    val = raw.strip().lower() or "1"
    if val in _TRUE_VALUES:
        return True
    if val in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid ITEMS_STRICT_RECORDS value: expected one of 1/0/true/false/yes/no/on/off, got '{raw}'")


def build_grouped_items(text: str, strict: Optional[bool] = None) -> GroupedResult:
    """Parse, filter, sort and group a feed body. Pure apart from logging."""
    if strict is None:
        strict = strict_records_from_env()
    items = parse_items(text, strict=strict)
    grouped = sort_and_group(items)
    log.info("Grouped %d items into %d lists", len(items), len(grouped))
    return grouped


def fetch_grouped_items(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    strict: Optional[bool] = None,
) -> GroupedResult:
    """
    Run the whole pipeline once: fetch → parse+filter → sort → group.

    Blocking. Any NetworkError or ParseError propagates unchanged and no
    partial result is returned. Use submit_fetch_grouped_items() or
    ItemListSession to run it off the calling thread.
    """
    text = fetch_items_text(url=url, session=session)
    return build_grouped_items(text, strict=strict)


def submit_fetch_grouped_items(executor: Executor, **kwargs) -> "Future[GroupedResult]":
    return executor.submit(fetch_grouped_items, **kwargs)


__all__ = ["build_grouped_items", "fetch_grouped_items", "submit_fetch_grouped_items", "strict_records_from_env"]
