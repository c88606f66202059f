from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from itemgroups.errors import ParseError, RecordError

from .constants import FIELD_ID, FIELD_LIST_ID, FIELD_NAME
from .models import Item

log = logging.getLogger("itemgroups.items")


def _require_int(obj: Dict[str, Any], field: str, index: int) -> int:
    if field not in obj:
        raise RecordError(f"missing '{field}'", index)
    val = obj[field]
    # bool is an int subclass in Python; JSON true/false is not an id
    if isinstance(val, bool) or not isinstance(val, int):
        raise RecordError(f"'{field}' must be an integer, got {type(val).__name__}", index)
    return val


def _optional_name(obj: Dict[str, Any], index: int) -> Optional[str]:
    val = obj.get(FIELD_NAME)
    if val is None or isinstance(val, str):
        return val
    raise RecordError(f"'{FIELD_NAME}' must be a string or null, got {type(val).__name__}", index)


def decode_item(obj: Any, index: int) -> Optional[Item]:
    """
    Validate one array element and build an Item.

    Returns None when the element is well-formed but its name is absent or
    blank (filtered out, not an error). Raises RecordError when the element
    itself is malformed.
    """
    if not isinstance(obj, dict):
        raise RecordError(f"expected an object, got {type(obj).__name__}", index)
    item_id = _require_int(obj, FIELD_ID, index)
    list_id = _require_int(obj, FIELD_LIST_ID, index)
    name = _optional_name(obj, index)
    if name is None or not name.strip():
        return None
    return Item(id=item_id, list_id=list_id, name=name)


def parse_items(text: str, strict: bool = True) -> List[Item]:
    """
    Decode the feed body and keep only records with a non-blank name.

    strict=True (default): the first malformed object aborts the whole batch.
    strict=False: malformed objects are logged and skipped.
    Output keeps source order; no sorting happens here.
    """
    try:
        payload = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"Response is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Response is nested too deeply to decode") from exc
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array, got {type(payload).__name__}")

    items: List[Item] = []
    blank = 0
    skipped = 0
    for index, obj in enumerate(payload):
        try:
            item = decode_item(obj, index)
        except RecordError as exc:
            if strict:
                raise
            skipped += 1
            log.warning("Skipping malformed record: %s", exc)
            continue
        if item is None:
            blank += 1
            continue
        items.append(item)

    log.info("Parsed %d records: kept=%d blank_name=%d skipped=%d", len(payload), len(items), blank, skipped)
    return items


__all__ = ["decode_item", "parse_items"]
