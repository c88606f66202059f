from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .constants import INT32_MAX, INT32_MIN, NAME_PREFIX
from .messages import GROUP_HEADER, NO_ITEMS
from .models import GroupedResult, Item

# Sign, leading zeros, then at most 10 significant digits: enough for any
# 32-bit value and never long enough to trip int() digit limits.
_INT_TEXT = re.compile(r"([+-]?)0*([0-9]{1,10})")

# Secondary key kinds. Numeric keys always sort before string keys.
KIND_NUMBER = 0
KIND_TEXT = 1

NameKey = Tuple[int, int, str]


def name_key(name: str) -> NameKey:
    """
    Tagged secondary key for an item name.

    "Item " is removed once; if what remains is a 32-bit integer the key is
    (KIND_NUMBER, n, ""), otherwise (KIND_TEXT, 0, remainder). The tag keeps
    ints and strings from ever being compared to each other.
    """
    rest = name.replace(NAME_PREFIX, "", 1)
    m = _INT_TEXT.fullmatch(rest)
    if m:
        n = int(m.group(1) + m.group(2))
        if INT32_MIN <= n <= INT32_MAX:
            return (KIND_NUMBER, n, "")
    return (KIND_TEXT, 0, rest)


def compare_name_keys(a: NameKey, b: NameKey) -> int:
    """Three-way comparison of two secondary keys (-1, 0, 1).

    Same order sort_items applies through the tuple key; offered for callers
    that need an explicit comparator (e.g. functools.cmp_to_key).
    """
    return (a > b) - (a < b)


def sort_key(item: Item) -> Tuple[int, NameKey]:
    return (item.list_id, name_key(item.name))


def sort_items(items: Iterable[Item]) -> List[Item]:
    # sorted() is stable: equal keys keep their parse order
    return sorted(items, key=sort_key)


def group_items(sorted_items: Sequence[Item]) -> GroupedResult:
    # Bucket in one pass; each bucket inherits the global order
    buckets: Dict[int, List[Item]] = {}
    for item in sorted_items:
        buckets.setdefault(item.list_id, []).append(item)
    return MappingProxyType({list_id: tuple(bucket) for list_id, bucket in buckets.items()})


def sort_and_group(items: Iterable[Item]) -> GroupedResult:
    return group_items(sort_items(items))


def sorted_group_ids(result: Mapping[int, Sequence[Item]]) -> List[int]:
    """Group keys in display order (ascending)."""
    return sorted(result)


def format_grouped_items(result: Mapping[int, Sequence[Item]]) -> str:
    """Plain-text listing: a header per list, then name and id per item."""
    if not result:
        return NO_ITEMS
    lines: List[str] = []
    for list_id in sorted_group_ids(result):
        lines.append(GROUP_HEADER.format(list_id=list_id))
        for item in result[list_id]:
            lines.append(f"  {item.name}")
            lines.append(f"    ID: {item.id}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


__all__ = [
    "name_key",
    "compare_name_keys",
    "sort_items",
    "group_items",
    "sort_and_group",
    "sorted_group_ids",
    "format_grouped_items",
]
