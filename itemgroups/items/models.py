from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Item:
    """One record from the feed. Only built by the parser; never mutated."""

    id: int
    list_id: int
    name: str


# list_id -> items of that list, in global sort order. Read-only view.
GroupedResult = Mapping[int, Tuple[Item, ...]]

__all__ = ["Item", "GroupedResult"]
