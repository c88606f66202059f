# Purpose: Define the items package and re-export the pipeline entry points for convenience.


__all__ = ["Item", "GroupedResult", "fetch_grouped_items", "build_grouped_items", "sorted_group_ids", "format_grouped_items"]
from .models import Item, GroupedResult # noqa: E402
from .pipeline import fetch_grouped_items, build_grouped_items # noqa: E402
from .sort_and_group import sorted_group_ids, format_grouped_items # noqa: E402
