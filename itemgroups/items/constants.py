# Wire field names and sort constants for the items feed.
# Keep names EXACTLY as they appear in the JSON document.
FIELD_ID = "id"
FIELD_LIST_ID = "listId"
FIELD_NAME = "name"
NAME_PREFIX = "Item "  # stripped once (first occurrence) before numeric parse
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
__all__ = ["FIELD_ID", "FIELD_LIST_ID", "FIELD_NAME", "NAME_PREFIX", "INT32_MIN", "INT32_MAX"]
