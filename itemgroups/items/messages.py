# User-visible wording for the item list states.
NO_ITEMS = "No items to show."
LOAD_FAILED = "Error: {detail}"
UNKNOWN_ERROR = "Unknown error"
GROUP_HEADER = "List ID: {list_id}"
__all__ = ["NO_ITEMS", "LOAD_FAILED", "UNKNOWN_ERROR", "GROUP_HEADER"]
