"""
Main entrypoint for Item Groups.
- Loads configuration from .env files (ITEMS_URL and timeouts; all optional)
- Runs one ItemListSession: fetch, filter, sort and group the items feed
- Prints the grouped listing, or the user-facing error message

Takes no arguments. Exit code 0 on success, 1 on any failure.
"""
from __future__ import annotations

import sys
import logging
from pathlib import Path

# --- Early, minimal logging ---------------------------------------------------
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
log = logging.getLogger("itemgroups.main")


def _load_env(app_dir: Path) -> None:
    """Load environment from .env files (project root -> CWD -> user config dir).
    Existing environment variables always win; safe to run multiple times.
    """
    from dotenv import load_dotenv

    load_dotenv(app_dir / ".env")
    load_dotenv()  # CWD
    load_dotenv(Path.home() / ".config" / "itemgroups" / ".env")


def _run_session() -> int:
    from itemgroups.items.sort_and_group import format_grouped_items
    from itemgroups.session import ItemListSession

    with ItemListSession() as session:
        state = session.start().result()

    if state.failed:
        print(state.error, file=sys.stderr)
        return 1
    print(format_grouped_items(state.result))
    return 0


# --- Public entrypoint ---------------------------------------------------------

def main() -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app_dir = Path(__file__).resolve().parents[1]
    _load_env(app_dir)

    try:
        return _run_session()
    except Exception as e:
        # Last-chance logging
        log.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
