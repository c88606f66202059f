# Ensures `import itemgroups` works when running `pytest` from repo root or a parent folder.
# This keeps tests hermetic without relying on PYTHONPATH being set by the shell.
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# project root = parent of this tests/ directory
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _clean_items_env(monkeypatch):
    for name in ("ITEMS_URL", "ITEMS_CONNECT_TIMEOUT_S", "ITEMS_READ_TIMEOUT_S", "ITEMS_STRICT_RECORDS"):
        monkeypatch.delenv(name, raising=False)


def make_http_session(body: str = "[]", status: int = 200) -> Mock:
    """A requests.Session stand-in whose get() returns one canned response."""
    response = Mock()
    response.content = body.encode("utf-8")
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Client Error")
    session = Mock(spec=requests.Session)
    session.get.return_value = response
    return session


@pytest.fixture
def http_session():
    return make_http_session
