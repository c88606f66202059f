from unittest.mock import patch

import pytest
import requests

from itemgroups.HttpFunctions import DEFAULT_ITEMS_URL, fetch_items_text
from itemgroups.errors import FetchConfigError, NetworkError, ParseError


def test_default_url_and_timeouts(http_session):
    session = http_session('[{"id":1}]')
    assert fetch_items_text(session=session) == '[{"id":1}]'
    session.get.assert_called_once_with(DEFAULT_ITEMS_URL, timeout=(10, 30))


def test_env_overrides(monkeypatch, http_session):
    monkeypatch.setenv("ITEMS_URL", "http://localhost:8000/items.json")
    monkeypatch.setenv("ITEMS_CONNECT_TIMEOUT_S", "2.5")
    monkeypatch.setenv("ITEMS_READ_TIMEOUT_S", "5")
    session = http_session()
    fetch_items_text(session=session)
    session.get.assert_called_once_with("http://localhost:8000/items.json", timeout=(2.5, 5.0))


def test_explicit_url_wins_over_env(monkeypatch, http_session):
    monkeypatch.setenv("ITEMS_URL", "http://ignored.example")
    session = http_session()
    fetch_items_text(url="https://example.test/x.json", session=session)
    assert session.get.call_args.args[0] == "https://example.test/x.json"


@pytest.mark.parametrize("name,value", [("ITEMS_READ_TIMEOUT_S", "soon"), ("ITEMS_CONNECT_TIMEOUT_S", "0")])
def test_bad_timeout_is_config_error(monkeypatch, http_session, name, value):
    monkeypatch.setenv(name, value)
    session = http_session()
    with pytest.raises(FetchConfigError, match=name):
        fetch_items_text(session=session)
    session.get.assert_not_called()


def test_non_http_url_rejected(monkeypatch):
    monkeypatch.setenv("ITEMS_URL", "ftp://example.test/items.json")
    with pytest.raises(FetchConfigError):
        fetch_items_text()


def test_non_2xx_status_is_network_error(http_session):
    session = http_session("Not Found", status=404)
    with pytest.raises(NetworkError, match="404") as info:
        fetch_items_text(session=session)
    assert isinstance(info.value.__cause__, requests.HTTPError)


@pytest.mark.parametrize(
    "exc",
    [requests.Timeout("read timed out"), requests.ConnectionError("Name or service not known")],
)
def test_transport_failures_wrapped_without_retry(http_session, exc):
    session = http_session()
    session.get.side_effect = exc
    with pytest.raises(NetworkError) as info:
        fetch_items_text(session=session)
    assert info.value.__cause__ is exc
    assert session.get.call_count == 1


def test_non_utf8_body_is_parse_error(http_session):
    session = http_session()
    session.get.return_value.content = b"\xff\xfe["
    with pytest.raises(ParseError):
        fetch_items_text(session=session)


def test_uses_requests_get_without_session():
    with patch("itemgroups.HttpFunctions.requests.get") as mock_get:
        mock_get.return_value.content = b"[]"
        mock_get.return_value.status_code = 200
        assert fetch_items_text() == "[]"
    mock_get.assert_called_once()
