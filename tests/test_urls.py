"""Tests for src/utils/urls.py against hand-built ASGI scopes."""

from starlette.requests import Request

from src.utils.urls import original_url


def _request(**scope: object) -> Request:
    return Request({"type": "http", "method": "GET", "headers": [], **scope})


def test_raw_path_keeps_percent_escapes() -> None:
    req = _request(path="/foo bar", raw_path=b"/foo%20bar", query_string=b"")
    assert original_url(req) == "/foo%20bar"


def test_query_string_reattached() -> None:
    req = _request(path="/missing", raw_path=b"/missing", query_string=b"page=2")
    assert original_url(req) == "/missing?page=2"


def test_query_on_raw_path_not_duplicated() -> None:
    req = _request(path="/missing", raw_path=b"/missing?page=2", query_string=b"page=2")
    assert original_url(req) == "/missing?page=2"


def test_falls_back_to_decoded_path_without_raw_path() -> None:
    req = _request(path="/foo/bar", query_string=b"")
    assert original_url(req) == "/foo/bar"
