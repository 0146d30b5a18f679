"""Unit tests for the news pipeline in steam_news.pipeline.

Covers:
- validate_app_id
- build_request_url / build_store_url
- parse_news (defaults, malformed structure, invalid JSON)
- render_report (ellipsis kept even for short contents)
- NewsFetchPipeline.fetch status and exception mapping
- NewsFetchPipeline.fetch_news composition
"""

from __future__ import annotations

import json

import pytest
import requests

from conftest import FakeResponse, FakeSession
from steam_news.errors import (
    HttpError,
    NewsConnectionError,
    ParseError,
    UnexpectedError,
    ValidationError,
)
from steam_news.models import NewsItem, NewsResponse
from steam_news.pipeline import (
    NewsFetchPipeline,
    build_request_url,
    build_store_url,
    parse_news,
    render_report,
    validate_app_id,
)


@pytest.mark.parametrize("raw", ["", " ", "abc", "12a", "-5", "4.40", " 440", "440 ", "٤٤٠"])
def test_validate_app_id_rejects_non_digits(raw: str) -> None:
    """Empty, signed, spaced or non-ASCII digit input is rejected."""
    with pytest.raises(ValidationError) as info:
        validate_app_id(raw)
    assert info.value.message == "App ID must be a number."


@pytest.mark.parametrize("raw", ["0", "440", "0070", "1234567890123"])
def test_validate_app_id_preserves_value(raw: str) -> None:
    """Digit-only input is returned exactly, leading zeros included."""
    assert validate_app_id(raw) == raw


def test_build_request_url() -> None:
    assert (
        build_request_url("440")
        == "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/?appid=440"
    )


def test_build_store_url() -> None:
    assert build_store_url("570") == "https://store.steampowered.com/news/app/570"


def test_empty_newsitems_renders_sentinel() -> None:
    """An empty item list is a valid outcome, not an error."""
    body = json.dumps({"appnews": {"newsitems": []}})
    assert render_report(parse_news(body)) == "No news found for this app."


@pytest.mark.parametrize(
    "body",
    ["{}", '{"appnews": {}}', '{"appnews": null}', '{"appnews": {"newsitems": 3}}', "[1, 2]", "null"],
)
def test_missing_newsitems_path_is_empty(body: str) -> None:
    """A body without the appnews.newsitems list parses to no items."""
    assert parse_news(body).is_empty


def test_single_item_render_exact() -> None:
    body = json.dumps(
        {"appnews": {"newsitems": [{"title": "T", "contents": "short", "url": "http://x"}]}}
    )
    assert render_report(parse_news(body)) == "T\nshort...\nLink: http://x\n\n"


def test_missing_title_defaults_only_that_field() -> None:
    body = json.dumps({"appnews": {"newsitems": [{"contents": "c", "url": "u"}]}})
    response = parse_news(body)
    assert response.items == (NewsItem(title="No Title Available", contents="c", url="u"),)
    assert render_report(response) == "No Title Available\nc...\nLink: u\n\n"


def test_null_fields_default_and_url_line_omitted() -> None:
    body = json.dumps({"appnews": {"newsitems": [{"title": None, "contents": None, "url": None}]}})
    assert render_report(parse_news(body)) == "No Title Available\nNo Content Available...\n\n"


def test_empty_url_omits_link_line() -> None:
    response = NewsResponse(items=(NewsItem(title="A", contents="b", url=""),))
    assert render_report(response) == "A\nb...\n\n"


def test_non_string_scalars_use_json_text() -> None:
    body = json.dumps({"appnews": {"newsitems": [{"title": 5, "contents": True}]}})
    item = parse_news(body).items[0]
    assert item.title == "5"
    assert item.contents == "true"


def test_non_object_entries_are_skipped() -> None:
    body = json.dumps({"appnews": {"newsitems": ["junk", {"title": "Kept"}, 7]}})
    response = parse_news(body)
    assert [item.title for item in response.items] == ["Kept"]


def test_long_contents_truncated_to_200_chars_plus_ellipsis() -> None:
    contents = "x" * 199 + "YZ" + "tail" * 10
    response = NewsResponse(items=(NewsItem(title="T", contents=contents),))
    lines = render_report(response).split("\n")
    assert lines[1] == "x" * 199 + "Y" + "..."
    assert len(lines[1]) == 203


def test_exactly_200_chars_still_gets_ellipsis() -> None:
    response = NewsResponse(items=(NewsItem(title="T", contents="a" * 200),))
    assert render_report(response).split("\n")[1] == "a" * 200 + "..."


def test_short_contents_keep_ellipsis() -> None:
    """Contents under the preview length are still suffixed with '...'."""
    response = NewsResponse(items=(NewsItem(title="T", contents="hi"),))
    assert render_report(response).split("\n")[1] == "hi..."


def test_items_render_in_original_order() -> None:
    body = json.dumps(
        {
            "appnews": {
                "newsitems": [
                    {"title": "First", "contents": "1"},
                    {"title": "Second", "contents": "2", "url": "https://s"},
                ]
            }
        }
    )
    assert render_report(parse_news(body)) == (
        "First\n1...\n\nSecond\n2...\nLink: https://s\n\n"
    )


@pytest.mark.parametrize("body", ["not json", "", "{", "{'single': 'quotes'}"])
def test_invalid_json_raises_parse_error(body: str) -> None:
    with pytest.raises(ParseError):
        parse_news(body)


def test_fetch_returns_body_on_success() -> None:
    session = FakeSession(FakeResponse(200, '{"ok": true}'))
    pipeline = NewsFetchPipeline(session, timeout=None)
    assert pipeline.fetch("https://example.test/news") == '{"ok": true}'
    assert session.calls == [{"url": "https://example.test/news", "timeout": None}]


def test_fetch_accepts_empty_2xx_body() -> None:
    pipeline = NewsFetchPipeline(FakeSession(FakeResponse(204, "")))
    assert pipeline.fetch("https://example.test/news") == ""


@pytest.mark.parametrize("status", [301, 403, 404, 429, 500, 503])
def test_fetch_non_2xx_raises_http_error_with_code(status: int) -> None:
    session = FakeSession(FakeResponse(status, "error page"))
    pipeline = NewsFetchPipeline(session)
    with pytest.raises(HttpError) as info:
        pipeline.fetch("https://example.test/news")
    assert info.value.code == status
    assert info.value.message == f"Failed to fetch news. Code: {status}"
    assert len(session.calls) == 1


@pytest.mark.parametrize(
    "error",
    [
        requests.ConnectionError("refused"),
        requests.Timeout("slow"),
        requests.exceptions.ChunkedEncodingError("cut"),
    ],
)
def test_fetch_transport_failures_raise_connection_error(error: Exception) -> None:
    session = FakeSession(error=error)
    pipeline = NewsFetchPipeline(session)
    with pytest.raises(NewsConnectionError) as info:
        pipeline.fetch("https://example.test/news")
    assert info.value.message == "Unable to connect to the server."
    assert len(session.calls) == 1


def test_fetch_other_failures_raise_unexpected_error() -> None:
    pipeline = NewsFetchPipeline(FakeSession(error=RuntimeError("boom")))
    with pytest.raises(UnexpectedError) as info:
        pipeline.fetch("https://example.test/news")
    assert info.value.message == "An unexpected error occurred: boom"


def test_fetch_news_composes_steps() -> None:
    body = json.dumps({"appnews": {"newsitems": [{"title": "T", "contents": "c"}]}})
    session = FakeSession(FakeResponse(200, body))
    report = NewsFetchPipeline(session).fetch_news("440")
    assert report.app_id == "440"
    assert report.request_url == build_request_url("440")
    assert report.text == "T\nc...\n\n"
    assert report.item_count == 1
    assert session.calls[0]["url"] == build_request_url("440")


def test_fetch_news_invalid_id_never_hits_network() -> None:
    session = FakeSession()
    with pytest.raises(ValidationError):
        NewsFetchPipeline(session).fetch_news("4a0")
    assert session.calls == []


def test_fetch_news_propagates_parse_error() -> None:
    session = FakeSession(FakeResponse(200, "not json"))
    with pytest.raises(ParseError):
        NewsFetchPipeline(session).fetch_news("440")
