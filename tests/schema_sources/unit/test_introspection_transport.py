"""Introspection transport tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
import requests
from gumwood.schema_sources import (
    INTROSPECTION_QUERY,
    IntrospectionRequestError,
    SchemaSourceError,
    fetch_introspection,
    parse_header,
)


@dataclass
class _FakeResponse:
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code < 400


@dataclass
class _RecordingPost:
    outcomes: list[Any]
    calls: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _fetch(
    post: _RecordingPost,
    delays: list[float],
    headers: tuple[tuple[str, str], ...] = (),
    max_retries: int = 2,
) -> str:
    return fetch_introspection(
        "https://example.com/graphql",
        headers,
        timeout_seconds=30,
        max_retries=max_retries,
        retry_backoff_seconds=0.5,
        post=post,
        sleep=delays.append,
    )


def test_posts_query_with_graphql_content_type_and_timeout() -> None:
    post = _RecordingPost([_FakeResponse(200, '{"data": {}}')])

    body = _fetch(post, [])

    assert body == '{"data": {}}'
    assert len(post.calls) == 1
    call = post.calls[0]
    assert call["url"] == "https://example.com/graphql"
    assert call["data"] == INTROSPECTION_QUERY.encode("utf-8")
    assert call["headers"] == {"Content-Type": "application/graphql"}
    assert call["timeout"] == 30


def test_sends_additional_headers() -> None:
    post = _RecordingPost([_FakeResponse(200, "{}")])

    _fetch(post, [], headers=(("Authorization", "Bearer token"), ("X-Team", "docs")))

    assert post.calls[0]["headers"] == {
        "Content-Type": "application/graphql",
        "Authorization": "Bearer token",
        "X-Team": "docs",
    }


def test_retries_retryable_status_with_growing_delay() -> None:
    post = _RecordingPost([_FakeResponse(503), _FakeResponse(429), _FakeResponse(200, "{}")])
    delays: list[float] = []

    body = _fetch(post, delays)

    assert body == "{}"
    assert len(post.calls) == 3
    assert delays == [0.5, 1.0]


def test_retries_connection_errors() -> None:
    post = _RecordingPost([requests.ConnectionError("refused"), _FakeResponse(200, "{}")])
    delays: list[float] = []

    assert _fetch(post, delays) == "{}"
    assert delays == [0.5]


def test_non_retryable_status_fails_immediately() -> None:
    post = _RecordingPost([_FakeResponse(401)])
    delays: list[float] = []

    with pytest.raises(IntrospectionRequestError, match="returned status 401"):
        _fetch(post, delays)

    assert len(post.calls) == 1
    assert delays == []


def test_exhausted_retries_report_last_status() -> None:
    post = _RecordingPost([_FakeResponse(500), _FakeResponse(500), _FakeResponse(502)])

    with pytest.raises(IntrospectionRequestError, match="returned status 502"):
        _fetch(post, [])

    assert len(post.calls) == 3


def test_exhausted_retries_report_connection_error() -> None:
    post = _RecordingPost([requests.Timeout("slow")])

    with pytest.raises(IntrospectionRequestError, match="failed after 1 attempts: slow"):
        _fetch(post, [], max_retries=0)


def test_request_error_is_a_schema_source_error() -> None:
    assert issubclass(IntrospectionRequestError, SchemaSourceError)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Authorization: Bearer token", ("Authorization", "Bearer token")),
        ("X-Empty:", ("X-Empty", "")),
        ("X-Url: https://example.com:8080", ("X-Url", "https://example.com:8080")),
    ],
)
def test_parse_header(text: str, expected: tuple[str, str]) -> None:
    assert parse_header(text) == expected


@pytest.mark.parametrize("text", ["Authorization", ": value", ""])
def test_parse_header_rejects_malformed_definitions(text: str) -> None:
    with pytest.raises(SchemaSourceError, match="name:value"):
        parse_header(text)
