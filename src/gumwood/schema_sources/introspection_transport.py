"""HTTP transport for introspection requests."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any

import requests

from .introspection_query import INTROSPECTION_QUERY
from .source_errors import IntrospectionRequestError, SchemaSourceError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

PostCallable = Callable[..., Any]


def parse_header(text: str) -> tuple[str, str]:
    """Split a ``name:value`` header definition."""
    name, separator, value = text.partition(":")
    name = name.strip()
    if not separator or not name:
        raise SchemaSourceError(f"Header must use name:value format: {text}")
    return name, value.strip()


def fetch_introspection(
    url: str,
    headers: Sequence[tuple[str, str]] = (),
    *,
    timeout_seconds: float,
    max_retries: int,
    retry_backoff_seconds: float,
    post: PostCallable | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> str:
    """POST the introspection query to ``url`` and return the response body.

    Connection errors and 429/5xx responses are retried ``max_retries`` times
    with a linearly growing delay.

    Raises:
      IntrospectionRequestError: If no attempt produced a successful response.
    """
    send = post or requests.post
    request_headers = {"Content-Type": "application/graphql"}
    request_headers.update(dict(headers))

    max_attempts = max(1, max_retries + 1)
    attempt = 0
    while attempt < max_attempts:
        attempt += 1
        logger.debug("POST %s (attempt %s/%s)", url, attempt, max_attempts)
        try:
            response = send(
                url,
                data=INTROSPECTION_QUERY.encode("utf-8"),
                headers=request_headers,
                timeout=timeout_seconds,
            )
        except requests.RequestException as exc:
            if attempt < max_attempts:
                logger.warning("Introspection request to %s failed: %s; retrying", url, exc)
                sleep(retry_backoff_seconds * attempt)
                continue
            raise IntrospectionRequestError(
                f"Introspection request to {url} failed after {attempt} attempts: {exc}"
            ) from exc

        if response.ok:
            return response.text

        if response.status_code in RETRYABLE_STATUS_CODES and attempt < max_attempts:
            logger.warning(
                "Introspection request to %s returned status %s; retrying",
                url,
                response.status_code,
            )
            sleep(retry_backoff_seconds * attempt)
            continue

        raise IntrospectionRequestError(
            f"Introspection request to {url} returned status {response.status_code}"
        )

    raise IntrospectionRequestError(f"Introspection request to {url} was not attempted")
