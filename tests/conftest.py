"""Shared fixtures: a scripted transport and page builders."""

import json
from collections.abc import Callable
from typing import Any

import pytest

from newsdata.transport import Endpoint


class FakeTransport:
    """Transport that returns queued bodies and records every request."""

    def __init__(self, responses: list[bytes | Exception]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[Endpoint, dict[str, str]]] = []

    async def fetch(self, endpoint: Endpoint, params: dict[str, str]) -> bytes:
        self.calls.append((endpoint, dict(params)))
        if not self._responses:
            raise AssertionError(f"Unexpected request #{len(self.calls)}: {params}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def article_item(n: int) -> dict[str, Any]:
    """Minimal article as returned by the API."""
    return {
        "article_id": f"id-{n}",
        "title": f"Article {n}",
        "link": f"https://example.com/{n}",
        "source_id": "example",
        "source_name": "Example News",
        "pubDate": "2026-02-01 10:00:00",
        "language": "english",
        "country": ["united states of america"],
        "category": ["technology"],
        "ai_tag": "ONLY AVAILABLE IN PROFESSIONAL AND CORPORATE PLANS",
        "sentiment": "ONLY AVAILABLE IN PROFESSIONAL AND CORPORATE PLANS",
        "sentiment_stats": "ONLY AVAILABLE IN PROFESSIONAL AND CORPORATE PLANS",
        "ai_region": None,
        "duplicate": False,
    }


def news_page(
    numbers: range | list[int],
    *,
    total: int,
    next_page: str | None = "",
) -> bytes:
    """Encode a news page holding the articles with the given numbers."""
    return json.dumps(
        {
            "status": "success",
            "totalResults": total,
            "results": [article_item(n) for n in numbers],
            "nextPage": next_page,
        }
    ).encode()


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Build a FakeTransport from a list of bodies or exceptions."""

    def factory(*responses: bytes | Exception) -> FakeTransport:
        return FakeTransport(list(responses))

    return factory


@pytest.fixture
def make_page() -> Callable[..., bytes]:
    return news_page
