"""Shared fixtures.

`FakeCatalog` stands in for the remote API: it records every request and
answers from a path -> (status, body) table through `httpx.MockTransport`,
so no test touches the network.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from core.config import AppSettings

BASE_URL = "https://catalog.test"


class FakeCatalog:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, tuple[int, bytes]] = {}

    def add(self, path: str, payload: Any = None, *, status: int = 200, body: bytes | None = None) -> None:
        content = body if body is not None else json.dumps(payload).encode("utf-8")
        self._routes[path] = (status, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, content = self._routes.get(
            request.url.path,
            (404, b'{"error": "not found"}'),
        )
        return httpx.Response(status, content=content, headers={"Content-Type": "application/json"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=BASE_URL, _env_file=None)


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def show_summary() -> dict[str, Any]:
    return {
        "_id": "tt0903747",
        "imdb_id": "tt0903747",
        "tvdb_id": "81189",
        "title": "Breaking Bad",
        "year": "2008",
        "slug": "breaking-bad",
        "num_seasons": 5,
        "images": {
            "poster": "https://img.test/bb-poster.jpg",
            "fanart": "https://img.test/bb-fanart.jpg",
            "banner": "https://img.test/bb-banner.jpg",
        },
        "rating": {"percentage": 95, "watching": 12, "votes": 20000, "loved": 100, "hated": 100},
    }


@pytest.fixture
def show_details(show_summary: dict[str, Any]) -> dict[str, Any]:
    return {
        **show_summary,
        "synopsis": "A chemistry teacher diagnosed with cancer turns to crime.",
        "runtime": "45",
        "country": "us",
        "network": "AMC",
        "air_day": "Sunday",
        "air_time": "21:00",
        "status": "ended",
        "genres": ["drama", "crime", "thriller"],
        "last_updated": 1700000000000,
        "episodes": [
            {
                "tvdb_id": 349232,
                "season": 1,
                "episode": 2,
                "title": "Cat's in the Bag...",
                "overview": "Walt and Jesse clean up.",
                "first_aired": 1201392000,
                "torrents": {
                    "480p": {"url": "magnet:?xt=ep2-480", "seeds": 10, "peers": 2, "provider": "EZTV"},
                },
            },
            {
                "tvdb_id": 349232,
                "season": 1,
                "episode": 1,
                "title": "Pilot",
                "overview": "Walter White begins.",
                "first_aired": 1200787200,
                "torrents": {
                    "0": {"url": "magnet:?xt=ep1-0", "seeds": 3, "peers": 1, "provider": "EZTV"},
                    "720p": {"url": "magnet:?xt=ep1-720", "seeds": 40, "peers": 4, "provider": "EZTV"},
                    "480p": {"url": "magnet:?xt=ep1-480", "seeds": 20, "peers": 3, "provider": "EZTV"},
                },
            },
            {"season": 2, "episode": 1, "title": "Seven Thirty-Seven"},
        ],
    }


@pytest.fixture
def movie_details() -> dict[str, Any]:
    return {
        "_id": "tt0111161",
        "imdb_id": "tt0111161",
        "title": "The Shawshank Redemption",
        "year": 1994,
        "synopsis": "Two imprisoned men bond over a number of years.",
        "runtime": "142",
        "released": 780969600,
        "trailer": "https://youtube.test/watch?v=abc",
        "certification": "R",
        "genres": ["drama", "crime"],
        "images": {"poster": "https://img.test/shawshank.jpg"},
        "rating": {"percentage": 93, "votes": 5000},
        "torrents": {
            "en": {
                "720p": {"url": "magnet:?xt=720", "seed": 800, "peer": 40, "size": 902841958, "filesize": "861 MB", "provider": "YTS"},
                "1080p": {"url": "magnet:?xt=1080", "seed": 1200, "peer": 80, "size": 1932735283, "filesize": "1.8 GB", "provider": "YTS"},
            }
        },
    }


@pytest.fixture
def anime_summary() -> dict[str, Any]:
    return {
        "_id": "5646",
        "mal_id": "5114",
        "title": "Fullmetal Alchemist: Brotherhood",
        "year": "2009",
        "slug": "fullmetal-alchemist-brotherhood",
        "type": "show",
        "genres": ["Action", "Adventure", "Drama"],
        "num_seasons": 1,
        "images": {"poster": "https://img.test/fmab.jpg"},
        "rating": {"percentage": 91},
    }
