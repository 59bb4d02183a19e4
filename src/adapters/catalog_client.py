"""One entry point for the three catalog tabs.

`CatalogClient` wires a `RouteController` per tab with the matching domain
model, sharing settings (and, in tests, the transport) between them.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.routes import RouteController
from core.config import AppSettings
from core.domain.models import Anime, Movie, Show

TABS: tuple[str, ...] = ("show", "anime", "movie")


class CatalogClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self.shows: RouteController[Show] = RouteController(
            tab="show", data_class=Show.from_record, settings=self._settings, transport=transport
        )
        self.anime: RouteController[Anime] = RouteController(
            tab="anime", data_class=Anime.from_record, settings=self._settings, transport=transport
        )
        self.movies: RouteController[Movie] = RouteController(
            tab="movie", data_class=Movie.from_record, settings=self._settings, transport=transport
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def route(self, tab: str) -> RouteController[Any]:
        """Controller for `tab` (`show`, `anime` or `movie`)."""

        routes: dict[str, RouteController[Any]] = {
            "show": self.shows,
            "anime": self.anime,
            "movie": self.movies,
        }
        key = tab.strip().lower()
        if key not in routes:
            raise ValueError(f"Unknown tab {tab!r}; expected one of: {', '.join(TABS)}")
        return routes[key]
