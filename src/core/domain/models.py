"""Domain models (Pydantic v2).

These models describe *what* a catalog record is, not *how* it is fetched.
Every model is built from a raw JSON record through `from_record`, which is
the factory handed to a route as its `data_class`.

Note:
- Records returned by a list/search call are summaries; records returned by
  a lookup by id carry `details: true` and the full payload (episodes,
  synopsis, torrents...).
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, PrivateAttr
from pydantic.config import ConfigDict

from core.interfaces.route import CatalogRoute

QUALITY_ORDER: tuple[str, ...] = ("2160p", "1080p", "720p", "480p", "0")


def _quality_rank(quality: str) -> int:
    try:
        return QUALITY_ORDER.index(quality)
    except ValueError:
        return len(QUALITY_ORDER)


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class Images(_Record):
    poster: str | None = None
    fanart: str | None = None
    banner: str | None = None


class Rating(_Record):
    percentage: int | None = Field(default=None, ge=0, le=100)
    watching: int | None = None
    votes: int | None = None
    loved: int | None = None
    hated: int | None = None


class Torrent(_Record):
    url: str | None = Field(default=None, description="Magnet or .torrent URL.")
    seed: int | None = Field(default=None, validation_alias=AliasChoices("seed", "seeds"))
    peer: int | None = Field(default=None, validation_alias=AliasChoices("peer", "peers"))
    size: int | None = Field(default=None, description="Size in bytes.")
    filesize: str | None = Field(default=None, description="Human readable size.")
    provider: str | None = None


def pick_best_torrent(torrents: dict[str, Torrent]) -> Torrent | None:
    """Return the torrent with the highest known quality key."""

    if not torrents:
        return None
    best = min(torrents, key=_quality_rank)
    return torrents[best]


class Episode(_Record):
    tvdb_id: int | None = None
    season: int | None = None
    episode: int | None = None
    title: str | None = None
    overview: str | None = None
    first_aired: int | None = Field(default=None, description="Unix timestamp of the first airing.")
    torrents: dict[str, Torrent] = Field(default_factory=dict)

    def best_torrent(self) -> Torrent | None:
        return pick_best_torrent(self.torrents)


class CatalogItem(_Record):
    """Fields shared by every catalog record.

    `_controller` is the route that built the instance. It is a plain
    back-reference used for lazy lookups, never serialised.
    """

    id: str = Field(
        ...,
        alias="_id",
        min_length=1,
        description="Catalog identifier (the `_id` key in the remote payload).",
    )
    imdb_id: str | None = None
    title: str | None = None
    year: str | None = None
    slug: str | None = None
    genres: list[str] = Field(default_factory=list)
    images: Images = Field(default_factory=Images)
    rating: Rating = Field(default_factory=Rating)
    synopsis: str | None = None
    details: bool = Field(
        default=False,
        description="True when the record came from a lookup by id (full payload).",
    )

    _controller: CatalogRoute | None = PrivateAttr(default=None)

    @classmethod
    def from_record(cls, controller: CatalogRoute | None, record: dict[str, Any]) -> CatalogItem:
        item = cls.model_validate(record)
        item._controller = controller
        return item

    @property
    def controller(self) -> CatalogRoute | None:
        return self._controller

    async def fetch_details(self) -> CatalogItem:
        """Return the detailed version of this item.

        Items that already carry the full payload are returned unchanged;
        summaries are looked up again through the route that built them.
        """

        if self.details:
            return self
        if self._controller is None:
            raise RuntimeError(f"{type(self).__name__} {self.id!r} is not bound to a route")
        return await self._controller.get(self)


class Show(CatalogItem):
    tvdb_id: str | None = None
    num_seasons: int | None = None
    runtime: str | None = None
    country: str | None = None
    network: str | None = None
    air_day: str | None = None
    air_time: str | None = None
    status: str | None = None
    last_updated: int | None = None
    episodes: list[Episode] = Field(default_factory=list)

    def season(self, number: int) -> list[Episode]:
        """Episodes of one season, ordered by episode number."""

        found = [e for e in self.episodes if e.season == number]
        return sorted(found, key=lambda e: e.episode or 0)


class Anime(CatalogItem):
    mal_id: str | None = None
    type: str | None = None
    num_seasons: int | None = None
    status: str | None = None
    episodes: list[Episode] = Field(default_factory=list)


class Movie(CatalogItem):
    runtime: str | None = None
    released: int | None = Field(default=None, description="Unix timestamp of the release.")
    trailer: str | None = None
    certification: str | None = None
    torrents: dict[str, dict[str, Torrent]] = Field(
        default_factory=dict,
        description="Torrents keyed by language, then by quality.",
    )

    def best_torrent(self, language: str = "en") -> Torrent | None:
        return pick_best_torrent(self.torrents.get(language, {}))
