"""Route controller for one catalog tab (show / anime / movie).

Each public call is one GET against the catalog API followed by a JSON
decode and, where the payload holds records, a wrap through `data_class`.
There is no retry, caching or status-code handling at this layer: transport
and JSON errors reach the caller unchanged, and an error status with a JSON
body is handed back as data.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Protocol, TypeVar, Union

import httpx

from adapters.http_client import build_async_client, build_url
from core.config import AppSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SORT_OPTIONS: tuple[str, ...] = ("name", "rating", "released", "updated", "trending", "year")


class CatalogPayloadError(TypeError):
    """The API answered with JSON of the wrong shape for the endpoint."""


class HasId(Protocol):
    id: Any


Identifier = Union[str, int, HasId, Mapping[str, Any]]


def resolve_identifier(value: Identifier) -> str:
    """Accept a raw id or anything exposing one (object attribute or mapping key)."""

    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, Mapping):
        return str(value["id"])
    return str(value.id)


class RouteController(Generic[T]):
    """Queries one tab of the catalog and wraps records with `data_class`.

    `data_class` is any callable `(controller, record) -> T`; the domain
    models expose one as `Model.from_record`.
    """

    def __init__(
        self,
        *,
        tab: str,
        data_class: Callable[[RouteController[T], dict[str, Any]], T],
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.tab = tab
        self.data_class = data_class
        self.settings = settings or AppSettings()
        self._transport = transport

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tab={self.tab!r})"

    async def pages(self) -> int:
        """Number of pages available in this tab."""

        payload = await self._request(f"/{self.tab}s")
        if not isinstance(payload, list):
            raise CatalogPayloadError(f"Expected a JSON array from /{self.tab}s, got {type(payload).__name__}")
        return len(payload)

    async def search(
        self,
        *,
        page: int = 1,
        sort: str = "trending",
        order: int = -1,
        genre: str = "all",
        query: str | None = None,
    ) -> list[T]:
        """Search this tab.

        `sort` is forwarded as-is; the API understands `name`, `rating`,
        `released`, `updated`, `trending` and `year`. `order` is -1 for
        descending, 1 for ascending.
        """

        params = {"sort": sort, "order": order, "genre": genre, "keywords": query}
        values = await self._request(f"/{self.tab}s/{page}", params)
        if not isinstance(values, list):
            raise CatalogPayloadError(f"Expected a JSON array from /{self.tab}s/{page}, got {type(values).__name__}")
        return [self.data_class(self, value) for value in values]

    async def random(self) -> T:
        """A random item of this tab."""

        value = await self._request(f"/random/{self.tab}")
        return self.data_class(self, value)

    async def get(self, id: Identifier) -> T:
        """Full details of one item, by id or by an object carrying `id`."""

        value = await self._raw_details(id)
        return self.data_class(self, value)

    async def _raw_details(self, id: Identifier) -> Any:
        """Lookup by id; every returned record is flagged with `details: true`."""

        endpoint = f"/{self.tab}/{resolve_identifier(id)}"
        data = await self._request(endpoint)
        if isinstance(data, dict):
            data["details"] = True
        elif isinstance(data, list):
            for record in data:
                if isinstance(record, dict):
                    record["details"] = True
        else:
            raise CatalogPayloadError(f"Expected a JSON object or array from {endpoint}, got {type(data).__name__}")
        return data

    async def _request(self, endpoint: str, query_params: Mapping[str, Any] | None = None) -> Any:
        url = build_url(self.settings.base_url, endpoint, query_params)
        logger.debug("GET %s", url)
        async with build_async_client(self.settings, transport=self._transport) as client:
            response = await client.get(url)
        logger.debug("%s -> HTTP %s", url, response.status_code)
        return response.json()
