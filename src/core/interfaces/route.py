"""Contract between catalog routes and the domain models they build.

Domain objects keep a non-owning reference to the route that produced them
so they can issue follow-up requests (lazy detail fetch) without the domain
layer importing HTTP code.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CatalogRoute(Protocol):
    """Minimal surface a domain object may call back into."""

    tab: str

    async def get(self, id: Any) -> Any:
        """Fetch the full record for `id` and wrap it as a domain object."""

        ...
