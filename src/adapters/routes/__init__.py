"""Catalog routes (one controller per tab)."""

from adapters.routes.route_controller import (
    SORT_OPTIONS,
    CatalogPayloadError,
    Identifier,
    RouteController,
    resolve_identifier,
)

__all__ = [
	"CatalogPayloadError",
	"Identifier",
	"RouteController",
	"SORT_OPTIONS",
	"resolve_identifier",
]
