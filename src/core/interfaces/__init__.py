"""Core contracts (Protocol).

Adapters implement these; the domain depends only on the abstraction.
"""

from core.interfaces.route import CatalogRoute

__all__ = ["CatalogRoute"]
