"""JSON export of catalog items.

Keeps results usable by other tools without re-querying the API.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import CatalogItem


def items_payload(items: Iterable[CatalogItem]) -> list[dict]:
    return [item.model_dump(mode="json", by_alias=True) for item in items]


def export_items_json(*, items: Iterable[CatalogItem], output_path: Path) -> Path:
    """Write `items` to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = items_payload(items)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
