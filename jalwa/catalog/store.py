from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import structlog
from pydantic import ValidationError

from jalwa.catalog.models import ALL_CATEGORIES, CatalogDocument, Category, ContactInfo, MenuItem
from jalwa.core.errors import CatalogError

logger = structlog.get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"


class Catalog:
    """Read-only view over the menu items and the contact record.

    Items keep the order they were supplied in; every lookup that returns
    several items preserves that order.
    """

    def __init__(self, items: Iterable[MenuItem], contact: ContactInfo) -> None:
        self._items = tuple(items)
        self._contact = contact
        seen: set[str] = set()
        for item in self._items:
            if item.id in seen:
                raise CatalogError(f"Duplicate menu item id: {item.id}")
            seen.add(item.id)

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    @property
    def contact(self) -> ContactInfo:
        return self._contact

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: str) -> MenuItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def categories(self) -> list[str]:
        return [ALL_CATEGORIES, *(category.value for category in Category)]

    def in_category(self, category: str) -> list[MenuItem]:
        if category == ALL_CATEGORIES:
            return list(self._items)
        return [item for item in self._items if item.category == category]

    def vegetarian_items(self) -> list[MenuItem]:
        return [item for item in self._items if item.is_vegan or item.is_vegetarian]

    def gluten_free_items(self) -> list[MenuItem]:
        return [item for item in self._items if item.is_gluten_free]


def load_catalog(path: str | Path | None = None) -> Catalog:
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {catalog_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {catalog_path}") from exc

    try:
        document = CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Catalog file failed validation: {exc}") from exc

    catalog = Catalog(document.menu, document.contact)
    logger.info("catalog_loaded", path=str(catalog_path), items=len(catalog))
    return catalog
