from jalwa.catalog.models import ALL_CATEGORIES, Category, ContactInfo, MenuItem
from jalwa.catalog.store import Catalog, load_catalog

__all__ = [
    "ALL_CATEGORIES",
    "Catalog",
    "Category",
    "ContactInfo",
    "MenuItem",
    "load_catalog",
]
