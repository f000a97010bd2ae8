from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    appetizers = "Appetizers"
    tandoor = "Tandoor"
    curries = "Curries"
    biryani = "Biryani"
    breads = "Breads"
    desserts = "Desserts"
    drinks = "Drinks"
    party_trays = "Party Trays"


ALL_CATEGORIES = "All"


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = ""
    price: float = Field(..., ge=0)
    category: Category
    is_vegan: bool = Field(default=False, alias="isVegan")
    is_vegetarian: bool = Field(default=False, alias="isVegetarian")
    is_gluten_free: bool = Field(default=False, alias="isGlutenFree")
    image: str | None = None


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    phone: str
    hours: tuple[str, ...] = ()
    email: str | None = None


class CatalogDocument(BaseModel):
    """Shape of the JSON file the catalog is loaded from."""

    contact: ContactInfo
    menu: list[MenuItem]
