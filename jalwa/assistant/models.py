from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jalwa.catalog.models import MenuItem


class Intent(str, Enum):
    greeting = "greeting"
    hours = "hours"
    location = "location"
    contact = "contact"
    parking = "parking"
    wifi = "wifi"
    halal = "halal"
    dine_in = "dine_in"
    reservation = "reservation"
    catering = "catering"
    vegetarian = "vegetarian"
    gluten_free = "gluten_free"
    allergy = "allergy"
    spice_level = "spice_level"
    chef = "chef"
    menu_item = "menu_item"
    fallback = "fallback"


class NormalizedUtterance(BaseModel):
    model_config = ConfigDict(frozen=True)

    lowered: str
    cleaned: str
    tokens: tuple[str, ...] = ()


class Reply(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    intent: Intent
    item: MenuItem | None = None
