from __future__ import annotations

import os

os.environ.setdefault("JALWA_REPLY_DELAY_MS", "0")
os.environ.setdefault("JALWA_RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("JALWA_LOG_LEVEL", "WARNING")

import pytest

from jalwa.assistant import Assistant
from jalwa.catalog import Catalog, ContactInfo, MenuItem
from jalwa.session import ChatSession

PHONE = "(973) 555-0142"


def make_item(item_id: str, name: str, price: float = 10, category: str = "Curries", **flags: bool) -> MenuItem:
    return MenuItem(
        id=item_id,
        name=name,
        description=f"House {name.lower()}.",
        price=price,
        category=category,
        isVegan=flags.get("vegan", False),
        isVegetarian=flags.get("vegetarian", False),
        isGlutenFree=flags.get("gluten_free", False),
    )


@pytest.fixture()
def contact() -> ContactInfo:
    return ContactInfo(
        address="24 Glenridge Ave, Montclair, NJ 07042",
        phone=PHONE,
        hours=("Mon-Fri 11-10", "Sat-Sun 12-11"),
    )


@pytest.fixture()
def menu_items() -> list[MenuItem]:
    return [
        make_item("1", "Samosa Chaat", 9, "Appetizers", vegetarian=True),
        make_item("2", "Butter Chicken Curry", 21, "Curries", gluten_free=True),
        make_item("3", "Chana Masala", 16, "Curries", vegan=True, vegetarian=True, gluten_free=True),
        make_item("4", "Paneer Tikka", 16, "Tandoor", vegetarian=True, gluten_free=True),
        make_item("5", "Garlic Naan", 4.5, "Breads", vegetarian=True),
        make_item("6", "Palak Paneer", 18, "Curries", vegetarian=True, gluten_free=True),
        make_item("7", "Mango Lassi", 6, "Drinks", vegetarian=True, gluten_free=True),
    ]


@pytest.fixture()
def catalog(menu_items: list[MenuItem], contact: ContactInfo) -> Catalog:
    return Catalog(menu_items, contact)


@pytest.fixture()
def assistant(catalog: Catalog) -> Assistant:
    return Assistant(catalog)


@pytest.fixture()
def session(assistant: Assistant) -> ChatSession:
    return ChatSession(assistant, reply_delay=0)
