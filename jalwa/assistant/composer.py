from __future__ import annotations

from jalwa.catalog.models import MenuItem
from jalwa.catalog.store import Catalog

WELCOME_TEXT = (
    "Namaste! I'm the Jalwa AI Assistant. How can I help you today? "
    "(Ask me about our menu, hours, dietary options, or catering!)"
)

GREETING_TEXT = "Hello! Welcome to Jalwa. How can I assist you with your dining plans today?"
PARKING_TEXT = "There is street parking available on Glenridge Ave and municipal lots nearby."
WIFI_TEXT = "Yes, we offer complimentary Wi-Fi for our dining guests."
HALAL_TEXT = "Yes, all of our meats are Halal certified."
DINE_IN_TEXT = (
    "Yes, we offer comfortable dine-in service with a modern ambiance. "
    "We recommend booking a table for weekends."
)
CATERING_TEXT = (
    "We offer exceptional catering for all occasions! You can view our Party Trays menu "
    "or submit an inquiry on our Catering page. We handle corporate events, weddings, "
    "and private parties."
)
ALLERGY_TEXT = (
    "Please let the restaurant staff know your allergies when you place the order so they "
    "can confirm and take extra care. We take allergies very seriously."
)
SPICE_TEXT = (
    "Our dishes can be customized to your preference! Whether you like it mild, medium, "
    "or Indian hot, just let us know when ordering."
)

VEGETARIAN_LIMIT = 4
GLUTEN_FREE_LIMIT = 3


def format_price(price: float) -> str:
    """Render a price the way the menu shows it: ``18`` not ``18.0``."""
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price}"


def join_names(items: list[MenuItem], limit: int) -> str:
    return ", ".join(item.name for item in items[:limit])


class ResponseComposer:
    """Builds reply text, filling templates from a catalog snapshot."""

    def __init__(self, catalog: Catalog, chef_name: str = "Mayur Naik") -> None:
        self.catalog = catalog
        self.chef_name = chef_name

    def greeting(self) -> str:
        return GREETING_TEXT

    def hours(self) -> str:
        return "\n".join(["We are open:", *self.catalog.contact.hours])

    def location(self) -> str:
        return f"We are located at {self.catalog.contact.address}."

    def contact(self) -> str:
        return f"You can reach us at {self.catalog.contact.phone}."

    def parking(self) -> str:
        return PARKING_TEXT

    def wifi(self) -> str:
        return WIFI_TEXT

    def halal(self) -> str:
        return HALAL_TEXT

    def dine_in(self) -> str:
        return DINE_IN_TEXT

    def reservation(self) -> str:
        return (
            f"For reservations, please call us at {self.catalog.contact.phone}. "
            "We recommend booking in advance for weekends!"
        )

    def catering(self) -> str:
        return CATERING_TEXT

    def vegetarian(self) -> str:
        names = join_names(self.catalog.vegetarian_items(), VEGETARIAN_LIMIT)
        if not names:
            return (
                "We can prepare vegetarian and vegan dishes on request. "
                "Please ask our staff for today's options."
            )
        return f"We have excellent vegetarian and vegan options! Some favorites include: {names}."

    def gluten_free(self) -> str:
        names = join_names(self.catalog.gluten_free_items(), GLUTEN_FREE_LIMIT)
        if not names:
            return "Please ask our staff about gluten-free options and inform your server of any allergies."
        return (
            f"Many of our curries and tandoor items are Gluten-Free, such as: {names}. "
            "Please inform your server of any allergies."
        )

    def allergy(self) -> str:
        return ALLERGY_TEXT

    def spice_level(self) -> str:
        return SPICE_TEXT

    def chef(self) -> str:
        return (
            f"Our Head Chef is {self.chef_name}, who brings years of experience from "
            "prestigious establishments to create our modern Indian cuisine."
        )

    def menu_item(self, item: MenuItem) -> str:
        text = f"Yes! We have {item.name} ({format_price(item.price)})."
        if item.description:
            text = f"{text} {item.description}"
        return text

    def fallback(self) -> str:
        return (
            "I'm not 100% sure about that specific detail. Please call the restaurant "
            f"directly at {self.catalog.contact.phone} so our team can help you!"
        )
