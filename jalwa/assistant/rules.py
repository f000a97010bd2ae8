from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from jalwa.assistant.composer import ResponseComposer
from jalwa.assistant.models import Intent


@dataclass(frozen=True, slots=True)
class Rule:
    intent: Intent
    pattern: re.Pattern[str]
    respond: Callable[[ResponseComposer], str]

    def matches(self, lowered: str) -> bool:
        return self.pattern.search(lowered) is not None


def rule(intent: Intent, pattern: str, respond: Callable[[ResponseComposer], str]) -> Rule:
    return Rule(intent=intent, pattern=re.compile(pattern, re.IGNORECASE), respond=respond)


# Checked top to bottom and the first hit wins, so "what vegan items are
# gluten free" answers with the vegetarian list.
DEFAULT_RULES: tuple[Rule, ...] = (
    rule(Intent.greeting, r"hello|hi|hey|namaste|morning|evening", ResponseComposer.greeting),
    rule(Intent.hours, r"hours|open|close|time|when", ResponseComposer.hours),
    rule(Intent.location, r"address|location|where|directions", ResponseComposer.location),
    rule(Intent.contact, r"phone|call|number|contact", ResponseComposer.contact),
    rule(Intent.parking, r"parking|park", ResponseComposer.parking),
    rule(Intent.wifi, r"wifi|internet", ResponseComposer.wifi),
    rule(Intent.halal, r"halal", ResponseComposer.halal),
    rule(Intent.dine_in, r"dine.*in|seating|table", ResponseComposer.dine_in),
    rule(Intent.reservation, r"book|reserve|reservation", ResponseComposer.reservation),
    rule(Intent.catering, r"catering|party|event|tray", ResponseComposer.catering),
    rule(Intent.vegetarian, r"vegan|vegetarian|\bveg\b", ResponseComposer.vegetarian),
    rule(Intent.gluten_free, r"gluten|gf|wheat", ResponseComposer.gluten_free),
    rule(Intent.allergy, r"allergy|nut|dairy", ResponseComposer.allergy),
    rule(Intent.spice_level, r"spicy|hot|mild", ResponseComposer.spice_level),
    rule(Intent.chef, r"chef|cook", ResponseComposer.chef),
)


def match_rule(lowered: str, rules: Sequence[Rule] = DEFAULT_RULES) -> Rule | None:
    return next((candidate for candidate in rules if candidate.matches(lowered)), None)
