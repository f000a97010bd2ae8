from __future__ import annotations

import math
from collections.abc import Sequence

from jalwa.assistant.models import NormalizedUtterance
from jalwa.catalog.models import MenuItem

DEFAULT_THRESHOLD = 0.5


def required_overlap(token_count: int, threshold: float = DEFAULT_THRESHOLD) -> int:
    return math.ceil(token_count * threshold)


def overlap(tokens: Sequence[str], name_words: Sequence[str]) -> int:
    """Count tokens found inside any word of the item name.

    Containment runs token-in-word, so "chick" hits "chicken" but "curries"
    does not hit "curry".
    """
    return sum(1 for token in tokens if any(token in word for word in name_words))


def item_matches(
    item: MenuItem,
    utterance: NormalizedUtterance,
    threshold: float = DEFAULT_THRESHOLD,
) -> bool:
    name = item.name.lower()
    if name in utterance.cleaned or name in utterance.lowered:
        return True
    tokens = utterance.tokens
    if not tokens:
        return False
    return overlap(tokens, name.split()) >= required_overlap(len(tokens), threshold)


def match_menu_item(
    utterance: NormalizedUtterance,
    items: Sequence[MenuItem],
    threshold: float = DEFAULT_THRESHOLD,
) -> MenuItem | None:
    """Return the first item in catalog order that plausibly names the utterance."""
    return next((item for item in items if item_matches(item, utterance, threshold)), None)
