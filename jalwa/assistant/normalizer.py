from __future__ import annotations

import re

from jalwa.assistant.models import NormalizedUtterance

PUNCTUATION_RE = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
STOP_WORDS = frozenset({"have", "you", "the", "menu", "for", "with", "and", "are", "what", "does"})
MIN_TOKEN_LENGTH = 3


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def tokenize(cleaned: str) -> tuple[str, ...]:
    return tuple(
        word
        for word in cleaned.split()
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS
    )


def normalize(text: str) -> NormalizedUtterance:
    lowered = text.lower()
    cleaned = PUNCTUATION_RE.sub("", lowered)
    return NormalizedUtterance(lowered=lowered, cleaned=cleaned, tokens=tokenize(cleaned))
