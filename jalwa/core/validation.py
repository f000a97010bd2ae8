from __future__ import annotations

import re

CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
MAX_SESSION_ID_LENGTH = 128


def sanitize_utterance(value: str, max_length: int) -> str:
    """Strip control characters and surrounding whitespace from user text.

    Newlines and tabs survive; they are plain whitespace to the tokenizer.
    """
    cleaned = CONTROL_CHARS_RE.sub("", value.strip())
    if not cleaned:
        raise ValueError("Message must not be empty")
    if len(cleaned) > max_length:
        raise ValueError("Message is too long")
    return cleaned


def sanitize_session_id(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = CONTROL_CHARS_RE.sub("", value.strip())
    if not cleaned:
        return None
    if len(cleaned) > MAX_SESSION_ID_LENGTH:
        raise ValueError("Session id is too long")
    return cleaned
