from jalwa.assistant.composer import WELCOME_TEXT, ResponseComposer
from jalwa.assistant.engine import Assistant
from jalwa.assistant.models import Intent, NormalizedUtterance, Reply
from jalwa.assistant.normalizer import is_blank, normalize
from jalwa.assistant.rules import DEFAULT_RULES, Rule

__all__ = [
    "Assistant",
    "DEFAULT_RULES",
    "Intent",
    "NormalizedUtterance",
    "Reply",
    "ResponseComposer",
    "Rule",
    "WELCOME_TEXT",
    "is_blank",
    "normalize",
]
