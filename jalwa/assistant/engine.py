from __future__ import annotations

from collections.abc import Sequence

import structlog

from jalwa.assistant.composer import ResponseComposer
from jalwa.assistant.fuzzy import DEFAULT_THRESHOLD, match_menu_item
from jalwa.assistant.models import Intent, Reply
from jalwa.assistant.normalizer import normalize
from jalwa.assistant.rules import DEFAULT_RULES, Rule, match_rule
from jalwa.catalog.store import Catalog

logger = structlog.get_logger(__name__)


class Assistant:
    """Answers one utterance at a time from a fixed catalog snapshot.

    Rules are tried in order; when none fires the utterance is matched
    against menu item names, and when that misses too the reply points the
    guest at the restaurant's phone number. Nothing is remembered between
    calls.
    """

    def __init__(
        self,
        catalog: Catalog,
        rules: Sequence[Rule] = DEFAULT_RULES,
        fuzzy_threshold: float = DEFAULT_THRESHOLD,
        chef_name: str = "Mayur Naik",
    ) -> None:
        if not 0 < fuzzy_threshold <= 1:
            raise ValueError("fuzzy_threshold must be in (0, 1]")
        self.catalog = catalog
        self.rules = tuple(rules)
        self.fuzzy_threshold = fuzzy_threshold
        self.composer = ResponseComposer(catalog, chef_name=chef_name)

    def respond(self, utterance: str) -> Reply:
        normalized = normalize(utterance)

        matched_rule = match_rule(normalized.lowered, self.rules)
        if matched_rule is not None:
            reply = Reply(text=matched_rule.respond(self.composer), intent=matched_rule.intent)
        else:
            item = match_menu_item(normalized, self.catalog.items, self.fuzzy_threshold)
            if item is not None:
                reply = Reply(text=self.composer.menu_item(item), intent=Intent.menu_item, item=item)
            else:
                reply = Reply(text=self.composer.fallback(), intent=Intent.fallback)

        logger.debug(
            "assistant_reply",
            intent=reply.intent.value,
            item_id=reply.item.id if reply.item else None,
            tokens=len(normalized.tokens),
        )
        return reply

    def reply(self, utterance: str) -> str:
        return self.respond(utterance).text
