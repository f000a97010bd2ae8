from __future__ import annotations

from jalwa.assistant.fuzzy import item_matches, match_menu_item, overlap, required_overlap
from jalwa.assistant.models import NormalizedUtterance
from jalwa.assistant.normalizer import normalize
from jalwa.catalog import MenuItem

from conftest import make_item


def _utterance(tokens: tuple[str, ...], cleaned: str | None = None) -> NormalizedUtterance:
    text = cleaned if cleaned is not None else " ".join(tokens)
    return NormalizedUtterance(lowered=text, cleaned=text, tokens=tokens)


def test_required_overlap_rounds_up() -> None:
    assert required_overlap(1) == 1
    assert required_overlap(2) == 1
    assert required_overlap(3) == 2
    assert required_overlap(5) == 3


def test_overlap_uses_token_in_word_containment() -> None:
    assert overlap(["chick", "curr"], ["butter", "chicken", "curry"]) == 2
    assert overlap(["curries"], ["curry"]) == 0


def test_two_tokens_match_three_word_name() -> None:
    item = make_item("1", "Butter Chicken Curry")

    assert item_matches(item, _utterance(("butter", "chicken")))


def test_single_unrelated_token_does_not_match() -> None:
    item = make_item("1", "Butter Chicken Curry")

    assert not item_matches(item, _utterance(("dosa",)))


def test_half_of_tokens_is_enough() -> None:
    item = make_item("1", "Palak Paneer")

    assert item_matches(item, _utterance(("paneer", "tonight")))
    assert not item_matches(item, _utterance(("paneer", "tonight", "please")))


def test_zero_tokens_never_match_by_intersection() -> None:
    item = make_item("1", "Garlic Naan")

    assert not item_matches(item, _utterance((), cleaned="ok"))


def test_full_name_substring_matches_without_tokens() -> None:
    item = make_item("1", "Dal")

    assert item_matches(item, _utterance((), cleaned="any dal today"))


def test_substring_shortcut_independent_of_tokens() -> None:
    item = make_item("1", "Mango Lassi")
    utterance = normalize("do you have the mango lassi")

    assert item_matches(item, _utterance((), cleaned=utterance.cleaned))


def test_first_match_in_catalog_order_wins(menu_items: list[MenuItem]) -> None:
    # "paneer" hits both Paneer Tikka and Palak Paneer; catalog order decides
    match = match_menu_item(normalize("paneer"), menu_items)

    assert match is not None
    assert match.name == "Paneer Tikka"


def test_no_match_returns_none(menu_items: list[MenuItem]) -> None:
    assert match_menu_item(normalize("tell me a joke"), menu_items) is None


def test_stricter_threshold_needs_more_overlap() -> None:
    item = make_item("1", "Butter Chicken Curry")
    utterance = _utterance(("butter", "paneer"))

    assert item_matches(item, utterance, threshold=0.5)
    assert not item_matches(item, utterance, threshold=1.0)


def test_hyphenated_name_matches_when_typed_exactly() -> None:
    item = make_item("1", "Dal-Makhani")

    assert item_matches(item, normalize("dal-makhani please"))
    assert match_menu_item(normalize("Dal-Makhani please"), [item]) == item
