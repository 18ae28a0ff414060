from typing import Any

from artifactlib.models import (
    CardCard,
    CardColor,
    CardSetJson,
    HeroCard,
    card_color,
)
from tests.factories import make_card


class TestCardSetParsing:
    def test_parses_api_document(self, card_set_response: dict[str, Any]) -> None:
        """Card set JSON from the API validates into models."""
        card_set = CardSetJson.model_validate(card_set_response).card_set

        assert card_set.version == 1
        assert card_set.set_id == 0
        assert card_set.set_info.name.english == "Base Set"
        assert len(card_set.card_list) == 4

    def test_missing_languages_default_empty(self, card_set_response: dict[str, Any]) -> None:
        card = CardSetJson.model_validate(card_set_response).card_set.card_list[0]

        assert card.card_name.english == "Debbi the Cunning"
        assert card.card_name.french == "Debbi la Rusée"
        assert card.card_name.japanese == ""
        assert card.card_text.english == ""

    def test_missing_numbers_and_flags_default(self, card_set_response: dict[str, Any]) -> None:
        passive = CardSetJson.model_validate(card_set_response).card_set.card_list[2]

        assert passive.mana_cost == 0
        assert passive.gold_cost == 0
        assert passive.is_red is False
        assert passive.sub_type == ""
        assert passive.mini_image.default == ""

    def test_reference_fields_default(self, card_set_response: dict[str, Any]) -> None:
        hero = CardSetJson.model_validate(card_set_response).card_set.card_list[0]

        assert hero.references[0].ref_type == "includes"
        assert hero.references[0].count == 3
        assert hero.references[1].count == 0


class TestCardIdentity:
    def test_equal_when_ids_match(self) -> None:
        """Cards compare by id only."""
        assert make_card(1, "Storm Spirit") == make_card(1, "Something Else", mana_cost=9)

    def test_not_equal_when_ids_differ(self) -> None:
        assert make_card(1, "A") != make_card(2, "A")

    def test_hash_follows_id(self) -> None:
        cards = {make_card(1, "A"), make_card(1, "B"), make_card(2, "A")}
        assert len(cards) == 2


class TestCardColor:
    def test_single_flags(self) -> None:
        assert card_color(make_card(1, is_red=True)) is CardColor.RED
        assert card_color(make_card(1, is_blue=True)) is CardColor.BLUE
        assert card_color(make_card(1, is_black=True)) is CardColor.BLACK
        assert card_color(make_card(1, is_green=True)) is CardColor.GREEN

    def test_no_flags_is_item(self) -> None:
        card = make_card(1, card_type="Item")
        assert card_color(card) is CardColor.ITEM
        assert card.is_item

    def test_precedence(self) -> None:
        """Red beats blue beats black beats green."""
        assert card_color(make_card(1, is_red=True, is_blue=True)) is CardColor.RED
        assert card_color(make_card(1, is_blue=True, is_black=True)) is CardColor.BLUE
        assert card_color(make_card(1, is_black=True, is_green=True)) is CardColor.BLACK
        everything = make_card(1, is_red=True, is_blue=True, is_black=True, is_green=True)
        assert card_color(everything) is CardColor.RED

    def test_black_reachable_without_red_or_blue(self) -> None:
        assert make_card(1, is_black=True, is_green=True).color is CardColor.BLACK


class TestDeckEntryEquality:
    def test_hero_equality_uses_turn_only(self) -> None:
        first = HeroCard(card=make_card(1), turn=1, color=CardColor.RED)
        other = HeroCard(card=make_card(2), turn=1, color=CardColor.BLUE)
        later = HeroCard(card=make_card(1), turn=2, color=CardColor.RED)

        assert first == other
        assert first != later

    def test_card_equality_uses_card_id_only(self) -> None:
        two = CardCard(card=make_card(5), count=2, color=CardColor.RED)
        three = CardCard(card=make_card(5), count=3, color=CardColor.ITEM)
        different = CardCard(card=make_card(6), count=2, color=CardColor.RED)

        assert two == three
        assert two != different

    def test_hero_ordering_by_turn(self) -> None:
        early = HeroCard(card=make_card(9), turn=1, color=CardColor.RED)
        late = HeroCard(card=make_card(1), turn=3, color=CardColor.RED)

        assert early < late
        assert not late < early

    def test_items_order_after_colored_cards(self) -> None:
        cheap_item = CardCard(card=make_card(1, gold_cost=1), count=1, color=CardColor.ITEM)
        pricey_spell = CardCard(card=make_card(2, mana_cost=8), count=1, color=CardColor.BLUE)

        assert pricey_spell < cheap_item

    def test_colored_cards_order_by_mana_cost(self) -> None:
        cheap = CardCard(card=make_card(1, mana_cost=2, gold_cost=20), count=1, color=CardColor.RED)
        pricey = CardCard(card=make_card(2, mana_cost=5), count=1, color=CardColor.GREEN)

        assert cheap < pricey

    def test_items_order_by_gold_cost(self) -> None:
        cheap = CardCard(card=make_card(1, gold_cost=3, mana_cost=9), count=1, color=CardColor.ITEM)
        pricey = CardCard(card=make_card(2, gold_cost=10), count=1, color=CardColor.ITEM)

        assert cheap < pricey
