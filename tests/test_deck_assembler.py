import pytest

from artifactlib.models import (
    Card,
    CardColor,
    DecodedCard,
    DecodedDeck,
    DecodedHero,
    Reference,
)
from artifactlib.services.deck_assembler import (
    assemble_deck,
    included_cards,
    merge_duplicate_cards,
    sort_deck,
)
from tests.factories import make_card


@pytest.fixture
def id_map() -> dict[int, Card]:
    cards = [
        make_card(
            100,
            "Red Hero",
            card_type="Hero",
            is_red=True,
            references=[
                Reference(card_id=200, ref_type="includes", count=3),
                Reference(card_id=201, ref_type="passive_ability", count=1),
            ],
        ),
        make_card(101, "Blue Hero", card_type="Hero", is_blue=True),
        make_card(
            102,
            "Green Hero",
            card_type="Hero",
            is_green=True,
            references=[Reference(card_id=300, ref_type="includes", count=3)],
        ),
        make_card(200, "Signature Spell", is_red=True, mana_cost=4),
        make_card(201, "Passive", card_type="Passive Ability"),
        make_card(300, "Green Signature", is_green=True, mana_cost=2),
        make_card(400, "Big Blue", is_blue=True, mana_cost=8),
        make_card(401, "Black Bolt", is_black=True, mana_cost=1),
        make_card(500, "Blink Dagger", card_type="Item", gold_cost=9),
        make_card(501, "Healing Salve", card_type="Item", gold_cost=3),
    ]
    return {card.card_id: card for card in cards}


class TestAssembleDeck:
    def test_resolves_heroes_and_cards(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            name="Test Deck",
            heroes=[DecodedHero(id=101, turn=1)],
            cards=[DecodedCard(id=400, count=2), DecodedCard(id=500, count=1)],
        )

        deck = assemble_deck(decoded, id_map)

        assert deck.name == "Test Deck"
        assert [hero.card.card_id for hero in deck.heroes] == [101]
        assert deck.heroes[0].color is CardColor.BLUE
        assert [(entry.card.card_id, entry.count) for entry in deck.cards] == [(400, 2), (500, 1)]
        assert deck.cards[1].color is CardColor.ITEM

    def test_hero_includes_are_added(self, id_map: dict[int, Card]) -> None:
        """An "includes" reference adds that card even if absent from the code."""
        decoded = DecodedDeck(heroes=[DecodedHero(id=100, turn=1)], cards=[])

        deck = assemble_deck(decoded, id_map)

        assert [(entry.card.card_id, entry.count) for entry in deck.cards] == [(200, 3)]
        assert deck.cards[0].color is CardColor.RED

    def test_other_reference_types_are_ignored(self, id_map: dict[int, Card]) -> None:
        deck = assemble_deck(DecodedDeck(heroes=[DecodedHero(id=100, turn=1)]), id_map)

        assert 201 not in [entry.card.card_id for entry in deck.cards]

    def test_included_cards_follow_original_cards(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=102, turn=2), DecodedHero(id=100, turn=1)],
            cards=[DecodedCard(id=401, count=3)],
        )

        deck = assemble_deck(decoded, id_map)

        assert [entry.card.card_id for entry in deck.cards] == [401, 300, 200]

    def test_heroes_keep_code_order(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=102, turn=3), DecodedHero(id=101, turn=1)],
        )

        deck = assemble_deck(decoded, id_map)

        assert [hero.turn for hero in deck.heroes] == [3, 1]

    def test_unknown_ids_are_dropped(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=101, turn=1), DecodedHero(id=9999, turn=2)],
            cards=[
                DecodedCard(id=400, count=1),
                DecodedCard(id=8888, count=2),
                DecodedCard(id=7777, count=1),
            ],
        )

        deck = assemble_deck(decoded, id_map)

        assert len(deck.heroes) == len(decoded.heroes) - 1
        assert len(deck.cards) == len(decoded.cards) - 2

    def test_unknown_hero_contributes_no_includes(self) -> None:
        deck = assemble_deck(DecodedDeck(heroes=[DecodedHero(id=1, turn=1)]), {})

        assert deck.heroes == []
        assert deck.cards == []

    def test_duplicate_include_is_not_merged(self, id_map: dict[int, Card]) -> None:
        """A card in the code and included by a hero appears twice."""
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=100, turn=1)],
            cards=[DecodedCard(id=200, count=1)],
        )

        deck = assemble_deck(decoded, id_map)

        assert [(entry.card.card_id, entry.count) for entry in deck.cards] == [
            (200, 1),
            (200, 3),
        ]

    def test_does_not_mutate_decoded_deck(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(heroes=[DecodedHero(id=100, turn=1)], cards=[])

        assemble_deck(decoded, id_map)

        assert decoded.cards == []


class TestIncludedCards:
    def test_only_includes(self, id_map: dict[int, Card]) -> None:
        assert included_cards(id_map[100]) == [DecodedCard(id=200, count=3)]

    def test_no_references(self, id_map: dict[int, Card]) -> None:
        assert included_cards(id_map[101]) == []


class TestSortDeck:
    def test_presentation_order(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[
                DecodedHero(id=102, turn=3),
                DecodedHero(id=100, turn=1),
                DecodedHero(id=101, turn=2),
            ],
            cards=[
                DecodedCard(id=500, count=1),
                DecodedCard(id=400, count=1),
                DecodedCard(id=501, count=1),
                DecodedCard(id=401, count=1),
            ],
        )
        deck = assemble_deck(decoded, id_map)

        ordered = sort_deck(deck)

        assert [hero.turn for hero in ordered.heroes] == [1, 2, 3]
        # colored by mana cost (401:1, 300:2, 200:4, 400:8), then items by gold (501:3, 500:9)
        assert [entry.card.card_id for entry in ordered.cards] == [401, 300, 200, 400, 501, 500]

    def test_original_deck_unchanged(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=102, turn=3), DecodedHero(id=101, turn=1)],
        )
        deck = assemble_deck(decoded, id_map)

        sort_deck(deck)

        assert [hero.turn for hero in deck.heroes] == [3, 1]

    def test_builtin_sorted_matches(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(cards=[DecodedCard(id=500, count=1), DecodedCard(id=401, count=1)])
        deck = assemble_deck(decoded, id_map)

        assert [entry.card.card_id for entry in sorted(deck.cards)] == [401, 500]


class TestMergeDuplicateCards:
    def test_sums_counts(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=100, turn=1)],
            cards=[DecodedCard(id=200, count=1), DecodedCard(id=400, count=2)],
        )
        deck = assemble_deck(decoded, id_map)

        merged = merge_duplicate_cards(deck)

        assert [(entry.card.card_id, entry.count) for entry in merged.cards] == [
            (200, 4),
            (400, 2),
        ]

    def test_leaves_original_untouched(self, id_map: dict[int, Card]) -> None:
        decoded = DecodedDeck(
            heroes=[DecodedHero(id=100, turn=1)],
            cards=[DecodedCard(id=200, count=1)],
        )
        deck = assemble_deck(decoded, id_map)

        merge_duplicate_cards(deck)

        assert [entry.count for entry in deck.cards] == [1, 3]
