"""Lookup indices over merged card sets."""

from collections.abc import Iterable

from artifactlib.models.card import Card, CardSet, MultipleCards, NamedCard, SingleCard


def _iter_cards(sets: Iterable[CardSet]) -> Iterable[Card]:
    for card_set in sets:
        yield from card_set.card_list


def normalize_name(name: str) -> str:
    return name.lower()


def build_id_index(sets: Iterable[CardSet]) -> dict[int, Card]:
    """
    Map card ids to cards.

    Card ids are assumed globally unique. If two sets define the same id,
    the set iterated last wins.
    """
    return {card.card_id: card for card in _iter_cards(sets)}


def build_name_index(sets: Iterable[CardSet]) -> dict[str, NamedCard]:
    """
    Map lowercased English card names to the card(s) carrying them.

    Names are not unique in the catalog: a name shared by several cards
    maps to MultipleCards in first-seen order, otherwise to SingleCard.
    """
    index: dict[str, NamedCard] = {}
    for card in _iter_cards(sets):
        key = normalize_name(card.card_name.english)
        match index.get(key):
            case None:
                index[key] = SingleCard(card)
            case SingleCard(card=previous):
                index[key] = MultipleCards((previous, card))
            case MultipleCards(cards=previous_cards):
                index[key] = MultipleCards((*previous_cards, card))
    return index
