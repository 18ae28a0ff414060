"""
Deck assembly.

Resolves a decoded deck code against the card id index. Heroes that
reference other cards with "includes" pull those cards into the main
deck (signature spells and items).

Unknown ids are dropped without error. Entries are emitted in assembly
order; sorting and merging are separate, explicit steps.
"""

import logging
from collections.abc import Mapping

from artifactlib.config import INCLUDES_REF_TYPE
from artifactlib.models.card import Card, card_color
from artifactlib.models.deck import (
    CardCard,
    Deck,
    DecodedCard,
    DecodedDeck,
    HeroCard,
    card_sort_key,
    hero_sort_key,
)

logger = logging.getLogger(__name__)


def included_cards(hero: Card) -> list[DecodedCard]:
    """Card entries implied by a hero's "includes" references, in order."""
    return [
        DecodedCard(id=reference.card_id, count=reference.count)
        for reference in hero.references
        if reference.ref_type == INCLUDES_REF_TYPE
    ]


def assemble_deck(decoded: DecodedDeck, id_map: Mapping[int, Card]) -> Deck:
    """
    Build a Deck from decoded hero and card entries.

    Args:
        decoded: Deck name, hero entries and card entries from a deck code
        id_map: Card id index of the catalog

    Returns:
        Deck with heroes in code order and cards in code order followed
        by hero-included cards. Not sorted, not merged: a card present
        both in the code and via a hero reference appears twice.
    """
    pending_cards = list(decoded.cards)
    heroes: list[HeroCard] = []

    for entry in decoded.heroes:
        card = id_map.get(entry.id)
        if card is None:
            logger.debug("Dropping unknown hero id %d", entry.id)
            continue
        pending_cards.extend(included_cards(card))
        heroes.append(HeroCard(card=card, turn=entry.turn, color=card_color(card)))

    cards: list[CardCard] = []
    for entry in pending_cards:
        card = id_map.get(entry.id)
        if card is None:
            logger.debug("Dropping unknown card id %d", entry.id)
            continue
        cards.append(CardCard(card=card, count=entry.count, color=card_color(card)))

    return Deck(name=decoded.name, heroes=heroes, cards=cards)


def sort_deck(deck: Deck) -> Deck:
    """Return a copy of the deck in presentation order.

    Heroes by turn; colored cards by mana cost, then items by gold cost.
    The sort is stable, so ties keep assembly order.
    """
    return Deck(
        name=deck.name,
        heroes=sorted(deck.heroes, key=hero_sort_key),
        cards=sorted(deck.cards, key=card_sort_key),
    )


def merge_duplicate_cards(deck: Deck) -> Deck:
    """Return a copy of the deck with one entry per card id.

    Counts of repeated entries are summed into the first occurrence.
    """
    merged: dict[int, CardCard] = {}
    for entry in deck.cards:
        existing = merged.get(entry.card.card_id)
        if existing is None:
            merged[entry.card.card_id] = CardCard(
                card=entry.card, count=entry.count, color=entry.color
            )
        else:
            existing.count += entry.count

    return Deck(name=deck.name, heroes=list(deck.heroes), cards=list(merged.values()))
