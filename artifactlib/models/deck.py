from dataclasses import dataclass, field
from typing import Any

from artifactlib.models.card import Card, CardColor


@dataclass(frozen=True, slots=True)
class DecodedHero:
    """Hero entry as stored in a deck code: card id and deploy turn."""

    id: int
    turn: int


@dataclass(frozen=True, slots=True)
class DecodedCard:
    """Main deck entry as stored in a deck code: card id and copy count."""

    id: int
    count: int


@dataclass
class DecodedDeck:
    """
    Raw contents of a deck code, before resolution against the catalog.

    Attributes:
        name: Deck name (may be empty)
        heroes: Hero entries in code order
        cards: Card entries in code order
    """

    name: str = ""
    heroes: list[DecodedHero] = field(default_factory=list)
    cards: list[DecodedCard] = field(default_factory=list)


def hero_sort_key(hero: "HeroCard") -> int:
    """Heroes are presented by ascending deploy turn."""
    return hero.turn


def card_sort_key(entry: "CardCard") -> tuple[int, int]:
    """
    Presentation order for main deck cards.

    Colored cards come first ordered by mana cost, items last ordered
    by gold cost.
    """
    if entry.color is CardColor.ITEM:
        return (1, entry.card.gold_cost)
    return (0, entry.card.mana_cost)


@dataclass(eq=False)
class HeroCard:
    """
    A resolved hero in a deck.

    Two HeroCards are equal when they deploy on the same turn.
    """

    card: Card
    turn: int
    color: CardColor

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HeroCard):
            return NotImplemented
        return self.turn == other.turn

    def __lt__(self, other: "HeroCard") -> bool:
        return hero_sort_key(self) < hero_sort_key(other)


@dataclass(eq=False)
class CardCard:
    """
    A resolved main deck entry.

    Two CardCards are equal when they hold the same card id; count and
    color are not compared.
    """

    card: Card
    count: int
    color: CardColor

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CardCard):
            return NotImplemented
        return self.card.card_id == other.card.card_id

    def __lt__(self, other: "CardCard") -> bool:
        return card_sort_key(self) < card_sort_key(other)


@dataclass
class Deck:
    """
    A deck resolved against the card catalog.

    Entries keep the order in which they were assembled; use
    sort_deck() for presentation order.
    """

    name: str = ""
    heroes: list[HeroCard] = field(default_factory=list)
    cards: list[CardCard] = field(default_factory=list)

    def card_count(self) -> int:
        """Total copies across all main deck entries."""
        return sum(entry.count for entry in self.cards)
