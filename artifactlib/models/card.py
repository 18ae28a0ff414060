"""
Card catalog models.

These mirror the card set JSON served by the Artifact card set API.
Unknown fields in the API payload are ignored; every modeled field
survives a dump/validate round trip unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class TranslatedText(BaseModel):
    """Localized string, one field per supported language."""

    english: str = ""
    german: str = ""
    french: str = ""
    italian: str = ""
    koreana: str = ""
    spanish: str = ""
    schinese: str = ""
    tchinese: str = ""
    russian: str = ""
    thai: str = ""
    japanese: str = ""
    portuguese: str = ""
    polish: str = ""
    danish: str = ""
    dutch: str = ""
    finnish: str = ""
    norwegian: str = ""
    swedish: str = ""
    hungarian: str = ""
    czech: str = ""
    romanian: str = ""
    turkish: str = ""
    brazilian: str = ""
    bulgarian: str = ""
    greek: str = ""
    ukrainian: str = ""
    latam: str = ""
    vietnamese: str = ""


class Image(BaseModel):
    default: str = ""


class Reference(BaseModel):
    """
    Directed edge from a card to another card.

    Only ref_type "includes" has deck-assembly meaning: the referenced
    card is added to the deck `count` times alongside the referencing hero.
    """

    card_id: int = 0
    ref_type: str = ""
    count: int = 0


class CardColor(str, Enum):
    """Deck color of a card, derived from its color flags."""

    RED = "red"
    BLUE = "blue"
    BLACK = "black"
    GREEN = "green"
    ITEM = "item"


class Card(BaseModel):
    """
    A single card definition from a card set.

    Equality and hashing use card_id only, so two Card values with the
    same id compare equal even if their other fields differ.
    """

    card_id: int
    base_card_id: int
    card_type: str
    sub_type: str = ""
    card_name: TranslatedText
    card_text: TranslatedText = Field(default_factory=TranslatedText)
    mini_image: Image = Field(default_factory=Image)
    large_image: Image = Field(default_factory=Image)
    ingame_image: Image = Field(default_factory=Image)
    illustrator: str = ""
    is_red: bool = False
    is_green: bool = False
    is_blue: bool = False
    is_black: bool = False
    gold_cost: int = 0
    mana_cost: int = 0
    attack: int = 0
    armor: int = 0
    hit_points: int = 0
    references: list[Reference] = Field(default_factory=list)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.card_id == other.card_id

    def __hash__(self) -> int:
        return hash(self.card_id)

    @property
    def name(self) -> str:
        """English display name."""
        return self.card_name.english

    @property
    def color(self) -> CardColor:
        return card_color(self)

    @property
    def is_item(self) -> bool:
        return not (self.is_red or self.is_green or self.is_blue or self.is_black)


def card_color(card: Card) -> CardColor:
    """
    Derive a card's color from its flags.

    Precedence when several flags are set: red, blue, black, green.
    A card with no color flag is an item.
    """
    if card.is_red:
        return CardColor.RED
    if card.is_blue:
        return CardColor.BLUE
    if card.is_black:
        return CardColor.BLACK
    if card.is_green:
        return CardColor.GREEN
    return CardColor.ITEM


class SetInfo(BaseModel):
    set_id: int
    pack_item_def: int = 0
    name: TranslatedText = Field(default_factory=TranslatedText)


class CardSet(BaseModel):
    version: int
    set_info: SetInfo
    card_list: list[Card] = Field(default_factory=list)

    @property
    def set_id(self) -> int:
        return self.set_info.set_id


class CardSetJson(BaseModel):
    """Top level of the card set document served by the CDN."""

    card_set: CardSet


# =============================================================================
# NAME LOOKUP RESULT
# =============================================================================


@dataclass(frozen=True, slots=True)
class SingleCard:
    """Exactly one card carries the looked-up name."""

    card: Card


@dataclass(frozen=True, slots=True)
class MultipleCards:
    """
    Several distinct cards share the looked-up name.

    Happens in real data, e.g. a hero and its signature spell.
    Cards are kept in the order they were first seen in the catalog.
    """

    cards: tuple[Card, ...]


NamedCard = SingleCard | MultipleCards
