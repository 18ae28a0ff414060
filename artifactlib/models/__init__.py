from artifactlib.models.cache import ExpirationWrapper, SetRedirect
from artifactlib.models.card import (
    Card,
    CardColor,
    CardSet,
    CardSetJson,
    Image,
    MultipleCards,
    NamedCard,
    Reference,
    SetInfo,
    SingleCard,
    TranslatedText,
    card_color,
)
from artifactlib.models.deck import (
    CardCard,
    Deck,
    DecodedCard,
    DecodedDeck,
    DecodedHero,
    HeroCard,
    card_sort_key,
    hero_sort_key,
)

__all__ = [
    "Card",
    "CardCard",
    "CardColor",
    "CardSet",
    "CardSetJson",
    "Deck",
    "DecodedCard",
    "DecodedDeck",
    "DecodedHero",
    "ExpirationWrapper",
    "HeroCard",
    "Image",
    "MultipleCards",
    "NamedCard",
    "Reference",
    "SetInfo",
    "SetRedirect",
    "SingleCard",
    "TranslatedText",
    "card_color",
    "card_sort_key",
    "hero_sort_key",
]
