"""
Card catalog entry point.

Constructing a Catalog refreshes the card set cache and builds the
lookup indices. There is no incremental update: build a new Catalog to
pick up new data.

Example:
    catalog = Catalog()
    named = catalog.card_from_name("Storm Spirit")
    deck = catalog.get_deck("ADCJWkTZX05uwGDCRV4XQGy3QGLmqUBg4GQJgGLGgO7AaABR3JlZW4vQmxhY2sgRXhhbXBsZQ__")
"""

import logging
from collections.abc import Callable
from pathlib import Path

from artifactlib.config import settings
from artifactlib.models.card import Card, CardSet, NamedCard
from artifactlib.models.deck import Deck, DecodedDeck
from artifactlib.parsers.deck_code import decode_deck_code
from artifactlib.services.cache_store import CacheStore, FileCacheStore
from artifactlib.services.card_api import CardSetFetcher, SetFetcher
from artifactlib.services.card_index import build_id_index, build_name_index, normalize_name
from artifactlib.services.catalog_refresher import refresh_card_sets, unix_now
from artifactlib.services.deck_assembler import assemble_deck

logger = logging.getLogger(__name__)


class Catalog:
    """
    Merged, indexed view of every Artifact card set.

    Attributes:
        card_sets: All card sets, cached first then freshly fetched
        id_map: card_id -> Card
        name_map: lowercased English name -> SingleCard | MultipleCards
    """

    def __init__(
        self,
        store: CacheStore | None = None,
        fetcher: SetFetcher | None = None,
        *,
        cache_dir: Path | None = None,
        current_set: int | None = None,
        now: Callable[[], int] = unix_now,
    ) -> None:
        """Refresh card sets and build indices.

        Args:
            store: Cache store. Defaults to a FileCacheStore at cache_dir
            fetcher: Card set source. Defaults to the public API
            cache_dir: Directory for the default store. Defaults to settings.cache_dir
            current_set: Number of expected sets. Defaults to settings.current_set
            now: Clock returning unix seconds

        Raises:
            CacheDirectoryError, CacheCorruptionError, FetchError: See refresh_card_sets
        """
        if store is None:
            store = FileCacheStore(cache_dir or settings.cache_dir)
        if fetcher is None:
            fetcher = CardSetFetcher()
        if current_set is None:
            current_set = settings.current_set

        self.card_sets: list[CardSet] = refresh_card_sets(store, fetcher, current_set, now)
        self.id_map: dict[int, Card] = build_id_index(self.card_sets)
        self.name_map: dict[str, NamedCard] = build_name_index(self.card_sets)
        logger.info(
            "Catalog built: %d sets, %d cards, %d names",
            len(self.card_sets),
            len(self.id_map),
            len(self.name_map),
        )

    def card_from_id(self, card_id: int) -> Card | None:
        return self.id_map.get(card_id)

    def card_from_name(self, name: str) -> NamedCard | None:
        """Look up cards by English name, case-insensitively."""
        return self.name_map.get(normalize_name(name))

    def assemble_deck(self, decoded: DecodedDeck) -> Deck:
        return assemble_deck(decoded, self.id_map)

    def get_deck(self, code: str) -> Deck:
        """
        Decode a deck code and resolve it against the catalog.

        Hero "includes" references are added to the main deck. Unknown
        ids are dropped.

        Raises:
            DeckCodeError: If the deck code is malformed
        """
        return self.assemble_deck(decode_deck_code(code))
