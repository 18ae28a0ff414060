"""
artifactlib services.

Cache refresh, lookup indices, and deck assembly over the card catalog.
"""

from artifactlib.services.cache_store import (
    CacheStore,
    FileCacheStore,
    MemoryCacheStore,
    cache_file_name,
)
from artifactlib.services.card_api import CardSetFetcher, SetFetcher
from artifactlib.services.card_index import build_id_index, build_name_index
from artifactlib.services.catalog import Catalog
from artifactlib.services.catalog_refresher import refresh_card_sets
from artifactlib.services.deck_assembler import (
    assemble_deck,
    included_cards,
    merge_duplicate_cards,
    sort_deck,
)

__all__ = [
    "CacheStore",
    "CardSetFetcher",
    "Catalog",
    "FileCacheStore",
    "MemoryCacheStore",
    "SetFetcher",
    "assemble_deck",
    "build_id_index",
    "build_name_index",
    "cache_file_name",
    "included_cards",
    "merge_duplicate_cards",
    "refresh_card_sets",
    "sort_deck",
]
