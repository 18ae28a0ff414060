"""
Card set cache refresh.

Reads every cached envelope, keeps the fresh ones, and fetches only the
sets that are missing or expired. Newly fetched sets are written back to
the cache before being returned.

Failure is all-or-nothing: a corrupt cache file or a failed fetch aborts
the whole refresh and nothing partial is returned.
"""

import logging
import time
from collections.abc import Callable

from artifactlib.config import CURRENT_SET
from artifactlib.errors import FetchError
from artifactlib.models.cache import ExpirationWrapper
from artifactlib.models.card import CardSet
from artifactlib.services.cache_store import CacheStore
from artifactlib.services.card_api import CARD_SET_STEP, SetFetcher

logger = logging.getLogger(__name__)


def unix_now() -> int:
    return int(time.time())


def refresh_card_sets(
    store: CacheStore,
    fetcher: SetFetcher,
    current_set: int = CURRENT_SET,
    now: Callable[[], int] = unix_now,
) -> list[CardSet]:
    """
    Return every known card set, using the cache where it is still fresh.

    Args:
        store: Where envelopes are read from and written to
        fetcher: Source of fresh card sets
        current_set: Number of expected set indices (0..current_set-1)
        now: Clock returning unix seconds

    Returns:
        Card sets accepted from cache, followed by freshly fetched ones

    Raises:
        CacheDirectoryError: If the cache cannot be listed or written
        CacheCorruptionError: If a cache file cannot be parsed
        FetchError: If any missing or expired set cannot be fetched, or the
            API answers an index with a different set
    """
    needed = set(range(current_set))
    card_sets: list[CardSet] = []
    timestamp = now()

    logger.info("Loading card sets from cache")
    for wrapper in store.load_all():
        set_id = wrapper.set_id
        if wrapper.is_fresh(timestamp):
            logger.info("Card set %d is up to date", set_id)
            if set_id not in needed:
                logger.warning("Cached card set %d is not a known set index", set_id)
            needed.discard(set_id)
            card_sets.append(wrapper.card_set)
        else:
            logger.info("Card set %d is expired", set_id)

    fetched: list[ExpirationWrapper] = []
    for set_index in sorted(needed):
        logger.info("Fetching card set %d from API", set_index)
        wrapper = fetcher.fetch_set(set_index)
        if wrapper.set_id != set_index:
            raise FetchError(
                set_index, CARD_SET_STEP, f"response holds card set {wrapper.set_id}"
            )
        fetched.append(wrapper)

    for wrapper in fetched:
        store.save(wrapper)
        card_sets.append(wrapper.card_set)

    logger.info(
        "Card sets ready: %d from cache, %d fetched",
        len(card_sets) - len(fetched),
        len(fetched),
    )
    return card_sets
