"""
Card set cache storage.

Each card set is persisted as one ExpirationWrapper JSON document named
after its set id. Stores never decide freshness themselves beyond what
the envelope reports; the refresher owns that policy.

No locking is performed. Two processes refreshing the same directory
may race on the same file.
"""

import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from artifactlib.config import CACHE_FILE_PATTERN
from artifactlib.errors import CacheCorruptionError, CacheDirectoryError
from artifactlib.models.cache import ExpirationWrapper

logger = logging.getLogger(__name__)


def cache_file_name(set_id: int) -> str:
    return f"card_set_{set_id}.json"


class CacheStore(Protocol):
    """Storage for card set envelopes."""

    def load_all(self) -> list[ExpirationWrapper]:
        """Return every persisted envelope, fresh or not."""
        ...

    def save(self, wrapper: ExpirationWrapper) -> None:
        """Persist an envelope, replacing any previous one for the same set."""
        ...


class FileCacheStore:
    """Cache store backed by a directory of JSON files."""

    def __init__(self, cache_dir: Path) -> None:
        """Initialize store, creating the cache directory if needed.

        Args:
            cache_dir: Directory holding card_set_<id>.json files

        Raises:
            CacheDirectoryError: If the directory cannot be created
        """
        self.cache_dir = cache_dir
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(cache_dir, str(e)) from e

    def _cache_path(self, set_id: int) -> Path:
        return self.cache_dir / cache_file_name(set_id)

    def load_all(self) -> list[ExpirationWrapper]:
        """
        Read every cached envelope in the directory.

        Returns:
            Envelopes in file name order

        Raises:
            CacheDirectoryError: If the directory cannot be listed
            CacheCorruptionError: If any cache file is unreadable or invalid
        """
        try:
            paths = sorted(self.cache_dir.glob(CACHE_FILE_PATTERN))
        except OSError as e:
            raise CacheDirectoryError(self.cache_dir, str(e)) from e

        return [self._read(path) for path in paths]

    def _read(self, path: Path) -> ExpirationWrapper:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CacheCorruptionError(path, str(e)) from e

        try:
            return ExpirationWrapper.model_validate_json(raw)
        except ValidationError as e:
            raise CacheCorruptionError(path, str(e)) from e

    def save(self, wrapper: ExpirationWrapper) -> None:
        """
        Write an envelope to card_set_<set_id>.json.

        Raises:
            CacheDirectoryError: If the file cannot be written
        """
        path = self._cache_path(wrapper.set_id)
        try:
            path.write_text(wrapper.model_dump_json(), encoding="utf-8")
        except OSError as e:
            raise CacheDirectoryError(self.cache_dir, str(e)) from e
        logger.debug("Wrote card set %d to %s", wrapper.set_id, path)


class MemoryCacheStore:
    """In-process cache store; envelopes are held serialized, keyed by set id."""

    def __init__(self, wrappers: list[ExpirationWrapper] | None = None) -> None:
        self._documents: dict[int, str] = {}
        for wrapper in wrappers or []:
            self.save(wrapper)

    def load_all(self) -> list[ExpirationWrapper]:
        return [
            ExpirationWrapper.model_validate_json(self._documents[set_id])
            for set_id in sorted(self._documents)
        ]

    def save(self, wrapper: ExpirationWrapper) -> None:
        self._documents[wrapper.set_id] = wrapper.model_dump_json()

    def set_ids(self) -> list[int]:
        return sorted(self._documents)
