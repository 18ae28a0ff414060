"""
Exception hierarchy for artifactlib.

Storage and network problems are fatal to a catalog refresh and surface
as exceptions. Missing catalog references (unknown card ids or names)
are NOT errors: lookups return None and deck assembly drops them.
"""

from pathlib import Path


class ArtifactLibError(Exception):
    """Base class for all errors raised by artifactlib."""

    pass


class CacheDirectoryError(ArtifactLibError):
    """Raised when the cache directory cannot be created, read, or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cache directory error at {path}: {reason}")


class CacheCorruptionError(ArtifactLibError):
    """Raised when a cache file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cache file {path} is corrupted: {reason}")


class FetchError(ArtifactLibError):
    """Raised when fetching a card set from the API fails.

    Attributes:
        set_index: The card set being fetched
        step: Which request failed ("redirect" or "card_set")
    """

    def __init__(self, set_index: int, step: str, reason: str) -> None:
        self.set_index = set_index
        self.step = step
        self.reason = reason
        super().__init__(f"Failed to fetch card set {set_index} ({step}): {reason}")


class DeckCodeError(ArtifactLibError):
    """Raised when a deck code cannot be decoded or encoded."""

    pass
