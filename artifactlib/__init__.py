"""Cached Artifact card catalog with deck code decoding and deck assembly."""

from artifactlib.errors import (
    ArtifactLibError,
    CacheCorruptionError,
    CacheDirectoryError,
    DeckCodeError,
    FetchError,
)
from artifactlib.services.catalog import Catalog

__all__ = [
    "ArtifactLibError",
    "CacheCorruptionError",
    "CacheDirectoryError",
    "Catalog",
    "DeckCodeError",
    "FetchError",
]
