from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# CATALOG CONSTANTS
# =============================================================================

# Number of card sets published by the API; indices 0..CURRENT_SET-1
CURRENT_SET = 2

# Reference type that pulls extra cards into a deck alongside a hero
INCLUDES_REF_TYPE = "includes"

CACHE_FILE_PATTERN = "card_set_*.json"


class Settings(BaseSettings):
    """Library settings loaded from environment (prefix ARTIFACTLIB_)."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARTIFACTLIB_")

    app_name: str = "artifactlib"
    debug: bool = False

    api_base_url: str = "https://playartifact.com/cardset"

    cache_dir: Path = Path.home() / ".cache" / "artifactlib"

    current_set: int = CURRENT_SET

    http_timeout: float = 30.0


settings = Settings()
