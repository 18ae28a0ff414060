"""
Refresh the Artifact card set cache.

Run this job to pull any missing or expired card sets into the local
cache, optionally printing a deck resolved from a deck code.

Usage:
    python -m artifactlib.jobs.refresh_catalog --deck ADC...
"""

import argparse
import logging
from pathlib import Path

from artifactlib.config import settings
from artifactlib.errors import ArtifactLibError
from artifactlib.models.card import CardColor
from artifactlib.models.deck import Deck
from artifactlib.services.catalog import Catalog
from artifactlib.services.deck_assembler import sort_deck

logger = logging.getLogger(__name__)


def format_deck(deck: Deck) -> str:
    """Render a deck as plain text, one entry per line."""
    lines = [deck.name or "(unnamed deck)", "", "Heroes"]
    for hero in deck.heroes:
        lines.append(f"  turn {hero.turn}  {hero.card.name} [{hero.color.value}]")
    lines.extend(["", f"Cards ({deck.card_count()})"])
    for entry in deck.cards:
        cost = entry.card.gold_cost if entry.color is CardColor.ITEM else entry.card.mana_cost
        lines.append(f"  {entry.count}x {entry.card.name} ({cost}) [{entry.color.value}]")
    return "\n".join(lines)


def run_refresh(
    cache_dir: Path | None = None,
    deck_code: str | None = None,
    sort: bool = False,
) -> Catalog:
    """Refresh the cache and optionally print a deck."""
    logger.info("Refreshing card sets in %s", cache_dir or settings.cache_dir)

    try:
        catalog = Catalog(cache_dir=cache_dir)
    except ArtifactLibError as e:
        logger.error("Failed to refresh card catalog: %s", e)
        raise

    logger.info("Catalog holds %d cards", len(catalog.id_map))

    if deck_code:
        deck = catalog.get_deck(deck_code)
        if sort:
            deck = sort_deck(deck)
        print(format_deck(deck))

    return catalog


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Refresh the Artifact card set cache")
    parser.add_argument("--cache-dir", type=Path, default=None, help="Cache directory")
    parser.add_argument("--deck", default=None, help="Deck code to resolve and print")
    parser.add_argument("--sorted", action="store_true", help="Print deck in display order")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    run_refresh(cache_dir=args.cache_dir, deck_code=args.deck, sort=args.sorted)


if __name__ == "__main__":
    main()
