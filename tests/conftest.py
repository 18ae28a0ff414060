import json
from pathlib import Path
from typing import Any

import pytest

from artifactlib.models import CardSet, CardSetJson
from tests.factories import make_card, make_card_set


@pytest.fixture
def card_set_response() -> dict[str, Any]:
    """Card set document as served by the CDN."""
    path = Path(__file__).parent / "fixtures" / "card_set_response.json"
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


@pytest.fixture
def base_set(card_set_response: dict[str, Any]) -> CardSet:
    return CardSetJson.model_validate(card_set_response).card_set


@pytest.fixture
def second_set() -> CardSet:
    return make_card_set(
        1,
        [
            make_card(10014, "Axe", card_type="Hero", is_red=True, attack=7, hit_points=11),
            make_card(10091, "Berserker's Call", is_red=True, mana_cost=3),
            make_card(10092, "Traveler's Cloak", card_type="Item", gold_cost=5),
        ],
    )
