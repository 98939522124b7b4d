from __future__ import annotations

import json
from typing import Any

import pytest

from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.base.types import Tournament
from draw_sheet.providers.us_open.provider import USOpenProvider


def make_tournament(**overrides: Any) -> Tournament:
    fields: dict[str, Any] = {
        "id": "uso",
        "year": 2021,
        "name": "US Open",
        "provider_id": "gs-uso",
        "tier": "Grand Slam",
        "singles_draw_size": 128,
        "doubles_draw_size": 64,
        "surface": "Hard",
    }
    fields.update(overrides)
    return Tournament(**fields)


def players_payload(*players: dict[str, Any]) -> bytes:
    return json.dumps({"players": list(players)}).encode()


@pytest.fixture
def us_open() -> USOpenProvider:
    return USOpenProvider(base_url="https://example.test/en_US", user_agent="draw-sheet-tests")


@pytest.fixture
def registry(us_open: USOpenProvider) -> ProviderRegistry:
    reg = ProviderRegistry()
    reg.register_provider(us_open)
    return reg
