from __future__ import annotations

import json
from pathlib import Path

import pytest

from draw_sheet.catalog.loader import load_tournaments, parse_tournaments
from draw_sheet.providers.base.errors import ConfigurationError, TournamentsFileError
from draw_sheet.providers.base.types import Tournament


def test_load_tournaments_reads_records(tmp_path: Path) -> None:
    path = tmp_path / "tournaments.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "uso",
                    "year": 2021,
                    "name": "US Open",
                    "tier": "Grand Slam",
                    "singles_draw_size": 128,
                    "doubles_draw_size": 64,
                    "provider_id": "gs-uso",
                    "surface": "Hard",
                    "has_seeds_list": True,
                    "has_full_players_list": True,
                    "sponsor": "ignored",
                },
                {"id": "uso-q", "year": 2021, "name": "US Open Qualifying", "provider_id": "gs-uso"},
            ]
        )
    )

    tournaments = load_tournaments(path)

    assert [t.id for t in tournaments] == ["uso", "uso-q"]
    uso = tournaments[0]
    assert isinstance(uso, Tournament)
    assert uso.singles_draw_size == 128
    assert uso.has_seeds_list is True
    assert uso.has_draw is False
    assert tournaments[1].surface == ""


def test_load_tournaments_missing_file(tmp_path: Path) -> None:
    with pytest.raises(TournamentsFileError):
        load_tournaments(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "document",
    [
        b"{broken",
        b'{"id": "uso"}',
        b'[{"id": "uso", "name": "US Open", "provider_id": "gs-uso"}]',
        b'[{"id": "uso", "year": "next", "name": "US Open", "provider_id": "gs-uso"}]',
    ],
)
def test_parse_tournaments_rejects_bad_documents(document: bytes) -> None:
    with pytest.raises(ConfigurationError):
        parse_tournaments(document)
