from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from draw_sheet.providers.base.errors import TournamentsFileError
from draw_sheet.providers.base.types import Tournament

_tournaments_adapter = TypeAdapter(list[Tournament])


def parse_tournaments(data: bytes | str) -> list[Tournament]:
    """
    Validate a tournaments document: a JSON array of records keyed by the
    Tournament attribute names. Unknown keys are ignored.
    """
    try:
        return _tournaments_adapter.validate_json(data)
    except ValidationError as e:
        raise TournamentsFileError(f"invalid tournaments document: {e}") from e


def load_tournaments(path: str | Path) -> list[Tournament]:
    path = Path(path)
    try:
        contents = path.read_bytes()
    except OSError as e:
        raise TournamentsFileError(f"loading tournaments from {path}: {e}") from e

    try:
        return parse_tournaments(contents)
    except TournamentsFileError as e:
        raise TournamentsFileError(f"{path}: {e}") from e
