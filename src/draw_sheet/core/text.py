from __future__ import annotations

import re
from typing import Any

_ranking_re = re.compile(r"[+-]?[0-9]+")


def full_name(first_name: str, last_name: str) -> str:
    """Display name as shown in draws: first and last joined by one space."""

    return f"{first_name} {last_name}"


def parse_ranking(value: Any) -> tuple[bool, int]:
    """Parse a feed ranking field into (has_ranking, ranking).

    Only an optional sign followed by ASCII digits parses. "0", blanks,
    padded values and anything that is not a positive integer all mean the
    entrant has no ranking; the value is then 0.
    """

    if isinstance(value, bool) or value is None:
        return False, 0
    if isinstance(value, int):
        ranking = value
    elif isinstance(value, str):
        if not _ranking_re.fullmatch(value):
            return False, 0
        ranking = int(value)
    else:
        return False, 0

    if ranking <= 0:
        return False, 0
    return True, ranking
