from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from draw_sheet.core.text import full_name, parse_ranking
from draw_sheet.providers.base.errors import DeserializationError
from draw_sheet.providers.base.types import Event, EventSet, Player, PlayerMap


class _FeedModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: Any) -> Any:
        # The feed sends null for fields it has nothing for; treat as missing.
        if value is None:
            field_info = cls.model_fields[info.field_name]
            return field_info.get_default(call_default_factory=True)
        return value


class USOpenEventEntry(_FeedModel):
    event_id: str = ""
    event_name: str = ""
    seed: int = 0


class USOpenPlayer(_FeedModel):
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    country_long: str = ""
    events_entered: list[USOpenEventEntry] = Field(default_factory=list)
    # Kept loose; parse_ranking decides what counts as a ranking.
    singles_rank: Any = ""
    doubles_rank: Any = ""


class USOpenPlayerList(_FeedModel):
    players: list[USOpenPlayer] = Field(default_factory=list)


def parse_player_list(data: bytes | str) -> USOpenPlayerList:
    try:
        return USOpenPlayerList.model_validate_json(data)
    except ValidationError as e:
        raise DeserializationError(f"unmarshaling JSON response: {e}") from e


def to_player(p: USOpenPlayer, entry: USOpenEventEntry) -> Player:
    has_singles, singles = parse_ranking(p.singles_rank)
    has_doubles, doubles = parse_ranking(p.doubles_rank)
    return Player(
        id=p.id,
        name=full_name(p.first_name, p.last_name),
        country=p.country_long,
        seeded=entry.seed > 0,
        seed=entry.seed,
        has_singles_ranking=has_singles,
        singles_ranking=singles,
        has_doubles_ranking=has_doubles,
        doubles_ranking=doubles,
    )


def build_player_map(player_list: USOpenPlayerList, *, doubles_events: EventSet) -> PlayerMap:
    """Group entrants by event and order each event's seeded/unseeded lists."""

    events: PlayerMap = {}

    for p in player_list.players:
        for entry in p.events_entered:
            event = events.get(entry.event_id)
            if event is None:
                event = Event(
                    id=entry.event_id,
                    name=entry.event_name,
                    is_doubles=doubles_events.contains(entry.event_id),
                )
                events[entry.event_id] = event
            event.add_player(to_player(p, entry))

    for event in events.values():
        event.sort_players()

    return events
