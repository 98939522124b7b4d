from __future__ import annotations

from dataclasses import dataclass, field

from draw_sheet.core.config import DESKTOP_USER_AGENT
from draw_sheet.providers.base.errors import ConfigurationError
from draw_sheet.providers.base.types import EventSet, PlayerMap, Tournament
from draw_sheet.providers.us_open.parser import build_player_map, parse_player_list

US_OPEN_PROVIDER_ID = "gs-uso"

US_OPEN_DOUBLES_EVENTS = EventSet({"MD", "WD", "XD", "BD", "GD", "CD", "DD", "UD", "ED"})


@dataclass(frozen=True)
class USOpenProvider:
    """
    US Open player feed: one JSON document per year listing every entrant
    with the events they entered.
    """

    doubles_events: EventSet = field(default=US_OPEN_DOUBLES_EVENTS)
    base_url: str = "https://www.usopen.org/en_US"
    user_agent: str = DESKTOP_USER_AGENT

    def identity(self) -> str:
        return US_OPEN_PROVIDER_ID

    def base_endpoint(self) -> str:
        return self.base_url.rstrip("/")

    def outbound_identity(self) -> str:
        return self.user_agent

    def players_url(self, tournament: Tournament) -> str:
        year = tournament.year
        if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
            raise ConfigurationError(
                f"tournament {tournament.id} has invalid year {year!r} for {self.identity()}"
            )
        return f"{self.base_endpoint()}/scores/feeds/{year}/players/players.json"

    def deserialize_players(self, data: bytes) -> PlayerMap:
        return build_player_map(parse_player_list(data), doubles_events=self.doubles_events)
