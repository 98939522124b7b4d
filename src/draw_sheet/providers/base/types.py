from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Tournament:
    """
    A tournament known to the catalog, as described by the tournaments file.
    Immutable after load.
    """
    id: str
    year: int
    name: str
    provider_id: str
    tier: str = ""
    singles_draw_size: int = 0
    doubles_draw_size: int = 0
    surface: str = ""

    has_overview: bool = False
    has_live_scores: bool = False
    has_results: bool = False
    has_draw: bool = False
    has_schedule: bool = False
    has_seeds_list: bool = False
    has_full_players_list: bool = False
    has_prize_breakdown: bool = False


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    country: str = ""
    seeded: bool = False
    seed: int = 0
    has_singles_ranking: bool = False
    singles_ranking: int = 0
    has_doubles_ranking: bool = False
    doubles_ranking: int = 0


@dataclass
class Event:
    """
    One event of a draw (e.g. men's singles) with its entrants split into
    seeded and unseeded players.
    """
    id: str
    name: str
    is_doubles: bool = False
    seeded_players: list[Player] = field(default_factory=list)
    unseeded_players: list[Player] = field(default_factory=list)

    def add_player(self, player: Player) -> None:
        if player.seeded:
            self.seeded_players.append(player)
        else:
            self.unseeded_players.append(player)

    def sort_players(self) -> None:
        # list.sort is stable: equal keys keep encounter order.
        self.seeded_players.sort(key=lambda p: p.seed)
        if self.is_doubles:
            self.unseeded_players.sort(key=lambda p: p.doubles_ranking)
        else:
            self.unseeded_players.sort(key=lambda p: p.singles_ranking)


# Event id -> Event, filled while parsing a feed.
PlayerMap = dict[str, Event]


class EventSet(frozenset[str]):
    """Fixed set of event codes, e.g. the doubles events of a provider."""

    def contains(self, code: str) -> bool:
        return code in self
