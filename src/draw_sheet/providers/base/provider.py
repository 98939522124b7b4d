from __future__ import annotations

from typing import Protocol

from .types import PlayerMap, Tournament


class DataProvider(Protocol):
    """
    One external source of draw data.

    The roster pipeline depends on this, not on any concrete feed: a provider
    knows where its player list lives and how to turn the raw body into events.
    Implementations hold only static configuration.
    """

    def identity(self) -> str:
        """Identity tournaments use to refer to this provider (e.g. "gs-uso")."""
        ...

    def base_endpoint(self) -> str: ...

    def outbound_identity(self) -> str:
        """Value sent as the User-Agent header on requests to this provider."""
        ...

    def players_url(self, tournament: Tournament) -> str:
        """
        Raises ConfigurationError when the tournament's fields cannot form a URL.
        """
        ...

    def deserialize_players(self, data: bytes) -> PlayerMap:
        """
        Parse a raw player-list body into events keyed by event id, each with
        its seeded/unseeded players already ordered.
        Raises DeserializationError when the payload structure is unusable.
        """
        ...
