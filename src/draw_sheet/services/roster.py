from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from draw_sheet.providers.base.client import BaseHttpClient
from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.base.types import Event, Tournament

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    timeout_s: float = 30.0


def sort_events(player_map: Mapping[str, Event]) -> list[Event]:
    """Events ordered by id, independent of how the map was filled."""

    return [player_map[event_id] for event_id in sorted(player_map)]


class RosterFetchPipeline:
    """
    Fetches and orders the player roster of one tournament.

    One GET per call, no caching and no retries; every failure is raised to
    the caller and no partial roster is returned.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        *,
        config: PipelineConfig | None = None,
        http: BaseHttpClient | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or PipelineConfig()
        self._owns_http = http is None
        self.http = http or BaseHttpClient(timeout_s=self.config.timeout_s)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> RosterFetchPipeline:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_players(self, tournament: Tournament) -> list[Event]:
        provider = self.registry.get_provider(tournament.provider_id)
        url = provider.players_url(tournament)

        logger.info("Fetching players for %s from %s", tournament.id, url)
        body = self.http.get_bytes(url, headers={"User-Agent": provider.outbound_identity()})

        player_map = provider.deserialize_players(body)
        events = sort_events(player_map)
        logger.debug("Parsed %d events for %s", len(events), tournament.id)
        return events
