from __future__ import annotations

import logging
from collections.abc import Iterable

from draw_sheet.providers.base.errors import NotFoundError, TournamentNotFoundError
from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.base.types import Tournament

logger = logging.getLogger(__name__)


class TournamentCatalog:
    """
    Tournaments known to the app, in registration order.

    Written once at startup, read-only afterwards. Every tournament's provider
    must be registered before the tournament itself.
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry
        self._tournaments: list[Tournament] = []

    def register_tournament(self, tournament: Tournament) -> None:
        # Raises ProviderNotFoundError; the catalog is untouched in that case.
        self._registry.get_provider(tournament.provider_id)
        self._tournaments.append(tournament)

    def register_all(
        self, tournaments: Iterable[Tournament]
    ) -> list[tuple[Tournament, NotFoundError]]:
        """Register each tournament, skipping (and returning) the rejected ones."""

        rejected: list[tuple[Tournament, NotFoundError]] = []
        for t in tournaments:
            try:
                self.register_tournament(t)
            except NotFoundError as e:
                logger.warning("Error registering tournament with ID %s: %s", t.id, e)
                rejected.append((t, e))
        return rejected

    def get_tournament(self, tournament_id: str) -> Tournament:
        for t in self._tournaments:
            if t.id == tournament_id:
                return t
        raise TournamentNotFoundError(tournament_id)

    def get_all_tournaments(self) -> list[Tournament]:
        return self._tournaments

    def __len__(self) -> int:
        return len(self._tournaments)
