from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from draw_sheet.catalog.loader import load_tournaments
from draw_sheet.catalog.tournament_catalog import TournamentCatalog
from draw_sheet.core.config import Settings, settings
from draw_sheet.core.logging import configure_logging
from draw_sheet.providers.base.errors import TournamentsFileError
from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.defaults import register_default_providers
from draw_sheet.services.roster import PipelineConfig, RosterFetchPipeline

logger = logging.getLogger(__name__)


def build_registry(cfg: Settings | None = None) -> ProviderRegistry:
    cfg = cfg or settings
    registry = ProviderRegistry()
    register_default_providers(
        registry,
        user_agent=cfg.user_agent,
        us_open_base_url=cfg.us_open_base_url,
    )
    return registry


def build_catalog(registry: ProviderRegistry, cfg: Settings | None = None) -> TournamentCatalog:
    """
    Load the tournaments file and register what the providers can serve.
    An unreadable or invalid file is logged and leaves the catalog empty.
    """
    cfg = cfg or settings
    catalog = TournamentCatalog(registry)
    try:
        tournaments = load_tournaments(cfg.tournaments_file)
    except TournamentsFileError as e:
        logger.error("Error loading tournaments: %s", e)
        return catalog

    catalog.register_all(tournaments)
    return catalog


@contextmanager
def app_scope(
    cfg: Settings | None = None,
) -> Iterator[tuple[TournamentCatalog, RosterFetchPipeline]]:
    """
    Startup wiring for CLI commands: logging, providers, catalog, pipeline.
    Closes the pipeline's HTTP client on exit.
    """
    cfg = cfg or settings
    configure_logging(cfg.log_level)

    registry = build_registry(cfg)
    catalog = build_catalog(registry, cfg)
    pipeline = RosterFetchPipeline(registry, config=PipelineConfig(timeout_s=cfg.http_timeout_s))
    try:
        yield catalog, pipeline
    finally:
        pipeline.close()
