from __future__ import annotations

import logging

from .errors import ProviderNotFoundError
from .provider import DataProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    def __init__(self) -> None:
        self._providers: dict[str, DataProvider] = {}

    def register_provider(self, provider: DataProvider) -> None:
        # Last registration for an identity wins.
        provider_id = provider.identity()
        if provider_id in self._providers:
            logger.debug("Replacing provider registered as %s", provider_id)
        self._providers[provider_id] = provider
        logger.debug("Registered provider: %s (%s)", provider_id, provider.base_endpoint())

    def get_provider(self, provider_id: str) -> DataProvider:
        provider = self._providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        return provider

    def identities(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)
