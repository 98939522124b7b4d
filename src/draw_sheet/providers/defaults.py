from __future__ import annotations

from draw_sheet.providers.base.provider import DataProvider
from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.us_open.provider import USOpenProvider


def default_providers(*, user_agent: str, us_open_base_url: str) -> list[DataProvider]:
    return [
        USOpenProvider(base_url=us_open_base_url, user_agent=user_agent),
    ]


def register_default_providers(
    registry: ProviderRegistry,
    *,
    user_agent: str,
    us_open_base_url: str,
) -> None:
    for provider in default_providers(user_agent=user_agent, us_open_base_url=us_open_base_url):
        registry.register_provider(provider)
