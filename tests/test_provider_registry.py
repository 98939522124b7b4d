from __future__ import annotations

import pytest

from draw_sheet.providers.base.errors import (
    ConfigurationError,
    NotFoundError,
    ProviderNotFoundError,
)
from draw_sheet.providers.base.registry import ProviderRegistry
from draw_sheet.providers.defaults import register_default_providers
from draw_sheet.providers.us_open.provider import USOpenProvider


def test_get_provider_returns_registered_provider(us_open: USOpenProvider) -> None:
    registry = ProviderRegistry()
    registry.register_provider(us_open)

    assert registry.get_provider("gs-uso") is us_open
    assert "gs-uso" in registry
    assert registry.identities() == ["gs-uso"]


def test_get_provider_unknown_identity_raises_not_found() -> None:
    registry = ProviderRegistry()

    with pytest.raises(ProviderNotFoundError) as excinfo:
        registry.get_provider("atp-live")

    assert isinstance(excinfo.value, NotFoundError)
    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.provider_id == "atp-live"
    assert "atp-live" in str(excinfo.value)


def test_re_registering_identity_replaces_previous_provider() -> None:
    registry = ProviderRegistry()
    first = USOpenProvider(base_url="https://first.test")
    second = USOpenProvider(base_url="https://second.test")

    registry.register_provider(first)
    registry.register_provider(second)

    assert len(registry) == 1
    assert registry.get_provider("gs-uso") is second


def test_register_default_providers_binds_us_open() -> None:
    registry = ProviderRegistry()
    register_default_providers(
        registry, user_agent="agent/1.0", us_open_base_url="https://mirror.test/en_US/"
    )

    provider = registry.get_provider("gs-uso")
    assert provider.outbound_identity() == "agent/1.0"
    assert provider.base_endpoint() == "https://mirror.test/en_US"
