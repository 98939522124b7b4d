from __future__ import annotations


class DrawSheetError(RuntimeError):
    """Base exception for catalog, provider and roster failures."""


class ConfigurationError(DrawSheetError):
    """Tournament or provider configuration cannot be used (unknown provider, bad year, etc.)."""


class TournamentsFileError(ConfigurationError):
    """The tournaments document could not be read or does not match the schema."""


class NotFoundError(DrawSheetError):
    """Lookup of an unknown tournament or provider identity."""


class TournamentNotFoundError(NotFoundError):
    def __init__(self, tournament_id: str) -> None:
        super().__init__(f"no tournament registered with ID {tournament_id}")
        self.tournament_id = tournament_id


class ProviderNotFoundError(NotFoundError, ConfigurationError):
    """No provider registered under the identity a tournament refers to."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"no provider registered with ID {provider_id}")
        self.provider_id = provider_id


class TransportError(DrawSheetError):
    """The request could not be completed (timeouts, connection errors, etc.)."""


class HTTPStatusError(DrawSheetError):
    """A completed request returned something other than HTTP 200."""

    def __init__(self, status_code: int, body: bytes, *, url: str | None = None) -> None:
        super().__init__(f"HTTP {status_code} for GET {url}" if url else f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body
        self.url = url

    def __str__(self) -> str:
        text = self.body.decode("utf-8", errors="replace")
        return f"{self.args[0]}\n{text}" if text else self.args[0]


class DeserializationError(DrawSheetError):
    """The upstream payload's top-level structure could not be parsed."""
