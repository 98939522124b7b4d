from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from .errors import ConfigurationError, HTTPStatusError, TransportError


@dataclass
class BaseHttpClient:
    """
    Provider-agnostic HTTP client wrapper.

    - Uses a single underlying httpx.Client for connection pooling.
    - Provider URLs are absolute; base_url is only a prefix for relative paths.
    - Never retries: one request per call, errors go to the caller.
    """

    base_url: str = ""
    timeout_s: float = 30.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_bytes(self, url: str, *, headers: Mapping[str, str] | None = None) -> bytes:
        """
        GET `url` and return the raw body.
        Redirects are followed; the final response must be HTTP 200.
        Raises ConfigurationError for a malformed URL, TransportError when the
        request cannot complete and HTTPStatusError (with status and body)
        for any other final status.
        """
        try:
            resp = self._client.get(url, headers=headers)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"invalid URL {url!r}: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if resp.status_code != httpx.codes.OK:
            raise HTTPStatusError(resp.status_code, resp.content, url=str(resp.request.url))

        return resp.content
