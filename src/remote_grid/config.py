"""Configuration objects for the loader and the HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def default_headers() -> dict[str, str]:
    return dict(DEFAULT_HEADERS)


@dataclass(frozen=True)
class RemoteDataConfig:
    """Configuration for a :class:`~remote_grid.loader.RemoteDataLoader`.

    Attributes:
        base_url: Listing endpoint of the resource, without trailing slash.
        extra_params: Static query parameters sent before ``limit``/``page``.
        headers: Headers attached to every request.
        search_suffix: Path appended to ``base_url`` for filtered queries.
        strict: Reject untranslatable filter rows instead of dropping them.
    """

    base_url: str
    extra_params: dict[str, Any] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=default_headers)
    search_suffix: str = "/search"
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url is required")

    @property
    def list_url(self) -> str:
        return self.base_url.rstrip("/")

    @property
    def search_url(self) -> str:
        return f"{self.list_url}{self.search_suffix}"


@dataclass(frozen=True)
class TransportConfig:
    """Configuration for :class:`~remote_grid.transport.HttpxTransport`.

    Attributes:
        timeout: Seconds before a request is abandoned (``None`` disables).
        user_agent: ``User-Agent`` header value.
        base_headers: Headers merged under each request's own headers.
    """

    timeout: float | None = 10.0
    user_agent: str = "remote-grid/0.1.0"
    base_headers: dict[str, str] = field(default_factory=dict)
