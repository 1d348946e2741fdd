"""Transport port — the HTTP capability consumed by the loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from ..config import default_headers


@dataclass(frozen=True)
class RequestConfig:
    """One outgoing request: ``{url, method, headers, data?}``."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=default_headers)
    data: Any = None


@runtime_checkable
class ITransport(Protocol):
    """
    Framework-agnostic port for issuing one HTTP request.

    Implementations return the decoded response body and raise a
    :class:`~remote_grid.exceptions.TransportError` subclass on failure:
    ``ServerResponseError`` when the server answered with an error status,
    ``NoResponseError`` when no answer arrived, ``RequestNotSentError`` when
    the request could not be sent.
    """

    async def request(self, config: RequestConfig) -> Any:
        """Send *config* and return the decoded body."""
        ...
