"""Transports — the HTTP capability behind the loader."""

from __future__ import annotations

from .httpx_transport import HttpxTransport
from .memory import InMemoryTransport
from .ports import ITransport, RequestConfig

__all__ = [
    "HttpxTransport",
    "ITransport",
    "InMemoryTransport",
    "RequestConfig",
]
