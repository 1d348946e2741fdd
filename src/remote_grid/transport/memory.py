"""In-memory transport for test assertions."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from .ports import ITransport, RequestConfig

logger = logging.getLogger(__name__)


class InMemoryTransport(ITransport):
    """
    Test double (Fake) that records requests and replays queued responses.

    Queued items are returned in order; a queued exception is raised
    instead. With nothing queued, ``default_response`` is returned.
    """

    def __init__(self, default_response: Any = None) -> None:
        self.requests: list[RequestConfig] = []
        self.default_response = default_response
        self._queue: deque[Any] = deque()

    def enqueue(self, *responses: Any) -> None:
        """Queue bodies (or exceptions) for the next requests."""
        self._queue.extend(responses)

    async def request(self, config: RequestConfig) -> Any:
        self.requests.append(config)
        logger.debug("Fake %s %s", config.method, config.url)
        response = self._queue.popleft() if self._queue else self.default_response
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def last_request(self) -> RequestConfig:
        if not self.requests:
            raise AssertionError("No request was sent.")
        return self.requests[-1]

    def assert_sent(self, method: str, url: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [r for r in self.requests if r.method == method and r.url == url]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} {method} requests to {url}, "
                f"but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear recorded requests and queued responses."""
        self.requests.clear()
        self._queue.clear()
