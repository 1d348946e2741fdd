"""HTTP transport on top of ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import TransportConfig
from ..exceptions import (
    NoResponseError,
    RequestNotSentError,
    ResponseShapeError,
    ServerResponseError,
    ServerValidationError,
)
from .ports import ITransport, RequestConfig

logger = logging.getLogger(__name__)

# Failures raised before any byte of the request reached the server.
_NOT_SENT_ERRORS: tuple[type[Exception], ...] = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    httpx.InvalidURL,
)

_VALIDATION_STATUS = 422


class HttpxTransport(ITransport):
    """
    Issue requests with httpx and classify failures.

    Pass ``client`` to share a pooled ``httpx.AsyncClient``; otherwise a
    short-lived client is opened per request. Redirects are followed. Every
    failure is logged and re-raised as a
    :class:`~remote_grid.exceptions.TransportError` subclass, never retried.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or TransportConfig()
        self._client = client

    async def request(self, config: RequestConfig) -> Any:
        headers = {
            **self.config.base_headers,
            "User-Agent": self.config.user_agent,
            **config.headers,
        }
        kwargs: dict[str, Any] = {"headers": headers, "follow_redirects": True}
        if config.data is not None:
            kwargs["json"] = config.data

        try:
            if self._client is not None:
                response = await self._client.request(
                    config.method, config.url, **kwargs
                )
                response.raise_for_status()
            else:
                async with httpx.AsyncClient(
                    timeout=self.config.timeout, follow_redirects=True
                ) as client:
                    response = await client.request(config.method, config.url, **kwargs)
                    response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e, config) from e
        except _NOT_SENT_ERRORS as e:
            logger.error(
                "Could not send %s %s: %s", config.method, config.url, e
            )
            raise RequestNotSentError(
                f"Could not send request: {e}", url=config.url, method=config.method
            ) from e
        except httpx.TransportError as e:
            logger.error(
                "No response for %s %s: %s", config.method, config.url, e
            )
            raise NoResponseError(
                f"Request sent but no response received: {e}",
                url=config.url,
                method=config.method,
            ) from e

        return self._decode(response)

    @staticmethod
    def _status_error(
        error: httpx.HTTPStatusError, config: RequestConfig
    ) -> ServerResponseError:
        response = error.response
        body = _body_or_text(response)
        if response.status_code == _VALIDATION_STATUS:
            logger.error(
                "Validation error from %s %s: %s", config.method, config.url, body
            )
            return ServerValidationError(
                response.status_code, body, url=config.url, method=config.method
            )
        logger.error(
            "Server error %s from %s %s: %s",
            response.status_code,
            config.method,
            config.url,
            body,
        )
        return ServerResponseError(
            response.status_code, body, url=config.url, method=config.method
        )

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseShapeError("body is not JSON", response.text) from e


def _body_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
