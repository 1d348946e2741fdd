"""RemoteDataLoader — one grid page load against a filterable REST resource."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .config import RemoteDataConfig
from .descriptors import FilterClause, FilterDescriptor, LoadRequest, LoadResult
from .envelope import PageEnvelope
from .pagination import PaginationBuilder
from .query_string import QueryStringBuilder
from .transport.httpx_transport import HttpxTransport
from .transport.ports import ITransport, RequestConfig
from .translator import FilterTranslator

logger = logging.getLogger(__name__)

FilterHook = Callable[[list[FilterClause]], list[FilterClause]]


def identity_hook(clauses: list[FilterClause]) -> list[FilterClause]:
    """Default pre-filter hook: returns the clauses untouched."""
    return clauses


class RemoteDataLoader:
    """
    Load one page of grid data.

    Each call translates the grid filters, applies the pre-filter hook,
    and issues exactly one request through the transport:

    * no clauses -> ``GET {base_url}?{params}``;
    * clauses -> ``POST {base_url}/search?{params}`` with
      ``{"filters": [...]}``.

    The response must be ``{data: [...], meta: {total}}``. Transport errors
    propagate unchanged; nothing is retried.

    Example:
        ```python
        loader = RemoteDataLoader(
            RemoteDataConfig(base_url="https://api.example.com/users"),
            transport=HttpxTransport(),
        )
        result = await loader.load_data(skip=20, limit=10, filter_value=rows)
        ```
    """

    def __init__(
        self,
        config: RemoteDataConfig,
        transport: ITransport,
        *,
        before_filter: FilterHook | None = None,
        translator: FilterTranslator | None = None,
        pagination: PaginationBuilder | None = None,
        query_string: QueryStringBuilder | None = None,
    ) -> None:
        if transport is None:
            raise ValueError("transport parameter is required.")
        self.config = config
        self._transport = transport
        self._before_filter = before_filter or identity_hook
        self._translator = translator or FilterTranslator(strict=config.strict)
        self._pagination = pagination or PaginationBuilder()
        self._query_string = query_string or QueryStringBuilder()

    def filters_for(
        self, filter_value: Sequence[FilterDescriptor | Mapping[str, Any]] | None
    ) -> list[FilterClause]:
        """Translate *filter_value* and run the pre-filter hook over it."""
        return list(self._before_filter(self._translator.translate(filter_value)))

    def build_request(self, request: LoadRequest) -> RequestConfig:
        """Shape the transport request for *request* without sending it."""
        clauses = self.filters_for(request.filter_value)
        applied_filters = len(clauses)

        page = self._pagination.build(skip=request.skip, limit=request.limit)
        query = self._query_string.build(
            extra_params=self.config.extra_params, page=page
        )

        if applied_filters > 0:
            return RequestConfig(
                url=self._query_string.append_to(self.config.search_url, query),
                method="POST",
                headers=dict(self.config.headers),
                data={"filters": [c.to_wire() for c in clauses]},
            )
        return RequestConfig(
            url=self._query_string.append_to(self.config.list_url, query),
            method="GET",
            headers=dict(self.config.headers),
        )

    async def load(self, request: LoadRequest | Mapping[str, Any]) -> LoadResult:
        """Fetch the page described by *request*."""
        if not isinstance(request, LoadRequest):
            request = LoadRequest.model_validate(request)

        config = self.build_request(request)
        logger.debug(
            "Loading page skip=%s limit=%s via %s %s",
            request.skip,
            request.limit,
            config.method,
            config.url,
        )
        start = time.perf_counter()
        body = await self._transport.request(config)
        envelope = PageEnvelope.parse(body)
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Loaded %d of %d rows from %s in %.2fms",
            len(envelope.data),
            envelope.meta.total,
            config.url,
            elapsed,
        )
        return LoadResult(data=envelope.data, count=envelope.meta.total)

    async def load_data(
        self,
        *,
        skip: int = 0,
        limit: int = 0,
        sort_info: Any = None,
        filter_value: Sequence[FilterDescriptor | Mapping[str, Any]] | None = None,
    ) -> LoadResult:
        """Keyword form of :meth:`load`, matching the grid's callback signature."""
        return await self.load(
            LoadRequest(
                skip=skip,
                limit=limit,
                sort_info=sort_info,
                filter_value=list(filter_value) if filter_value is not None else None,
            )
        )


def use_remote_data(
    url: str,
    extra_params: Mapping[str, Any] | None = None,
    before_filter: FilterHook | None = None,
    *,
    transport: ITransport | None = None,
    strict: bool = False,
) -> RemoteDataLoader:
    """Build a loader for *url*; defaults to an :class:`HttpxTransport`."""
    if transport is None:
        transport = HttpxTransport()
    config = RemoteDataConfig(
        base_url=url, extra_params=dict(extra_params or {}), strict=strict
    )
    return RemoteDataLoader(config, transport, before_filter=before_filter)
