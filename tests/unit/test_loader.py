"""Tests for RemoteDataLoader."""

from __future__ import annotations

import pytest

from remote_grid.config import RemoteDataConfig
from remote_grid.descriptors import FilterClause, LoadRequest
from remote_grid.exceptions import (
    NoResponseError,
    ResponseShapeError,
    ServerResponseError,
    UnknownOperatorError,
)
from remote_grid.loader import RemoteDataLoader, use_remote_data
from remote_grid.operators import ComparisonOperator
from remote_grid.transport.memory import InMemoryTransport

BASE = "https://api.example.com/users"


@pytest.fixture
def transport(page_body):
    return InMemoryTransport(default_response=page_body)


@pytest.fixture
def loader(transport):
    return RemoteDataLoader(RemoteDataConfig(base_url=BASE), transport)


class TestRequestShape:
    @pytest.mark.asyncio
    async def test_unfiltered_first_load_is_plain_get(self, loader, transport) -> None:
        await loader.load({"skip": 0, "limit": 0, "filterValue": []})

        request = transport.last_request
        assert request.method == "GET"
        assert request.url == BASE
        assert request.data is None

    @pytest.mark.asyncio
    async def test_filtered_load_posts_to_search(
        self, loader, transport, contains_row
    ) -> None:
        await loader.load_data(skip=20, limit=10, filter_value=[contains_row])

        request = transport.last_request
        assert request.method == "POST"
        assert request.url == f"{BASE}/search?limit=10&page=3"
        assert request.data == {
            "filters": [{"field": "name", "operator": "like", "value": "%ann%"}]
        }

    @pytest.mark.asyncio
    async def test_dropped_filters_select_plain_get(self, loader, transport) -> None:
        rows = [{"name": "name", "operator": "contains", "type": "string", "value": ""}]
        await loader.load_data(skip=0, limit=25, filter_value=rows)

        transport.assert_sent("GET", f"{BASE}?limit=25")

    @pytest.mark.asyncio
    async def test_extra_params_precede_pagination(self, transport) -> None:
        loader = RemoteDataLoader(
            RemoteDataConfig(base_url=BASE, extra_params={"include": "roles"}),
            transport,
        )
        await loader.load_data(skip=10, limit=10)

        assert transport.last_request.url == f"{BASE}?include=roles&limit=10&page=2"

    @pytest.mark.asyncio
    async def test_notinrange_payload_carries_or_type(self, loader, transport) -> None:
        rows = [
            {
                "name": "age",
                "operator": "notinrange",
                "type": "number",
                "value": {"start": 18, "end": 30},
            }
        ]
        await loader.load_data(filter_value=rows)

        assert transport.last_request.url == f"{BASE}/search"
        assert transport.last_request.data["filters"] == [
            {"field": "age", "operator": "<", "value": 18, "type": "or"},
            {"field": "age", "operator": ">", "value": 30, "type": "or"},
        ]

    def test_default_headers(self, loader) -> None:
        request = loader.build_request(LoadRequest())
        assert request.headers == {"Content-Type": "application/json"}

    def test_sort_info_is_accepted(self, loader) -> None:
        request = loader.build_request(
            LoadRequest(sortInfo={"name": "name", "dir": -1}, limit=5)
        )
        assert request.url == f"{BASE}?limit=5"


class TestBeforeFilterHook:
    @pytest.mark.asyncio
    async def test_hook_can_add_clauses(self, transport) -> None:
        def scope_to_tenant(clauses: list[FilterClause]) -> list[FilterClause]:
            return [
                *clauses,
                FilterClause(field="tenant_id", operator=ComparisonOperator.EQ, value=3),
            ]

        loader = RemoteDataLoader(
            RemoteDataConfig(base_url=BASE), transport, before_filter=scope_to_tenant
        )
        await loader.load_data()

        assert transport.last_request.method == "POST"
        assert transport.last_request.data == {
            "filters": [{"field": "tenant_id", "operator": "=", "value": 3}]
        }

    @pytest.mark.asyncio
    async def test_hook_can_remove_clauses(self, transport, contains_row) -> None:
        loader = RemoteDataLoader(
            RemoteDataConfig(base_url=BASE), transport, before_filter=lambda c: []
        )
        await loader.load_data(filter_value=[contains_row])

        transport.assert_sent("GET", BASE)


class TestResult:
    @pytest.mark.asyncio
    async def test_count_is_parsed_total(self, loader, page_body) -> None:
        result = await loader.load_data(skip=0, limit=10)

        assert result.count == 42
        assert result.total_count == 42
        assert result.data == page_body["data"]
        assert result.items == page_body["data"]

    @pytest.mark.asyncio
    async def test_non_integer_total_raises(self, loader, transport) -> None:
        transport.enqueue({"data": [], "meta": {"total": "many"}})
        with pytest.raises(ResponseShapeError):
            await loader.load_data()

    @pytest.mark.asyncio
    async def test_missing_meta_raises(self, loader, transport) -> None:
        transport.enqueue({"data": []})
        with pytest.raises(ResponseShapeError):
            await loader.load_data()


class TestFailures:
    @pytest.mark.asyncio
    async def test_transport_errors_propagate_unchanged(self, loader, transport) -> None:
        error = ServerResponseError(500, {"message": "boom"}, url=BASE, method="GET")
        transport.enqueue(error)

        with pytest.raises(ServerResponseError) as exc_info:
            await loader.load_data()

        assert exc_info.value is error
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, loader, transport, page_body) -> None:
        transport.enqueue(NoResponseError("timeout"), page_body)

        with pytest.raises(NoResponseError):
            await loader.load_data()

        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_strict_loader_rejects_unknown_operator(self, transport) -> None:
        loader = RemoteDataLoader(
            RemoteDataConfig(base_url=BASE, strict=True), transport
        )
        rows = [{"name": "a", "operator": "between", "type": "number", "value": 1}]

        with pytest.raises(UnknownOperatorError):
            await loader.load_data(filter_value=rows)

        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_invalid_request_is_rejected(self, loader) -> None:
        with pytest.raises(ValueError):
            await loader.load({"skip": -1, "limit": 10})


def test_use_remote_data_builds_loader(transport) -> None:
    loader = use_remote_data(
        BASE, {"include": "roles"}, transport=transport, strict=True
    )
    assert isinstance(loader, RemoteDataLoader)
    assert loader.config.extra_params == {"include": "roles"}
    assert loader.config.search_url == f"{BASE}/search"


def test_config_requires_base_url() -> None:
    with pytest.raises(ValueError):
        RemoteDataConfig(base_url="")


@pytest.mark.asyncio
async def test_malformed_rows_do_not_abort_load(loader, transport) -> None:
    rows = [
        {"name": "a", "operator": "eq", "type": "string", "value": "x"},
        {"operator": "eq", "type": "string", "value": "y"},
    ]
    await loader.load_data(filter_value=rows)

    assert transport.last_request.data == {
        "filters": [{"field": "a", "operator": "=", "value": "x"}]
    }
