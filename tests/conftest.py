"""Test configuration for remote-grid."""

import pytest

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def page_body():
    """Sample backend page response."""
    return {
        "data": [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Anna"}],
        "meta": {"total": "42", "current_page": 1, "per_page": 10},
    }


@pytest.fixture
def contains_row():
    """Sample grid filter row."""
    return {"name": "name", "operator": "contains", "type": "string", "value": "ann"}
