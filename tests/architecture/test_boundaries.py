from pytest_archon import archrule


def test_translation_is_transport_free() -> None:
    """
    Translation modules are pure: they must not reach the transport layer
    or an HTTP client.
    """
    (
        archrule("translation_is_pure")
        .match("remote_grid.translator")
        .match("remote_grid.coercion")
        .match("remote_grid.operators")
        .match("remote_grid.descriptors")
        .should_not_import("remote_grid.transport*")
        .should_not_import("remote_grid.loader")
        .should_not_import("httpx*")
        .check("remote_grid", only_direct_imports=True)
    )


def test_ports_layering() -> None:
    """
    The transport port must not depend on its adapters or on the loader.
    """
    (
        archrule("ports_layering")
        .match("remote_grid.transport.ports")
        .should_not_import("remote_grid.transport.httpx_transport")
        .should_not_import("remote_grid.transport.memory")
        .should_not_import("remote_grid.loader")
        .should_not_import("httpx*")
        .check("remote_grid", only_direct_imports=True)
    )


def test_pagination_is_standalone() -> None:
    """
    Pagination and query-string building know nothing about filters.
    """
    (
        archrule("pagination_standalone")
        .match("remote_grid.pagination")
        .match("remote_grid.query_string")
        .should_not_import("remote_grid.translator")
        .should_not_import("remote_grid.transport*")
        .check("remote_grid", only_direct_imports=True)
    )
