"""QueryStringBuilder — extra params + pagination -> query string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .pagination import PageParams


class QueryStringBuilder:
    """Build the query string of a page request.

    Order is fixed: extra parameters in mapping order, then ``limit``,
    then ``page``.
    """

    def build(
        self,
        *,
        extra_params: Mapping[str, Any] | None = None,
        page: PageParams | None = None,
        limit_key: str = "limit",
        page_key: str = "page",
    ) -> str:
        """Produce the encoded query string, ``""`` when nothing is set."""
        params: list[tuple[str, str]] = [
            (key, _param_text(value)) for key, value in (extra_params or {}).items()
        ]
        if page is not None:
            if page.limit is not None:
                params.append((limit_key, str(page.limit)))
            if page.page is not None:
                params.append((page_key, str(page.page)))
        return urlencode(params) if params else ""

    @staticmethod
    def append_to(url: str, query: str) -> str:
        """Return *url* with *query* appended (``?`` or ``&`` as needed)."""
        if not query:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"


def _param_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return ",".join(_param_text(v) for v in value)
    return str(value)
