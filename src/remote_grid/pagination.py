"""Pagination — grid skip/limit -> backend limit/page parameters."""

from __future__ import annotations

from typing import NamedTuple


class PageParams(NamedTuple):
    """Backend pagination parameters; ``None`` means "do not send"."""

    limit: int | None
    page: int | None


class PaginationBuilder:
    """Convert the grid's 0-indexed offset into the backend's 1-indexed page.

    ``limit`` is only sent when nonzero and ``page`` only when ``skip`` is
    nonzero, page 1 being the server default.
    """

    def build(self, *, skip: int = 0, limit: int = 0) -> PageParams:
        if skip < 0 or limit < 0:
            raise ValueError(f"skip and limit must be >= 0, got {skip=}, {limit=}")
        if limit == 0:
            return PageParams(limit=None, page=None)
        page = self.page_number(skip, limit) if skip else None
        return PageParams(limit=limit, page=page)

    @staticmethod
    def page_number(skip: int, limit: int) -> int:
        """Return the 1-indexed page holding row *skip*."""
        return skip // limit + 1
