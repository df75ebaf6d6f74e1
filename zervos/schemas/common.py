"""Shared response shapes."""

from __future__ import annotations

from typing import Any


def page_links(page: int, limit: int, offset: int, returned: int, total: int) -> dict[str, str | None]:
    """Build the relative next/previous links used by every paginated list."""
    return {
        "next": f"?page={page + 1}&limit={limit}" if offset + returned < total else None,
        "previous": f"?page={page - 1}&limit={limit}" if page > 1 else None,
    }


def paginated(results: list[Any], total: int, *, page: int, limit: int) -> dict[str, Any]:
    offset = (page - 1) * limit
    return {"count": total, **page_links(page, limit, offset, len(results), total), "results": results}
