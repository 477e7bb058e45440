"""Paging of item lists by query parameters."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from jellofin.query import QueryParams
from jellofin.types import BaseItemDto

DEFAULT_LIMIT = 100


def apply_pagination(
    items: Iterable[BaseItemDto], params: QueryParams
) -> tuple[list[BaseItemDto], int]:
    """Return the page selected by ``startIndex`` and ``limit`` and the start index used."""
    start_index = params.get_int("startIndex", 0)
    limit = params.get_int("limit", DEFAULT_LIMIT)
    return list(islice(items, start_index, start_index + limit)), start_index