"""Ordering of item lists by the sort fields a client asks for."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from functools import cmp_to_key
from typing import Any

from jellofin.query import QueryParams
from jellofin.types import BaseItemDto

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})\Z"
)


def _parse_rfc3339(text: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; anything malformed gives None."""
    if text is None:
        return None
    match = _RFC3339.match(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micros = int((fraction or "0")[:6].ljust(6, "0"))
    sec = int(second)
    if sec == 60:
        sec, micros = 59, 999_999
    if zone in ("Z", "z"):
        offset = timezone.utc
    else:
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            return None
        delta = timedelta(hours=hours, minutes=minutes)
        offset = timezone(delta if zone[0] == "+" else -delta)
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), sec, micros, tzinfo=offset
        )
    except ValueError:
        return None


def _cmp(a: Any, b: Any) -> int:
    """Three-way comparison where None sorts before any value; unordered values are equal."""
    if a is None:
        return 0 if b is None else -1
    if b is None:
        return 1
    return (a > b) - (a < b)


def _play_count(item: BaseItemDto) -> int:
    return item.user_data.play_count if item.user_data is not None else 0


def _date_played(item: BaseItemDto) -> datetime | None:
    if item.user_data is None:
        return None
    return _parse_rfc3339(item.user_data.last_played_date)


def _sort_name(item: BaseItemDto) -> str:
    name = item.sort_name if item.sort_name is not None else item.name
    return name.lower()


_Comparator = Callable[[BaseItemDto, BaseItemDto], int]

_COMPARATORS: dict[str, _Comparator] = {
    "communityrating": lambda a, b: _cmp(a.community_rating or 0.0, b.community_rating or 0.0),
    "datecreated": lambda a, b: _cmp(
        _parse_rfc3339(a.date_created), _parse_rfc3339(b.date_created)
    ),
    "premieredate": lambda a, b: _cmp(
        _parse_rfc3339(a.premiere_date), _parse_rfc3339(b.premiere_date)
    ),
    "productionyear": lambda a, b: _cmp(a.production_year, b.production_year),
    "sortname": lambda a, b: _cmp(_sort_name(a), _sort_name(b)),
    "name": lambda a, b: _cmp(a.name.lower(), b.name.lower()),
    "runtime": lambda a, b: _cmp(a.runtime_ticks, b.runtime_ticks),
    "playcount": lambda a, b: _cmp(_play_count(a), _play_count(b)),
    "dateplayed": lambda a, b: _cmp(_date_played(a), _date_played(b)),
    "indexnumber": lambda a, b: _cmp(a.index_number, b.index_number),
    "parentindexnumber": lambda a, b: _cmp(a.parent_index_number, b.parent_index_number),
}


def apply_item_sorting(items: Iterable[BaseItemDto], params: QueryParams) -> list[BaseItemDto]:
    """Return ``items`` ordered by ``sortBy`` and ``sortOrder``.

    Without ``sortBy``, or when any field is ``Random``, the order is kept.
    Unknown fields compare equal; the sort is stable.
    """
    items = list(items)
    sort_by = params.get("sortBy")
    if sort_by is None:
        return items

    sort_fields = [part.strip().lower() for part in sort_by.split(",")]
    order = params.get("sortOrder")
    descending = order is not None and order.lower() == "descending"

    if "random" in sort_fields:
        return items

    comparators = [_COMPARATORS.get(name) for name in sort_fields]

    def compare(a: BaseItemDto, b: BaseItemDto) -> int:
        for comparator in comparators:
            if comparator is None:
                continue
            result = comparator(a, b)
            if result:
                return -result if descending else result
        return 0

    items.sort(key=cmp_to_key(compare))
    return items