"""Query-string parameters with a lenient, capitalised-key fallback."""

from __future__ import annotations

import re
from collections.abc import Mapping

_UNSIGNED = re.compile(r"\+?[0-9]+")


class QueryParams:
    """Read-only view over query-string parameters.

    Lookups first try the key as given; if that fails and the key starts with
    a lower-case ASCII letter, the same key with that letter capitalised is tried.
    """

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self._map: dict[str, str] = dict(mapping or {})

    def get(self, key: str) -> str | None:
        """Return the value for ``key`` or its capitalised form, else None."""
        if key in self._map:
            return self._map[key]
        if key and "a" <= key[0] <= "z":
            return self._map.get(key[0].upper() + key[1:])
        return None

    def has(self, key: str) -> bool:
        """Return whether ``key`` is present exactly as given."""
        return key in self._map

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Return the value for ``key`` as a non-negative integer, or ``default``.

        Values that are missing or not a plain unsigned decimal number give ``default``.
        """
        value = self.get(key)
        if value is None or not _UNSIGNED.fullmatch(value):
            return default
        return int(value)

    def __repr__(self) -> str:
        return f"QueryParams({self._map!r})"