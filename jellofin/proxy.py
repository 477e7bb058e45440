"""Helpers for passing HLS requests on to an upstream segmenting server."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import quote

HOP_HEADERS = (
    "Connection",
    "Keep-Alive",
    "Proxy-Authenticate",
    "Proxy-Authorization",
    "Te",
    "Trailers",
    "Transfer-Encoding",
    "Upgrade",
)

_HOP = frozenset(name.lower() for name in HOP_HEADERS)
_REQUEST_DROPPED = _HOP | {"access-control-allow-origin", "access-control-allow-methods"}

Headers = Mapping[str, str] | Iterable[tuple[str, str]]


def is_hls_path(path: str) -> bool:
    """Return whether a data path addresses HLS output below an mp4 file."""
    return ".mp4/" in path


def build_url(server: str, path: str) -> str:
    """Join ``server`` and ``path``, percent-encoding each path segment."""
    return server + "/".join(quote(segment, safe="") for segment in path.split("/"))


def _pairs(headers: Headers) -> Iterable[tuple[str, str]]:
    return headers.items() if isinstance(headers, Mapping) else headers


def _filter(headers: Headers, dropped: frozenset[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for name, value in _pairs(headers):
        lowered = name.lower()
        if lowered not in dropped:
            out[lowered] = value
    return out


def filter_request_headers(headers: Headers) -> dict[str, str]:
    """Return the client headers to forward upstream.

    Hop-by-hop and CORS response headers are dropped; names are lower-cased
    and a later header replaces an earlier one of the same name.
    """
    return _filter(headers, _REQUEST_DROPPED)


def filter_response_headers(headers: Headers) -> dict[str, str]:
    """Return the upstream response headers to pass back, without hop-by-hop ones."""
    return _filter(headers, _HOP)