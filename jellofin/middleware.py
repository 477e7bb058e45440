"""Request path clean-up, CORS headers and ETag revalidation."""

from __future__ import annotations

from collections.abc import Mapping

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "GET, HEAD, OPTIONS, POST, PUT, DELETE"
ALLOW_HEADERS = "Content-Type, Authorization, Range, x-playback-session-id"
EXPOSE_HEADERS = "ETag, Content-Length, Content-Range"
CACHE_CONTROL = "public, max-age=86400, stale-while-revalidate=600"

_EMBY_PREFIX = "/emby"
_TEXT_MARKERS = ("json", "text", "xml", "application/x-www-form-urlencoded")
_COPIED_ON_304 = ("ETag", "Cache-Control", "Vary")


def normalize_path(path: str) -> str:
    """Collapse repeated slashes and drop a leading ``/emby`` segment."""
    while "//" in path:
        path = path.replace("//", "/")
    if path.startswith(_EMBY_PREFIX + "/"):
        path = path[len(_EMBY_PREFIX):]
    return path


def etags_match(client_etag: str, server_etag: str) -> bool:
    """Return whether any tag in an If-None-Match value matches ``server_etag``.

    Weak tags (``W/"..."``) compare equal to their strong form.
    """
    server_stripped = server_etag.removeprefix("W/")
    for candidate in client_etag.split(","):
        candidate = candidate.strip()
        if candidate == server_etag or candidate.removeprefix("W/") == server_stripped:
            return True
    return False


def cors_headers(preflight: bool = False) -> dict[str, str]:
    """Return the CORS headers for a response.

    Preflight answers carry only the CORS headers; ordinary responses also
    get a long-lived Cache-Control.
    """
    headers = {
        "Access-Control-Allow-Origin": ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Expose-Headers": EXPOSE_HEADERS,
    }
    if not preflight:
        headers["Cache-Control"] = CACHE_CONTROL
    return headers


def is_text_content_type(content_type: str | None) -> bool:
    """Return whether a response of this content type is textual and may be buffered."""
    lowered = (content_type or "").lower()
    return any(marker in lowered for marker in _TEXT_MARKERS)


def not_modified_headers(
    if_none_match: str | None, response_headers: Mapping[str, str]
) -> dict[str, str] | None:
    """Return the headers of a 304 reply, or None if the response must be sent whole.

    A 304 is due when the request's If-None-Match matches the response ETag;
    its headers are the response's ETag, Cache-Control and Vary where present.
    """
    if if_none_match is None:
        return None
    lowered = {name.lower(): value for name, value in response_headers.items()}
    server_etag = lowered.get("etag")
    if server_etag is None or not etags_match(if_none_match, server_etag):
        return None
    return {
        name: lowered[name.lower()] for name in _COPIED_ON_304 if name.lower() in lowered
    }