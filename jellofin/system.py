"""Server identity, liveness and crawler responses."""

from __future__ import annotations

import sys

from jellofin.types import PublicSystemInfo, SystemInfo

SERVER_VERSION = "10.10.7"
DEFAULT_SERVER_ID = "jellyfin-rs"

_PLATFORMS = (
    ("linux", "linux"),
    ("darwin", "macos"),
    ("win32", "windows"),
    ("cygwin", "windows"),
    ("freebsd", "freebsd"),
    ("openbsd", "openbsd"),
    ("netbsd", "netbsd"),
    ("dragonfly", "dragonfly"),
    ("sunos", "solaris"),
    ("aix", "aix"),
)


def _operating_system() -> str:
    """Return the short name of the operating system the server runs on."""
    platform = sys.platform
    for prefix, name in _PLATFORMS:
        if platform.startswith(prefix):
            return name
    return platform


def system_info(server_name: str, server_id: str | None = None) -> SystemInfo:
    """Return the full system information for an authenticated client."""
    return SystemInfo(
        server_name=server_name,
        version=SERVER_VERSION,
        id=server_id if server_id is not None else DEFAULT_SERVER_ID,
        operating_system=_operating_system(),
    )


def public_system_info(server_name: str, server_id: str | None = None) -> PublicSystemInfo:
    """Return the system information shown before login."""
    return PublicSystemInfo(
        server_name=server_name,
        version=SERVER_VERSION,
        id=server_id if server_id is not None else DEFAULT_SERVER_ID,
    )


def ping_response() -> tuple[int, dict[str, str], str]:
    """Return status, headers and body answering a ping."""
    return 200, {}, '"Jellyfin Server"'


def health_response() -> tuple[int, dict[str, str], str]:
    """Return status, headers and body answering a health check."""
    return 200, {"Cache-Control": "no-cache, no-store"}, "Healthy"


def robots_txt() -> str:
    """Return a robots.txt that keeps every crawler out."""
    return "User-agent: *\nDisallow: /\n"