"""Framework-independent pieces of a Jellyfin-compatible media server: query handling, DTOs, sorting, paging, image resizing and HTTP helpers."""

__version__ = "0.1.0"