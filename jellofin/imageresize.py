"""Resizing of artwork images with an on-disk cache of the results."""

from __future__ import annotations

import hashlib
import logging
import math
import os
import shutil
import struct
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_DEFAULT_JPEG_QUALITY = 90
_SECONDS_PER_DAY = 24 * 60 * 60


class ImageResizerError(Exception):
    """Raised when the image cache cannot be managed."""


@dataclass(frozen=True)
class CacheStats:
    """Summary of the files held in the image cache.

    ``oldest_file`` and ``newest_file`` are modification times in seconds
    since the epoch, or None when the cache is empty.
    """

    total_files: int = 0
    total_size: int = 0
    oldest_file: float | None = None
    newest_file: float | None = None


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calculate_dimensions(
    orig_width: int,
    orig_height: int,
    width: int | None,
    height: int | None,
) -> tuple[int, int]:
    """Return the requested size, filling in a missing side from the aspect ratio."""
    if width is not None and height is not None:
        return width, height
    if width is not None:
        aspect = _f32(orig_height / orig_width)
        return width, _round_half_away(_f32(width * aspect))
    if height is not None:
        aspect = _f32(orig_width / orig_height)
        return _round_half_away(_f32(height * aspect)), height
    return orig_width, orig_height


def _fit_within(orig_width: int, orig_height: int, width: int, height: int) -> tuple[int, int]:
    """Largest size with the original aspect ratio that fits in ``width`` x ``height``."""
    ratio = min(width / orig_width, height / orig_height)
    new_width = max(_round_half_away(orig_width * ratio), 1)
    new_height = max(_round_half_away(orig_height * ratio), 1)
    return new_width, new_height


def _check_u32(name: str, value: int | None) -> int:
    if value is None:
        return 0
    if not 0 <= value <= _U32_MAX:
        raise ImageResizerError(f"{name} out of range: {value}")
    return value


class ImageResizer:
    """Produces resized copies of images and keeps them in ``cache_dir``."""

    def __init__(self, cache_dir: str | os.PathLike[str]) -> None:
        self.cache_dir = Path(cache_dir)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ImageResizerError(f"IO error: {exc}") from exc

    def resize_image(
        self,
        source_path: str | os.PathLike[str],
        width: int | None = None,
        height: int | None = None,
        quality: int | None = None,
    ) -> Path:
        """Return the path of a resized copy of ``source_path``.

        With no parameters, or when the image cannot be read, decoded,
        encoded or cached, the original path is returned.
        """
        source = Path(source_path)
        if width is None and height is None and quality is None:
            return source

        key = self.cache_key(source, width, height, quality)
        cache_path = self.cache_dir / key
        if cache_path.exists():
            log.debug("Serving cached image: %s", key)
            return cache_path

        log.debug("Resizing image: %s", source)
        try:
            with Image.open(source) as opened:
                image_format = opened.format
                opened.load()
                image = opened.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            log.error("Failed to load image %s: %s", source, exc)
            return source

        orig_width, orig_height = image.size
        target = calculate_dimensions(orig_width, orig_height, width, height)
        if target != (orig_width, orig_height):
            fitted = _fit_within(orig_width, orig_height, *target)
            image = image.resize(fitted, Image.Resampling.LANCZOS)

        try:
            with cache_path.open("wb") as out:
                self._encode(image, image_format, quality, out)
        except (OSError, ValueError, KeyError) as exc:
            log.error("Failed to write cache file %s: %s", key, exc)
            cache_path.unlink(missing_ok=True)
            return source
        return cache_path

    @staticmethod
    def _encode(image: Image.Image, image_format: str | None, quality: int | None, out) -> None:
        if image_format == "JPEG":
            level = min(max(quality if quality is not None else _DEFAULT_JPEG_QUALITY, 1), 100)
            image.save(out, format="JPEG", quality=level)
        elif image_format == "WEBP":
            image.save(out, format="WEBP", lossless=True)
        else:
            image.save(out, format=image_format)

    def cache_key(
        self,
        source_path: str | os.PathLike[str],
        width: int | None,
        height: int | None,
        quality: int | None,
    ) -> str:
        """Return the cache file name for a source image and resize parameters."""
        source = Path(source_path)
        digest = hashlib.sha256()
        digest.update(str(source).encode("utf-8", "replace"))
        digest.update(_check_u32("width", width).to_bytes(4, "little"))
        digest.update(_check_u32("height", height).to_bytes(4, "little"))
        digest.update(_check_u32("quality", quality).to_bytes(4, "little"))
        try:
            mtime = source.stat().st_mtime
        except OSError:
            mtime = None
        if mtime is not None and mtime >= 0:
            digest.update(int(mtime).to_bytes(8, "little"))
        extension = source.suffix[1:] if source.suffix else "jpg"
        return f"{digest.hexdigest()}.{extension}"

    def _files(self):
        """Yield (entry, stat) for each regular file in the cache directory."""
        with os.scandir(self.cache_dir) as entries:
            for entry in entries:
                info = entry.stat()
                if entry.is_file():
                    yield entry, info

    def clear_cache(self) -> None:
        """Remove every cached file, leaving an empty cache directory."""
        if not self.cache_dir.exists():
            return
        try:
            shutil.rmtree(self.cache_dir)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ImageResizerError(f"IO error: {exc}") from exc

    def cache_stats(self) -> CacheStats:
        """Return the number, total size and age range of cached files."""
        if not self.cache_dir.exists():
            return CacheStats()
        try:
            infos = [info for _, info in self._files()]
        except OSError as exc:
            raise ImageResizerError(f"IO error: {exc}") from exc
        mtimes = [info.st_mtime for info in infos]
        return CacheStats(
            total_files=len(infos),
            total_size=sum(info.st_size for info in infos),
            oldest_file=min(mtimes, default=None),
            newest_file=max(mtimes, default=None),
        )

    def cleanup_old_cache(self, max_age_days: int) -> int:
        """Delete cached files older than ``max_age_days``; return how many went."""
        if not self.cache_dir.exists():
            return 0
        max_age = max_age_days * _SECONDS_PER_DAY
        now = time.time()
        removed = 0
        try:
            for entry, info in list(self._files()):
                age = now - info.st_mtime
                if age >= 0 and age > max_age:
                    os.remove(entry.path)
                    removed += 1
        except OSError as exc:
            raise ImageResizerError(f"IO error: {exc}") from exc
        return removed

    def cache_size(self) -> int:
        """Return the total size in bytes of the cached files."""
        if not self.cache_dir.exists():
            return 0
        total = 0
        try:
            with os.scandir(self.cache_dir) as entries:
                for entry in entries:
                    try:
                        if entry.is_file():
                            total += entry.stat().st_size
                    except OSError:
                        continue
        except OSError as exc:
            raise ImageResizerError(f"IO error: {exc}") from exc
        return total