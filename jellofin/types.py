"""Data objects exchanged with media clients, with their JSON wire form."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _req(key: str | None = None, *, nested: type | None = None, default: Any = MISSING,
         factory: Any = MISSING) -> Any:
    """A field that must be present on the wire."""
    return field(
        default=default,
        default_factory=factory,
        metadata={"key": key, "nested": nested, "required": True, "omit": False},
    )


def _opt(key: str | None = None, *, nested: type | None = None, omit: bool = True) -> Any:
    """An optional field; when ``omit`` is set a None value is left off the wire."""
    return field(
        default=None,
        metadata={"key": key, "nested": nested, "required": False, "omit": omit},
    )


def _wire_key(f: Field) -> str:
    key = f.metadata.get("key")
    if key:
        return key
    return "".join(part[:1].upper() + part[1:] for part in f.name.split("_"))


def _to_wire(value: Any) -> Any:
    if isinstance(value, _Wire):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_wire(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _to_wire(v) for k, v in value.items()}
    return value


def _from_wire(nested: type | None, value: Any) -> Any:
    if nested is None or value is None:
        return value
    if isinstance(value, list):
        return [nested.from_dict(v) for v in value]
    return nested.from_dict(value)


class _Wire:
    """Mixin giving dataclasses their PascalCase JSON form."""

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form of this object."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None and f.metadata.get("omit"):
                continue
            out[_wire_key(f)] = _to_wire(value)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Build an object from its wire form; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError(f"expected an object for {cls.__name__}")
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            key = _wire_key(f)
            value = data.get(key)
            if value is None:
                if f.metadata.get("required"):
                    raise ValueError(f"missing field `{key}` in {cls.__name__}")
                kwargs[f.name] = None
                continue
            kwargs[f.name] = _from_wire(f.metadata.get("nested"), value)
        return cls(**kwargs)


@dataclass(kw_only=True)
class NameIdPair(_Wire):
    name: str = _req()
    id: str = _req()


@dataclass(kw_only=True)
class BaseItemPerson(_Wire):
    name: str = _req()
    id: str = _req()
    person_type: str = _req("Type")
    role: str | None = _opt()


@dataclass(kw_only=True)
class Chapter(_Wire):
    start_position_ticks: int = _req()
    name: str = _req()
    image_tag: str | None = _opt()


@dataclass(kw_only=True)
class UserData(_Wire):
    playback_position_ticks: int = _req()
    played_percentage: float = _req()
    play_count: int = _req()
    is_favorite: bool = _req()
    last_played_date: str | None = _opt(omit=False)
    played: bool = _req()
    key: str = _req()
    unplayed_item_count: int | None = _opt(omit=False)


@dataclass(kw_only=True)
class UserItemData(_Wire):
    played: bool = _req()
    is_favorite: bool = _req()
    playback_position_ticks: int | None = _opt()
    play_count: int | None = _opt()


@dataclass(kw_only=True)
class ImageBlurHashes(_Wire):
    primary: dict[str, str] | None = _opt()
    art: dict[str, str] | None = _opt()
    backdrop: dict[str, str] | None = _opt()
    banner: dict[str, str] | None = _opt()
    logo: dict[str, str] | None = _opt()
    thumb: dict[str, str] | None = _opt()


@dataclass(kw_only=True)
class MediaStream(_Wire):
    stream_type: str = _req("Type")
    codec: str = _req()
    language: str | None = _opt()
    index: int | None = _opt()
    width: int | None = _opt()
    height: int | None = _opt()
    bit_rate: int | None = _opt()
    is_default: bool | None = _opt()
    codec_tag: str | None = _opt()
    aspect_ratio: str | None = _opt()
    profile: str | None = _opt()
    time_base: str | None = _opt()
    ref_frames: int | None = _opt()
    is_anamorphic: bool | None = _opt()
    bit_depth: int | None = _opt()
    display_title: str | None = _opt()
    video_range: str | None = _opt()
    video_range_type: str | None = _opt()
    audio_spatial_format: str | None = _opt()
    localized_default: str | None = _opt()
    localized_external: str | None = _opt()
    channel_layout: str | None = _opt()
    channels: int | None = _opt()
    sample_rate: int | None = _opt()
    level: float | None = _opt()
    average_frame_rate: float | None = _opt()
    real_frame_rate: float | None = _opt()
    title: str | None = _opt()
    is_external: bool | None = _opt()
    is_text_subtitle_stream: bool | None = _opt()
    supports_external_stream: bool | None = _opt()
    pixel_format: str | None = _opt()
    is_interlaced: bool | None = _opt()
    is_avc: bool | None = _opt("IsAVC")
    is_hearing_impaired: bool | None = _opt()
    is_forced: bool | None = _opt()


@dataclass(kw_only=True)
class MediaSourceInfo(_Wire):
    id: str = _req()
    path: str = _req()
    name: str = _req()
    source_type: str = _req("Type")
    protocol: str | None = _opt()
    container: str = _req()
    video_type: str | None = _opt()
    size: int | None = _opt()
    bitrate: int | None = _opt()
    run_time_ticks: int | None = _opt("RunTimeTicks")
    etag: str | None = _opt()
    is_remote: bool = _req()
    supports_direct_stream: bool = _req()
    supports_direct_play: bool = _req()
    supports_transcoding: bool = _req()
    media_streams: list[MediaStream] | None = _opt(nested=MediaStream)
    default_audio_stream_index: int | None = _opt()
    direct_stream_url: str | None = _opt()
    required_http_headers: dict[str, str] | None = _opt()
    transcoding_sub_protocol: str | None = _opt()
    media_attachments: list[str] | None = _opt()
    formats: list[str] | None = _opt()
    read_at_native_framerate: bool | None = _opt()
    has_segments: bool | None = _opt()
    ignore_dts: bool | None = _opt()
    ignore_index: bool | None = _opt()
    gen_pts_input: bool | None = _opt()
    is_infinite_stream: bool | None = _opt()
    requires_opening: bool | None = _opt()
    requires_closing: bool | None = _opt()
    requires_looping: bool | None = _opt()
    supports_probing: bool | None = _opt()


@dataclass(kw_only=True)
class BaseItemDto(_Wire):
    name: str = _req(default="")
    id: str = _req(default="")
    item_type: str = _req("Type", default="")
    collection_type: str | None = _opt()
    overview: str | None = _opt()
    production_year: int | None = _opt()
    premiere_date: str | None = _opt()
    community_rating: float | None = _opt()
    runtime_ticks: int | None = _opt("RunTimeTicks")
    genres: list[str] | None = _opt()
    genre_items: list[NameIdPair] | None = _opt(nested=NameIdPair)
    studios: list[NameIdPair] | None = _opt(nested=NameIdPair)
    people: list[BaseItemPerson] | None = _opt(nested=BaseItemPerson)
    chapters: list[Chapter] | None = _opt(nested=Chapter)
    has_subtitles: bool | None = _opt()
    parent_logo_item_id: str | None = _opt()
    parent_id: str | None = _opt()
    series_id: str | None = _opt()
    series_name: str | None = _opt()
    season_id: str | None = _opt()
    season_name: str | None = _opt()
    index_number: int | None = _opt()
    parent_index_number: int | None = _opt()
    child_count: int | None = _opt()
    image_tags: dict[str, str] = _req(factory=dict)
    backdrop_image_tags: list[str] | None = _opt()
    primary_image_aspect_ratio: float | None = _opt()
    server_id: str | None = _opt()
    container: str | None = _opt()
    video_type: str | None = _opt()
    width: int | None = _opt()
    height: int | None = _opt()
    image_blur_hashes: ImageBlurHashes | None = _opt(nested=ImageBlurHashes)
    media_type: str | None = _opt()
    is_hd: bool | None = _opt("IsHD")
    is_4k: bool | None = _opt("Is4K")
    is_folder: bool | None = _opt()
    location_type: str | None = _opt()
    path: str | None = _opt()
    etag: str | None = _opt()
    date_created: str | None = _opt()
    user_data: UserData | None = _opt(nested=UserData)
    media_sources: list[MediaSourceInfo] | None = _opt(nested=MediaSourceInfo)
    provider_ids: dict[str, str] | None = _opt()
    recursive_item_count: int | None = _opt()
    official_rating: str | None = _opt()
    sort_name: str | None = _opt()
    forced_sort_name: str | None = _opt()
    original_title: str | None = _opt()
    can_delete: bool | None = _opt()
    can_download: bool | None = _opt()
    taglines: list[str] | None = _opt()
    channel_id: str | None = _opt()
    play_access: str | None = _opt()
    enable_media_source_display: bool | None = _opt()


@dataclass(kw_only=True)
class QueryResult(_Wire, Generic[T]):
    items: list[T] = _req()
    total_record_count: int = _req()
    start_index: int = _req()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], item_type: type | None = None):
        """Build a result from its wire form, converting items with ``item_type`` if given."""
        result = super().from_dict(data)
        if item_type is not None:
            result.items = [item_type.from_dict(item) for item in result.items]
        return result


@dataclass(kw_only=True)
class QueryResultNameIdPair(_Wire):
    items: list[NameIdPair] = _req(nested=NameIdPair)
    total_record_count: int = _req()
    start_index: int = _req()


@dataclass(kw_only=True)
class SystemInfo(_Wire):
    server_name: str = _req()
    version: str = _req()
    id: str = _req()
    operating_system: str = _req()


@dataclass(kw_only=True)
class PublicSystemInfo(_Wire):
    server_name: str = _req()
    version: str = _req()
    id: str = _req()


@dataclass(kw_only=True)
class ItemCounts(_Wire):
    movie_count: int = _req()
    series_count: int = _req()
    episode_count: int = _req()
    album_count: int = _req()
    song_count: int = _req()


@dataclass(kw_only=True)
class SearchHint(_Wire):
    item_id: str = _req()
    name: str = _req()
    item_type: str = _req("Type")
    production_year: int | None = _opt()


@dataclass(kw_only=True)
class PlaybackInfoResponse(_Wire):
    media_sources: list[MediaSourceInfo] = _req(nested=MediaSourceInfo)
    play_session_id: str = _req()


def to_json(obj: Any) -> str:
    """Serialise an object, or a list or mapping of objects, to compact JSON."""
    return json.dumps(_to_wire(obj), separators=(",", ":"), ensure_ascii=False)