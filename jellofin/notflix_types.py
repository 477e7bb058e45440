"""Data objects of the collection browsing API, with their JSON wire form."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any


def _req(key: str | None = None, *, nested: type | None = None) -> Any:
    """A field that is always present on the wire."""
    return field(default=MISSING, metadata={"key": key, "nested": nested, "omit": False})


def _opt(key: str | None = None, *, nested: type | None = None) -> Any:
    """An optional field, left off the wire when None."""
    return field(default=None, metadata={"key": key, "nested": nested, "omit": True})


def _wire_key(f: Field) -> str:
    return f.metadata.get("key") or f.name


def _to_wire(value: Any) -> Any:
    if isinstance(value, _Wire):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_wire(v) for v in value]
    if isinstance(value, Mapping):
        return {k: _to_wire(v) for k, v in value.items()}
    return value


class _Wire:
    """Mixin giving dataclasses their JSON form."""

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
                if not f.metadata.get("omit"):
                    raise ValueError(f"missing field `{key}` in {cls.__name__}")
                kwargs[f.name] = None
                continue
            nested = f.metadata.get("nested")
            if nested is not None:
                value = (
                    [nested.from_dict(v) for v in value]
                    if isinstance(value, list)
                    else nested.from_dict(value)
                )
            kwargs[f.name] = value
        return cls(**kwargs)


@dataclass(kw_only=True)
class CollectionInfo(_Wire):
    id: str = _req()
    name: str = _req()
    collection_type: str = _req("type")
    path: str = _req()


@dataclass(kw_only=True)
class GenreCount(_Wire):
    genre: str = _req()
    count: int = _req()


@dataclass(kw_only=True)
class Actor(_Wire):
    name: str = _req()
    role: str | None = _opt()


@dataclass(kw_only=True)
class FanartItem(_Wire):
    thumb: str = _req()


@dataclass(kw_only=True)
class Nfo(_Wire):
    id: str = _req()
    title: str = _req()
    plot: str | None = _opt()
    premiered: str | None = _opt()
    mpaa: str | None = _opt()
    aired: str | None = _opt()
    studio: str | None = _opt()
    rating: float | None = _opt()
    runtime: str | None = _opt()
    year: int | None = _opt()
    originaltitle: str | None = _opt()
    genre: list[str] | None = _opt()
    actor: list[Actor] | None = _opt(nested=Actor)
    director: str | None = _opt()
    thumb: str | None = _opt()
    fanart: list[FanartItem] | None = _opt(nested=FanartItem)


@dataclass(kw_only=True)
class EpisodeNfo(_Wire):
    title: str = _req()
    plot: str | None = _opt()
    season: str = _req()
    episode: str = _req()
    aired: str | None = _opt()


@dataclass(kw_only=True)
class Episode(_Wire):
    name: str = _req()
    seasonno: int = _req()
    episodeno: int = _req()
    nfo: EpisodeNfo = _req(nested=EpisodeNfo)
    video: str = _req()
    thumb: str | None = _opt()


@dataclass(kw_only=True)
class Season(_Wire):
    seasonno: int = _req()
    poster: str | None = _opt()
    episodes: list[Episode] = _req(nested=Episode)


@dataclass(kw_only=True)
class MovieDetail(_Wire):
    id: str = _req()
    name: str = _req()
    path: str = _req()
    baseurl: str = _req()
    item_type: str = _req("type")
    firstvideo: int = _req()
    lastvideo: int = _req()
    sort_name: str = _req("sortName")
    nfo: Nfo = _req(nested=Nfo)
    fanart: str | None = _opt()
    poster: str | None = _opt()
    rating: float | None = _opt()
    genre: list[str] = _req()
    year: int | None = _opt()
    video: str = _req()
    thumb: str | None = _opt()


@dataclass(kw_only=True)
class ShowDetail(_Wire):
    id: str = _req()
    name: str = _req()
    path: str = _req()
    baseurl: str = _req()
    item_type: str = _req("type")
    firstvideo: int = _req()
    lastvideo: int = _req()
    sort_name: str = _req("sortName")
    nfo: Nfo = _req(nested=Nfo)
    banner: str | None = _opt()
    fanart: str | None = _opt()
    poster: str | None = _opt()
    rating: float | None = _opt()
    genre: list[str] = _req()
    year: int | None = _opt()
    season_all_banner: str | None = _opt("seasonAllBanner")
    season_all_poster: str | None = _opt("seasonAllPoster")
    seasons: list[Season] = _req(nested=Season)


@dataclass(kw_only=True)
class ItemSummary(_Wire):
    id: str = _req()
    name: str = _req()
    path: str = _req()
    baseurl: str = _req()
    item_type: str = _req("type")
    firstvideo: int = _req()
    lastvideo: int = _req()
    sort_name: str = _req("sortName")
    banner: str | None = _opt()
    fanart: str | None = _opt()
    poster: str | None = _opt()
    rating: float | None = _opt()
    genre: list[str] = _req()
    year: int | None = _opt()


def to_json(obj: Any) -> str:
    """Serialise an object, or a list or mapping of objects, to compact JSON."""
    return json.dumps(_to_wire(obj), separators=(",", ":"), ensure_ascii=False)