# jellofin

Library pieces for a media server that speaks the Jellyfin client API and a
simpler "Notflix" JSON API. They do not depend on any web framework, so you can
use them from whatever HTTP stack you prefer.

## Installation

```
pip install jellofin
```

Pillow is the only runtime dependency. It is used for image resizing.

## Modules

- `jellofin.query`: `QueryParams` wraps a query-string mapping.
  - `get(key)` first tries the key as given. If that fails and the key starts
    with a lower-case letter, it tries the capitalised key, so `limit` also
    finds `Limit`.
  - `has(key)` checks for the exact key only.
  - `get_int(key, default)` reads a plain unsigned decimal number, or returns
    `default`.
- `jellofin.pagination`: `apply_pagination(items, params)` returns the page
  chosen by `startIndex` and `limit`, together with the start index that was
  used. The default limit is 100.
- `jellofin.sort`: `apply_item_sorting(items, params)` orders `BaseItemDto`
  objects by `sortBy` and `sortOrder`.
  - The sort fields are `CommunityRating`, `DateCreated`, `PremiereDate`,
    `ProductionYear`, `SortName`, `Name`, `Runtime`, `PlayCount`, `DatePlayed`,
    `IndexNumber` and `ParentIndexNumber`.
  - Field names are matched case-insensitively.
  - Unknown fields compare as equal, and the sort is stable.
  - If any field is `Random`, the order is left unchanged.
- `jellofin.types`: the Jellyfin data objects. These include `BaseItemDto`,
  `MediaSourceInfo`, `MediaStream`, `UserData`, `QueryResult`,
  `QueryResultNameIdPair`, `SystemInfo`, `PublicSystemInfo` and others.
  - Each object has `to_dict()` and `from_dict()`, which use PascalCase wire
    names.
  - `to_json(obj)` renders an object, or a list or mapping of objects, as
    compact JSON.
  - Optional fields that are `None` are left out.
- `jellofin.userdata`: `default_user_data(item_id)` returns the user data of an
  item that has never been played.
- `jellofin.localization`: `cultures()`, `countries()` and
  `localization_options()` return fixed lists.
- `jellofin.system`:
  - `system_info(server_name, server_id)` and
    `public_system_info(server_name, server_id)` build the system info
    payloads. The version is `10.10.7`.
  - `ping_response()` and `health_response()` return status, headers and body.
  - `robots_txt()` returns a robots.txt that disallows all crawling.
- `jellofin.imageresize`: `ImageResizer(cache_dir)` resizes images and keeps
  the results in a disk cache.
  - `resize_image(path, width, height, quality)` returns the cached file. It
    returns the original path if no parameters are given or if the image
    cannot be processed.
  - When only one dimension is given, the aspect ratio is kept.
  - `cache_key`, `clear_cache`, `cache_stats`, `cleanup_old_cache(max_age_days)`
    and `cache_size` manage the cache.
  - `calculate_dimensions` is also available as a standalone function.
- `jellofin.middleware`: helpers for HTTP middleware.
  - `normalize_path` collapses `//` and strips a leading `/emby`.
  - `etags_match` compares tags, with weak tags equal to strong ones.
  - `not_modified_headers` returns the headers for a 304 reply, or `None`.
  - `cors_headers(preflight)` returns the CORS headers.
  - `is_text_content_type` tells whether a content type is textual.
- `jellofin.notflix_types`: the Notflix JSON shapes. These include
  `CollectionInfo`, `GenreCount`, `MovieDetail`, `ShowDetail`, `ItemSummary`,
  `Season`, `Episode`, `Nfo` and others. The module has its own `to_json`.
- `jellofin.proxy`: helpers for forwarding HLS requests.
  - `is_hls_path` detects paths that contain `.mp4/`.
  - `build_url(server, path)` percent-encodes each path segment.
  - `filter_request_headers` and `filter_response_headers` drop hop-by-hop
    headers.

## Example

```python
from jellofin.query import QueryParams
from jellofin.types import BaseItemDto, to_json
from jellofin.sort import apply_item_sorting
from jellofin.pagination import apply_pagination
from jellofin.middleware import normalize_path

items = [BaseItemDto(name=n, id=n.lower(), item_type="Movie") for n in ("B", "C", "A")]
ordered = apply_item_sorting(items, QueryParams({"sortBy": "Name"}))
page, start = apply_pagination(ordered, QueryParams({"StartIndex": "1", "limit": "1"}))
print([item.name for item in page], start)   # ['B'] 1
print(to_json(page[0]))   # {"Name":"B","Id":"b","Type":"Movie","ImageTags":{}}
print(normalize_path("/emby//Users/abc"))    # /Users/abc
```

## What this package does not do

This package contains only building blocks. It does not provide:

- an HTTP server or a command to start one;
- storage for users, access tokens, playlists or playback state;
- scanning of media folders into collections;
- any way to generate item identifiers.

You have to supply these yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```