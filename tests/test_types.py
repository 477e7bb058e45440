import json

import pytest

from jellofin.types import (
    BaseItemDto,
    ImageBlurHashes,
    MediaSourceInfo,
    MediaStream,
    NameIdPair,
    PublicSystemInfo,
    QueryResult,
    QueryResultNameIdPair,
    SearchHint,
    SystemInfo,
    UserData,
    UserItemData,
    to_json,
)


def _user_data():
    return UserData(
        playback_position_ticks=0,
        played_percentage=0.0,
        play_count=0,
        is_favorite=False,
        last_played_date="0001-01-01T00:00:00Z",
        played=False,
        key="item1",
        unplayed_item_count=0,
    )


def _media_source():
    return MediaSourceInfo(
        id="item1",
        path="movie.mp4",
        name="movie.mp4",
        source_type="Default",
        protocol="File",
        container="mp4",
        run_time_ticks=42,
        is_remote=False,
        supports_direct_stream=True,
        supports_direct_play=True,
        supports_transcoding=False,
        media_streams=[MediaStream(stream_type="Video", codec="h264", is_avc=True)],
    )


def test_default_item_has_only_required_keys():
    assert BaseItemDto().to_dict() == {"Name": "", "Id": "", "Type": "", "ImageTags": {}}


def test_renamed_keys():
    dto = BaseItemDto(name="A", id="x", item_type="Movie", is_hd=True, is_4k=False, runtime_ticks=5)
    wire = dto.to_dict()
    assert wire["IsHD"] is True
    assert wire["Is4K"] is False
    assert wire["RunTimeTicks"] == 5
    assert wire["Type"] == "Movie"


def test_user_data_keeps_null_fields():
    data = UserData(
        playback_position_ticks=1,
        played_percentage=2.0,
        play_count=3,
        is_favorite=True,
        played=True,
        key="k",
    )
    wire = data.to_dict()
    assert "LastPlayedDate" in wire and wire["LastPlayedDate"] is None
    assert "UnplayedItemCount" in wire and wire["UnplayedItemCount"] is None


def test_media_source_keys():
    wire = _media_source().to_dict()
    assert wire["Type"] == "Default"
    assert wire["RunTimeTicks"] == 42
    assert wire["MediaStreams"][0]["IsAVC"] is True
    assert "Bitrate" not in wire


def test_nested_round_trip():
    dto = BaseItemDto(
        name="Movie",
        id="m1",
        item_type="Movie",
        genre_items=[NameIdPair(name="Drama", id="genre_Drama")],
        image_tags={"Primary": "m1"},
        user_data=_user_data(),
        media_sources=[_media_source()],
        image_blur_hashes=ImageBlurHashes(primary={"m1": "hash"}),
    )
    back = BaseItemDto.from_dict(json.loads(to_json(dto)))
    assert back == dto


def test_from_dict_missing_required_raises():
    with pytest.raises(ValueError):
        NameIdPair.from_dict({"Name": "only name"})


def test_from_dict_null_required_raises():
    with pytest.raises(ValueError):
        BaseItemDto.from_dict({"Name": "a", "Id": "b", "Type": "c", "ImageTags": None})


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        NameIdPair.from_dict(["a", "b"])


def test_from_dict_ignores_unknown_keys():
    pair = NameIdPair.from_dict({"Name": "n", "Id": "i", "Extra": 1})
    assert pair == NameIdPair(name="n", id="i")


def test_to_json_is_compact():
    assert to_json(NameIdPair(name="a", id="b")) == '{"Name":"a","Id":"b"}'


def test_to_json_keeps_non_ascii():
    assert "é" in to_json(NameIdPair(name="é", id="x"))


def test_query_result_round_trip_with_item_type():
    result = QueryResult(items=[BaseItemDto(name="x")], total_record_count=1, start_index=0)
    wire = json.loads(to_json(result))
    assert wire["TotalRecordCount"] == 1
    assert wire["StartIndex"] == 0
    back = QueryResult.from_dict(wire, BaseItemDto)
    assert back == result


def test_query_result_name_id_pair_round_trip():
    result = QueryResultNameIdPair(
        items=[NameIdPair(name="a", id="1")], total_record_count=1, start_index=0
    )
    assert QueryResultNameIdPair.from_dict(result.to_dict()) == result


def test_system_info_keys():
    info = SystemInfo(server_name="srv", version="10.10.7", id="jellyfin-rs", operating_system="linux")
    assert info.to_dict() == {
        "ServerName": "srv",
        "Version": "10.10.7",
        "Id": "jellyfin-rs",
        "OperatingSystem": "linux",
    }
    public = PublicSystemInfo(server_name="srv", version="10.10.7", id="jellyfin-rs")
    assert PublicSystemInfo.from_dict(public.to_dict()) == public


def test_optional_fields_omitted():
    hint = SearchHint(item_id="i", name="n", item_type="Movie")
    assert "ProductionYear" not in hint.to_dict()
    item = UserItemData(played=True, is_favorite=False)
    assert item.to_dict() == {"Played": True, "IsFavorite": False}