import sys

import pytest

from jellofin.system import (
    health_response,
    ping_response,
    public_system_info,
    robots_txt,
    system_info,
)


def test_system_info_with_server_id():
    info = system_info("Home", "abc")
    assert info.server_name == "Home"
    assert info.id == "abc"
    assert info.version == "10.10.7"


def test_system_info_defaults_id():
    assert system_info("Home").id == "jellyfin-rs"


def test_public_system_info_wire_form():
    info = public_system_info("Home", None)
    assert info.to_dict() == {"ServerName": "Home", "Version": "10.10.7", "Id": "jellyfin-rs"}


@pytest.mark.parametrize(
    "platform, expected",
    [("linux", "linux"), ("darwin", "macos"), ("win32", "windows"), ("freebsd14", "freebsd")],
)
def test_operating_system_name(monkeypatch, platform, expected):
    monkeypatch.setattr(sys, "platform", platform)
    assert system_info("Home").operating_system == expected


def test_system_info_wire_keys():
    data = system_info("Home", "x").to_dict()
    assert set(data) == {"ServerName", "Version", "Id", "OperatingSystem"}


def test_ping_response():
    status, headers, body = ping_response()
    assert status == 200
    assert body == '"Jellyfin Server"'
    assert headers == {}


def test_health_response():
    status, headers, body = health_response()
    assert status == 200
    assert body == "Healthy"
    assert headers["Cache-Control"] == "no-cache, no-store"


def test_robots_txt():
    assert robots_txt() == "User-agent: *\nDisallow: /\n"