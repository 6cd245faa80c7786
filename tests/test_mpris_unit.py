from __future__ import annotations

import types

import pytest

import lyricbar.mpris.client as mpris_client
from lyricbar.mpris.client import MprisClient, _join_artist


def test_list_players_returns_empty_on_dbus_error(monkeypatch):
    class _FakeDbusException(Exception):
        pass

    def _raise_session_bus():
        raise _FakeDbusException("no session bus")

    # Patch the imported `dbus` module inside `lyricbar.mpris.client`
    monkeypatch.setattr(mpris_client, "dbus", types.SimpleNamespace(SessionBus=_raise_session_bus, DBusException=_FakeDbusException))

    assert MprisClient.list_players() == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (["A", "B"], "A, B"),
        (("A", "", "B"), "A, B"),
        ("Solo", "Solo"),
        (123, "123"),
        (None, "None"),
    ],
)
def test_join_artist_handles_common_types(value, expected):
    assert _join_artist(value) == expected


def test_join_artist_filters_unstringable_values(monkeypatch):
    class BadStr:
        def __str__(self):
            raise RuntimeError("nope")

    assert _join_artist([BadStr(), "OK"]) == "OK"



class _FakeProps:
    def __init__(self, metadata):
        self.metadata = metadata

    def Get(self, iface, prop):
        assert iface == "org.mpris.MediaPlayer2.Player"
        assert prop == "Metadata"
        return self.metadata


def _client_with(metadata) -> MprisClient:
    client = MprisClient.__new__(MprisClient)
    client.service_name = "org.mpris.MediaPlayer2.fake"
    client._props = _FakeProps(metadata)
    return client


def test_track_info_reads_as_text_lyrics():
    ti = _client_with(
        {
            "xesam:title": "Song",
            "xesam:artist": ["A", "B"],
            "xesam:asText": "first line\nsecond line\n",
            "mpris:trackid": "/t/1",
        }
    ).track_info()
    assert (ti.artist, ti.title, ti.album) == ("A, B", "Song", "")
    assert ti.lyrics == "first line\nsecond line\n"
    assert ti.track_key == "A, B | Song | /t/1"


def test_track_info_without_lyrics():
    ti = _client_with({"xesam:title": "Song", "xesam:artist": ["A"]}).track_info()
    assert ti.lyrics == ""
