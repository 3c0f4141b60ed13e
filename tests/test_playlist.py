import io

import pytest

from musicplayer.music import Music
from musicplayer.playlist import PlayList


@pytest.fixture
def songs():
    return [
        Music("One", "Ann", 2000, "rock"),
        Music("Two", "Bob", 2001, "pop"),
        Music("Three", "Cid", 2002, "jazz"),
    ]


def test_new_play_list_is_empty():
    play_list = PlayList("Road")
    assert play_list.name == "Road"
    assert len(play_list) == 0
    assert play_list.songs == ()


def test_add_keeps_order(songs):
    play_list = PlayList("Road")
    for song in songs:
        play_list.add_music(song)
    assert len(play_list) == 3
    assert play_list.songs == tuple(songs)
    assert list(play_list) == songs


def test_remove_by_index(songs):
    play_list = PlayList("Road")
    for song in songs:
        play_list.add_music(song)
    removed = play_list.remove_music(1)
    assert removed is songs[1]
    assert play_list.songs == (songs[0], songs[2])


@pytest.mark.parametrize("index", [3, -1, 10])
def test_remove_out_of_range_raises(songs, index):
    play_list = PlayList("Road")
    for song in songs:
        play_list.add_music(song)
    with pytest.raises(IndexError):
        play_list.remove_music(index)
    assert len(play_list) == 3


def test_songs_view_is_not_live(songs):
    play_list = PlayList("Road")
    view = play_list.songs
    play_list.add_music(songs[0])
    assert view == ()
    assert len(play_list.songs) == 1


def test_show_info_format(songs):
    play_list = PlayList("Road")
    play_list.add_music(songs[0])
    out = io.StringIO()
    play_list.show_info(out)
    assert out.getvalue() == "play list name: Road\nnumber of songs: 1\n"


def test_show_songs_writes_each_song(songs):
    play_list = PlayList("Road")
    play_list.add_music(songs[0])
    play_list.add_music(songs[1])
    out = io.StringIO()
    play_list.show_songs(out)
    assert out.getvalue().splitlines() == [
        "One", "Ann", "rock", "2000",
        "Two", "Bob", "pop", "2001",
    ]


def test_show_songs_empty_writes_nothing():
    out = io.StringIO()
    PlayList("Road").show_songs(out)
    assert out.getvalue() == ""