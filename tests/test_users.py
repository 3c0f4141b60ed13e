import io

import pytest

from musicplayer.music import Music
from musicplayer.playlist import PlayList
from musicplayer.prompt import Console
from musicplayer.users import BaseUser, User


def make_user():
    password = "password"
    return User("listener", password)


def test_base_user_keeps_credentials():
    password = "password"
    user = BaseUser("someone", password)
    assert user.user_name == "someone"
    assert user.password == "password"


def test_user_is_base_user_with_empty_lists():
    user = make_user()
    assert isinstance(user, BaseUser)
    assert user.user_name == "listener"
    assert user.favourite_songs == ()
    assert user.saved_songs == ()
    assert user.play_lists == ()
    assert user.favourite_play_lists == ()


def test_favourite_songs_add_and_remove():
    user = make_user()
    first, second = Music("a", "x", 2000, "pop"), Music("b", "y", 2001, "rock")
    user.add_favourite_song(first)
    user.add_favourite_song(second)
    assert user.remove_favourite_song(0) is first
    assert user.favourite_songs == (second,)


def test_saved_songs_add_and_remove():
    user = make_user()
    song = Music("a", "x", 2000, "pop")
    user.save_song(song)
    assert user.saved_songs == (song,)
    assert user.remove_saved_song(0) is song
    assert user.saved_songs == ()


def test_remove_out_of_range_raises():
    user = make_user()
    with pytest.raises(IndexError):
        user.remove_saved_song(0)
    with pytest.raises(IndexError):
        user.remove_favourite_song(-1)
    with pytest.raises(IndexError):
        user.remove_play_list(0)
    with pytest.raises(IndexError):
        user.remove_favourite_play_list(3)


def test_make_play_list_reads_name():
    user = make_user()
    out = io.StringIO()
    console = Console(io.StringIO("road trip\n"), out)
    created = user.make_play_list(console)
    assert created.name == "road trip"
    assert len(created) == 0
    assert user.play_lists == (created,)
    assert out.getvalue() == "play list name: "


def test_remove_own_play_list():
    user = make_user()
    console = Console(io.StringIO("one\ntwo\n"), io.StringIO())
    first = user.make_play_list(console)
    second = user.make_play_list(console)
    assert user.remove_play_list(1) is second
    assert user.play_lists == (first,)


def test_favourite_play_lists():
    user = make_user()
    play_list = PlayList("mix")
    user.add_favourite_play_list(play_list)
    assert user.favourite_play_lists == (play_list,)
    assert user.remove_favourite_play_list(0) is play_list
    assert user.favourite_play_lists == ()