"""Accounts of the people using the player."""

from __future__ import annotations

from musicplayer.music import Music
from musicplayer.playlist import PlayList
from musicplayer.prompt import Console


def _pop(items: list, index: int, what: str):
    if not 0 <= index < len(items):
        raise IndexError(f"no {what} at position {index}")
    return items.pop(index)


class BaseUser:
    """An account identified by a user name and a password."""

    def __init__(self, user_name: str = "", password: str = "") -> None:
        self.user_name = user_name
        self.password = password


class User(BaseUser):
    """A listener with favourite and saved songs and own play lists."""

    def __init__(self, user_name: str = "", password: str = "") -> None:
        super().__init__(user_name, password)
        self._favourite_songs: list[Music] = []
        self._saved_songs: list[Music] = []
        self._play_lists: list[PlayList] = []
        self._favourite_play_lists: list[PlayList] = []

    @property
    def favourite_songs(self) -> tuple[Music, ...]:
        return tuple(self._favourite_songs)

    @property
    def saved_songs(self) -> tuple[Music, ...]:
        return tuple(self._saved_songs)

    @property
    def play_lists(self) -> tuple[PlayList, ...]:
        return tuple(self._play_lists)

    @property
    def favourite_play_lists(self) -> tuple[PlayList, ...]:
        return tuple(self._favourite_play_lists)

    def add_favourite_song(self, song: Music) -> None:
        """Mark a song as a favourite."""
        self._favourite_songs.append(song)

    def save_song(self, song: Music) -> None:
        """Keep a song in the saved list."""
        self._saved_songs.append(song)

    def remove_favourite_song(self, index: int) -> Music:
        """Remove and return the favourite song at a zero-based position."""
        return _pop(self._favourite_songs, index, "favourite song")

    def remove_saved_song(self, index: int) -> Music:
        """Remove and return the saved song at a zero-based position."""
        return _pop(self._saved_songs, index, "saved song")

    def make_play_list(self, console: Console) -> PlayList:
        """Ask for a name and create an empty play list under it."""
        name = console.read_line("play list name: ")
        play_list = PlayList(name)
        self._play_lists.append(play_list)
        return play_list

    def add_favourite_play_list(self, play_list: PlayList) -> None:
        """Mark a play list as a favourite."""
        self._favourite_play_lists.append(play_list)

    def remove_play_list(self, index: int) -> PlayList:
        """Remove and return the own play list at a zero-based position."""
        return _pop(self._play_lists, index, "play list")

    def remove_favourite_play_list(self, index: int) -> PlayList:
        """Remove and return the favourite play list at a zero-based position."""
        return _pop(self._favourite_play_lists, index, "favourite play list")