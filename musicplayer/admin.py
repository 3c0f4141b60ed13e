"""Administrator accounts that curate songs, play lists and artists."""

from __future__ import annotations

import sys
from typing import TextIO

from musicplayer.artist import Artist
from musicplayer.music import Music
from musicplayer.playlist import PlayList
from musicplayer.prompt import INVALID_INPUT, Console
from musicplayer.users import BaseUser


class Admin(BaseUser):
    """A user who adds and removes songs, play lists and artist pages."""

    def __init__(self, user_name: str = "", password: str = "") -> None:
        super().__init__(user_name, password)
        self._songs: list[Music] = []
        self._artists: list[Artist] = []
        self._play_lists: list[PlayList] = []

    @property
    def added_songs(self) -> tuple[Music, ...]:
        return tuple(self._songs)

    @property
    def added_artists(self) -> tuple[Artist, ...]:
        return tuple(self._artists)

    @property
    def added_play_lists(self) -> tuple[PlayList, ...]:
        return tuple(self._play_lists)

    def add_song(self, console: Console) -> Music:
        """Ask for a song's details and add it."""
        name = console.read_line("music name: ")
        artist_name = console.read_line("artist name: ")
        release_year = console.read_int("release year: ")
        genre = console.read_line("genre: ")
        song = Music(name, artist_name, release_year, genre)
        self._songs.append(song)
        return song

    def remove_song(self, console: Console) -> Music:
        """List the added songs and remove the one chosen."""
        for number, song in enumerate(self._songs, start=1):
            console.write(f"{number}) {song.name}\n")
        index = console.choose_index(
            "enter song that you want to delete, else enter 0 to return: ",
            len(self._songs),
        )
        return self._songs.pop(index)

    def add_play_list(self, console: Console) -> PlayList:
        """Ask for a name and add an empty play list."""
        name = console.read_line("please enter play list name: ")
        play_list = PlayList(name)
        self._play_lists.append(play_list)
        return play_list

    def _list_play_lists(self, console: Console) -> None:
        for number, play_list in enumerate(self._play_lists, start=1):
            console.write(f"{number}) ")
            play_list.show_info(console.stdout)

    def remove_play_list(self, console: Console) -> PlayList:
        """List the added play lists and remove the one chosen."""
        self._list_play_lists(console)
        index = console.choose_index(
            "please enter play list that you want to delete: ",
            len(self._play_lists),
        )
        return self._play_lists.pop(index)

    def add_song_to_play_list(self, console: Console, song: Music) -> PlayList:
        """Add a song to the play list chosen and return that list."""
        self._list_play_lists(console)
        index = console.choose_index(
            "please enter play list that you want to add song to: ",
            len(self._play_lists),
        )
        play_list = self._play_lists[index]
        play_list.add_music(song)
        return play_list

    def remove_song_from_play_list(self, console: Console) -> Music:
        """Choose a play list, then remove the song chosen from it."""
        self._list_play_lists(console)
        play_list = self._play_lists[
            console.choose_index("please enter play list number: ", len(self._play_lists))
        ]
        for number, song in enumerate(play_list, start=1):
            console.write(f"{number}) {song}\n")
        index = console.choose_index(
            "enter song that you want to delete: ", len(play_list)
        )
        return play_list.remove_music(index)

    def add_artist_page(self, console: Console) -> Artist:
        """Ask for an artist's details and add the page."""
        name = console.read_line("artist name: ")
        albums = console.read_int("number of albums: ")
        released = console.read_int("number of released songs: ")
        artist = Artist(name, albums, released)
        self._artists.append(artist)
        while True:
            decision = console.read_int(
                "do you want to add song(1) or play list(2) for this artist? "
                "(if no, enter 0 to return): "
            )
            if decision in (0, 1, 2):
                break
            console.write(INVALID_INPUT)
        return artist

    def remove_artist_page(self, console: Console) -> Artist:
        """List the added artists and remove the one chosen."""
        for number, artist in enumerate(self._artists, start=1):
            console.write(f"{number}) ")
            artist.show_info(console.stdout)
        index = console.choose_index(
            "please enter artist that you want to delete: ", len(self._artists)
        )
        return self._artists.pop(index)

    def show_play_lists(self, out: TextIO | None = None) -> None:
        """Write the details of every added play list."""
        out = out or sys.stdout
        for play_list in self._play_lists:
            play_list.show_info(out)

    def show_added_artists(self, out: TextIO | None = None) -> None:
        """Write the details of every added artist."""
        out = out or sys.stdout
        for artist in self._artists:
            artist.show_info(out)