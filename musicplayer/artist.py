"""Artist pages with their songs and play lists."""

from __future__ import annotations

import sys
from typing import TextIO

from musicplayer.music import Music
from musicplayer.playlist import PlayList


class Artist:
    """An artist with release counts, songs and play lists."""

    def __init__(
        self,
        name: str = "",
        number_of_albums: int = 0,
        number_of_released_songs: int = 0,
    ) -> None:
        self.name = name
        self.number_of_albums = number_of_albums
        self.number_of_released_songs = number_of_released_songs
        self._songs: list[Music] = []
        self._play_lists: list[PlayList] = []

    @property
    def songs(self) -> tuple[Music, ...]:
        """The artist's released songs."""
        return tuple(self._songs)

    @property
    def play_lists(self) -> tuple[PlayList, ...]:
        """The artist's play lists."""
        return tuple(self._play_lists)

    def add_song(self, music: Music) -> None:
        """Add a song to the artist's released songs."""
        self._songs.append(music)

    def remove_song(self, index: int) -> Music:
        """Remove and return the song at a zero-based position."""
        if not 0 <= index < len(self._songs):
            raise IndexError(f"no song at position {index}")
        return self._songs.pop(index)

    def add_play_list(self, play_list: PlayList) -> None:
        """Add a play list to the artist's page."""
        self._play_lists.append(play_list)

    def remove_play_list(self, index: int) -> PlayList:
        """Remove and return the play list at a zero-based position."""
        if not 0 <= index < len(self._play_lists):
            raise IndexError(f"no play list at position {index}")
        return self._play_lists.pop(index)

    def show_info(self, out: TextIO | None = None) -> None:
        """Write the artist's name and release counts."""
        out = out or sys.stdout
        out.write(f"artist name: {self.name}\n")
        out.write(f"number of albums: {self.number_of_albums}\n")
        out.write(f"number of released songs: {self.number_of_released_songs}\n")