"""The shared store of songs, play lists and artists."""

from __future__ import annotations

import sys
from typing import TextIO

from musicplayer.artist import Artist
from musicplayer.music import Music
from musicplayer.playlist import PlayList

_EMPTY = "database is empty\n"


class MusicDatabase:
    """Holds every known song, play list and artist."""

    def __init__(self) -> None:
        self._musics: list[Music] = []
        self._play_lists: list[PlayList] = []
        self._artists: list[Artist] = []

    def add_music(self, music: Music) -> None:
        """Store a song."""
        self._musics.append(music)

    def remove_music(self, music: Music) -> None:
        """Remove the first song with the same name and artist, if any."""
        for position, stored in enumerate(self._musics):
            if stored.name == music.name and stored.artist_name == music.artist_name:
                del self._musics[position]
                return

    def add_play_list(self, play_list: PlayList) -> None:
        """Store a play list."""
        self._play_lists.append(play_list)

    def remove_play_list(self, play_list: PlayList) -> None:
        """Remove the first play list with the same name, if any."""
        for position, stored in enumerate(self._play_lists):
            if stored.name == play_list.name:
                del self._play_lists[position]
                return

    def add_artist(self, artist: Artist) -> None:
        """Store an artist."""
        self._artists.append(artist)

    def remove_artist(self, artist: Artist) -> None:
        """Remove the first artist with the same name, if any."""
        for position, stored in enumerate(self._artists):
            if stored.name == artist.name:
                del self._artists[position]
                return

    def find_music(self, name: str) -> Music | None:
        """Return the first song with this name, or None."""
        return next((m for m in self._musics if m.name == name), None)

    def find_play_list(self, name: str) -> PlayList | None:
        """Return the first play list with this name, or None."""
        return next((p for p in self._play_lists if p.name == name), None)

    def find_artist(self, name: str) -> Artist | None:
        """Return the first artist with this name, or None."""
        return next((a for a in self._artists if a.name == name), None)

    def show_all_musics(self, out: TextIO | None = None) -> None:
        """Write every stored song, or a note that there are none."""
        out = out or sys.stdout
        if not self._musics:
            out.write(_EMPTY)
            return
        for music in self._musics:
            out.write(f"{music}\n")

    def show_all_play_lists(self, out: TextIO | None = None) -> None:
        """Write every stored play list, or a note that there are none."""
        out = out or sys.stdout
        if not self._play_lists:
            out.write(_EMPTY)
            return
        for play_list in self._play_lists:
            play_list.show_info(out)

    def show_all_artists(self, out: TextIO | None = None) -> None:
        """Write every stored artist, or a note that there are none."""
        out = out or sys.stdout
        if not self._artists:
            out.write(_EMPTY)
            return
        for artist in self._artists:
            artist.show_info(out)